"""Split multi-file unified diffs into per-file patches."""

import re
from pathlib import Path
from typing import Optional

from diffreel.diff.parser import HUNK_HEADER, ParseError, split_lines
from diffreel.diff.types import ChangedFile, FileStatus


DIFF_GIT_HEADER = re.compile(r"^diff --git a/(.*) b/(.*)$")
OLD_FILE_HEADER = re.compile(r"^--- (?:a/)?(.+?)(?:\t.*)?$")
NEW_FILE_HEADER = re.compile(r"^\+\+\+ (?:b/)?(.+?)(?:\t.*)?$")
BINARY_FILES = re.compile(r"^Binary files .* and .* differ$")
DEV_NULL = "/dev/null"


def split_unified_diff(content: str) -> tuple[ChangedFile, ...]:
    """Split a unified diff (e.g. ``git diff`` output) into changed files.

    Each file's patch text starts at its first hunk header, matching what
    the GitHub API reports per file.

    Args:
        content: The unified diff content as a string.

    Returns:
        ChangedFile records in diff order.
    """
    if not content or not content.strip():
        return ()

    lines = split_lines(content)
    files: list[ChangedFile] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if DIFF_GIT_HEADER.match(line) or _is_file_header(lines, i):
            changed, i = _split_file(lines, i)
            if changed is not None:
                files.append(changed)
            continue

        i += 1

    return tuple(files)


def split_diff_file(path: str) -> tuple[ChangedFile, ...]:
    """Split a diff read from a file.

    Raises:
        ParseError: If the file cannot be read.
        FileNotFoundError: If the file does not exist.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Diff file not found: {path}")

    try:
        content = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        try:
            content = filepath.read_text(encoding="latin-1")
        except Exception as e:
            raise ParseError(f"Cannot read diff file: {e}") from e

    return split_unified_diff(content)


def _is_file_header(lines: list[str], i: int) -> bool:
    """Check for a ``---``/``+++`` pair starting at line i."""
    return (
        lines[i].startswith("--- ")
        and i + 1 < len(lines)
        and lines[i + 1].startswith("+++ ")
    )


def _split_file(lines: list[str], start: int) -> tuple[Optional[ChangedFile], int]:
    """Collect one file's section.

    Returns:
        Tuple of (ChangedFile or None, next line index)
    """
    i = start
    old_path: Optional[str] = None
    new_path: Optional[str] = None
    status = FileStatus.MODIFIED

    git_match = DIFF_GIT_HEADER.match(lines[i])
    if git_match:
        # Tentative paths from git header
        old_path = git_match.group(1)
        new_path = git_match.group(2)
        i += 1

    # Metadata lines
    while i < len(lines):
        line = lines[i]
        if line.startswith("new file mode"):
            status = FileStatus.ADDED
        elif line.startswith("deleted file mode"):
            status = FileStatus.REMOVED
        elif line.startswith("rename from") or line.startswith("rename to"):
            status = FileStatus.RENAMED
        elif line.startswith("copy from") or line.startswith("copy to"):
            status = FileStatus.COPIED
        elif not (
            line.startswith("index ")
            or line.startswith("old mode")
            or line.startswith("new mode")
            or line.startswith("similarity index")
            or line.startswith("dissimilarity index")
        ):
            break
        i += 1

    if i < len(lines) and BINARY_FILES.match(lines[i]):
        path = new_path or old_path
        if path is None:
            return None, i + 1
        return (
            ChangedFile(
                filename=path,
                status=status,
                patch=None,
                previous_filename=_previous_name(old_path, new_path),
            ),
            i + 1,
        )

    if i < len(lines) and lines[i].startswith("--- "):
        old_match = OLD_FILE_HEADER.match(lines[i])
        if old_match:
            path_str = old_match.group(1)
            old_path = None if path_str == DEV_NULL else path_str
            if old_path is None:
                status = FileStatus.ADDED
        i += 1

    if i < len(lines) and lines[i].startswith("+++ "):
        new_match = NEW_FILE_HEADER.match(lines[i])
        if new_match:
            path_str = new_match.group(1)
            new_path = None if path_str == DEV_NULL else path_str
            if new_path is None:
                status = FileStatus.REMOVED
        i += 1

    body: list[str] = []
    additions = 0
    deletions = 0
    in_hunk = False
    # Lines still owed by the current hunk header
    old_left = 0
    new_left = 0

    while i < len(lines):
        line = lines[i]

        # Next file, only once the current hunk is used up
        if old_left <= 0 and new_left <= 0 and (
            DIFF_GIT_HEADER.match(line) or _is_file_header(lines, i)
        ):
            break

        if line.startswith("@@"):
            in_hunk = True
            old_left, new_left = _hunk_lengths(line)
        elif in_hunk and line.startswith("+"):
            additions += 1
            new_left -= 1
        elif in_hunk and line.startswith("-"):
            deletions += 1
            old_left -= 1
        elif in_hunk and not line.startswith("\\"):
            old_left -= 1
            new_left -= 1

        if in_hunk:
            body.append(line)
        i += 1

    path = new_path or old_path
    if path is None:
        return None, i

    if status == FileStatus.MODIFIED and _previous_name(old_path, new_path):
        status = FileStatus.RENAMED

    return (
        ChangedFile(
            filename=path,
            status=status,
            patch="\n".join(body) if body else "",
            additions=additions,
            deletions=deletions,
            previous_filename=_previous_name(old_path, new_path),
        ),
        i,
    )


def _hunk_lengths(header: str) -> tuple[int, int]:
    """Old and new line counts announced by a hunk header (0, 0 if malformed)."""
    match = HUNK_HEADER.match(header)
    if not match:
        return 0, 0
    old_len = int(match.group(2)) if match.group(2) is not None else 1
    new_len = int(match.group(4)) if match.group(4) is not None else 1
    return old_len, new_len


def _previous_name(old_path: Optional[str], new_path: Optional[str]) -> Optional[str]:
    if old_path is not None and new_path is not None and old_path != new_path:
        return old_path
    return None
