"""Unified diff patch parser for Diffreel."""

import re
from dataclasses import dataclass
from typing import Optional

from diffreel.diff.types import ChangedFile, DiffLine, DiffLineKind, DiffStats, FileStatus, ProcessedDiff
from diffreel.lang import detect_language, get_language


class ParseError(Exception):
    """Error parsing a single file's patch."""

    pass


HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")
NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Metadata git may print ahead of the first hunk of a file
PREAMBLE_PREFIXES = (
    "diff --git",
    "index ",
    "--- ",
    "+++ ",
    "new file mode",
    "deleted file mode",
    "old mode",
    "new mode",
    "similarity index",
    "dissimilarity index",
    "rename from",
    "rename to",
    "copy from",
    "copy to",
    "Binary files ",
)


@dataclass(frozen=True)
class _ParserState:
    """Running counters threaded through the parse loop."""

    old_line: int = 0
    new_line: int = 0
    index: int = 0
    in_hunk: bool = False


def split_lines(text: str) -> list[str]:
    """Split text into physical diff lines.

    Only newlines separate lines; a trailing carriage return is dropped and a
    final newline does not start an extra line. Form feeds and other Unicode
    line breaks stay part of the line content.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_patch(patch: str) -> tuple[DiffLine, ...]:
    """Parse one file's unified-diff patch into typed lines.

    Args:
        patch: Patch text, usually starting at the first hunk header.

    Returns:
        Ordered tuple of DiffLine; empty for empty input.

    Raises:
        ParseError: If a hunk header is malformed or the patch is corrupt.
    """
    if not patch or not patch.strip():
        return ()

    state = _ParserState()
    result: list[DiffLine] = []

    for lineno, raw in enumerate(split_lines(patch), start=1):
        line, state = _parse_line(raw, state, lineno)
        if line is not None:
            result.append(line)

    return tuple(result)


def _parse_line(raw: str, state: _ParserState, lineno: int) -> tuple[Optional[DiffLine], _ParserState]:
    """Classify one physical line and return the advanced state."""
    if raw.startswith("@@"):
        match = HUNK_HEADER.match(raw)
        if not match:
            raise ParseError(f"Malformed hunk header at line {lineno}: {raw!r}")
        old_start = int(match.group(1))
        new_start = int(match.group(3))
        hunk = DiffLine(
            kind=DiffLineKind.HUNK,
            content=raw,
            old_line=None,
            new_line=None,
            original_index=state.index,
        )
        return hunk, _ParserState(
            old_line=old_start,
            new_line=new_start,
            index=state.index + 1,
            in_hunk=True,
        )

    if raw.startswith(NO_NEWLINE_MARKER):
        return None, state

    if not state.in_hunk:
        if not raw.strip() or raw.startswith(PREAMBLE_PREFIXES):
            return None, state
        raise ParseError(f"Unexpected content before first hunk at line {lineno}: {raw!r}")

    content = raw[1:]

    if raw.startswith("+"):
        line = DiffLine(
            kind=DiffLineKind.ADDED,
            content=content,
            old_line=None,
            new_line=state.new_line,
            original_index=state.index,
        )
        return line, _ParserState(
            old_line=state.old_line,
            new_line=state.new_line + 1,
            index=state.index + 1,
            in_hunk=True,
        )

    if raw.startswith("-"):
        line = DiffLine(
            kind=DiffLineKind.REMOVED,
            content=content,
            old_line=state.old_line,
            new_line=None,
            original_index=state.index,
        )
        return line, _ParserState(
            old_line=state.old_line + 1,
            new_line=state.new_line,
            index=state.index + 1,
            in_hunk=True,
        )

    # Context line (an empty physical line is an empty context line)
    line = DiffLine(
        kind=DiffLineKind.CONTEXT,
        content=content,
        old_line=state.old_line,
        new_line=state.new_line,
        original_index=state.index,
    )
    return line, _ParserState(
        old_line=state.old_line + 1,
        new_line=state.new_line + 1,
        index=state.index + 1,
        in_hunk=True,
    )


def determine_file_status(stats: DiffStats) -> FileStatus:
    """Derive a file status from its line counts."""
    if stats.additions > 0 and stats.deletions == 0:
        return FileStatus.ADDED
    if stats.additions == 0 and stats.deletions > 0:
        return FileStatus.REMOVED
    if stats.additions > 0 and stats.deletions > 0:
        return FileStatus.MODIFIED
    return FileStatus.UNCHANGED


def parse_processed_diff(
    file_name: str,
    patch: str,
    language: Optional[str] = None,
    status: Optional[FileStatus] = None,
    extra_extensions: Optional[dict[str, str]] = None,
) -> ProcessedDiff:
    """Parse a patch into a ProcessedDiff with stats and language.

    Args:
        file_name: Path of the changed file.
        patch: Patch text for that file.
        language: Optional language hint; detected from file_name if omitted.
        status: Optional host-reported status; derived from stats if omitted.
        extra_extensions: Optional extension -> language overrides.

    Returns:
        ProcessedDiff for the file.

    Raises:
        ParseError: If the patch is malformed.
    """
    lines = parse_patch(patch)
    stats = DiffStats.from_lines(lines)
    return ProcessedDiff(
        file_name=file_name,
        language=_resolve_language(file_name, language, extra_extensions),
        lines=lines,
        stats=stats,
        status=status if status is not None else determine_file_status(stats),
    )


def process_changed_file(
    changed: ChangedFile,
    extra_extensions: Optional[dict[str, str]] = None,
) -> ProcessedDiff:
    """Turn one host-supplied changed file into a ProcessedDiff.

    Files without patch text (binary files, oversized diffs) keep the counts
    the host reported and have no lines.

    Raises:
        ParseError: If the patch is malformed.
    """
    if not changed.has_patch:
        stats = DiffStats(additions=changed.additions, deletions=changed.deletions)
        return ProcessedDiff(
            file_name=changed.filename,
            language=_resolve_language(changed.filename, changed.language, extra_extensions),
            lines=(),
            stats=stats,
            status=changed.status if changed.status is not None else determine_file_status(stats),
        )

    return parse_processed_diff(
        changed.filename,
        changed.patch or "",
        language=changed.language,
        status=changed.status,
        extra_extensions=extra_extensions,
    )


def _resolve_language(
    file_name: str,
    hint: Optional[str],
    extra_extensions: Optional[dict[str, str]],
) -> str:
    if hint:
        return get_language(hint).name
    return detect_language(file_name, extra_extensions)
