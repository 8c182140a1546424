"""Input sources: GitHub file payloads, patch files and git working trees."""

import json
import subprocess
from pathlib import Path
from typing import Any

from diffreel.diff.split import split_unified_diff
from diffreel.diff.types import ChangedFile, FileStatus


class SourceError(Exception):
    """Error reading changed files from a source."""

    pass


def changed_files_from_github(payload: Any) -> tuple[ChangedFile, ...]:
    """Convert a GitHub "list pull request files" payload.

    Accepts the bare list the API returns, or a mapping with a ``files`` key.
    Each entry may carry an extra ``language`` hint.

    Raises:
        SourceError: If the payload has the wrong shape.
    """
    if isinstance(payload, dict):
        payload = payload.get("files")
    if not isinstance(payload, list):
        raise SourceError("Expected a list of pull request files")

    files: list[ChangedFile] = []
    for entry in payload:
        if not isinstance(entry, dict) or not entry.get("filename"):
            raise SourceError(f"Pull request file entry has no filename: {entry!r}")

        status = entry.get("status")
        try:
            file_status = FileStatus(status) if status else None
        except ValueError as e:
            raise SourceError(f"Unknown file status for {entry['filename']}: {status}") from e

        files.append(
            ChangedFile(
                filename=entry["filename"],
                status=file_status,
                patch=entry.get("patch"),
                language=entry.get("language"),
                additions=int(entry.get("additions", 0)),
                deletions=int(entry.get("deletions", 0)),
                previous_filename=entry.get("previous_filename"),
            )
        )

    return tuple(files)


def load_github_json(path: str) -> tuple[ChangedFile, ...]:
    """Load a GitHub files payload saved as JSON.

    Raises:
        SourceError: If the file is not valid JSON or has the wrong shape.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise SourceError(f"Cannot read {path}: {e}") from e

    return changed_files_from_github(payload)


def git_diff(directory: Path) -> tuple[ChangedFile, ...]:
    """Get changed files of uncommitted changes in a git directory.

    Args:
        directory: Path to git repository.

    Returns:
        ChangedFile records of the diff against HEAD.

    Raises:
        SourceError: If git command fails.
    """
    try:
        # Get both staged and unstaged changes
        result = subprocess.run(
            ["git", "diff", "HEAD"],
            cwd=directory,
            capture_output=True,
            text=True,
            check=True,
        )
        diff_content = result.stdout

        # If no HEAD diff, try just staged changes
        if not diff_content.strip():
            result = subprocess.run(
                ["git", "diff", "--cached"],
                cwd=directory,
                capture_output=True,
                text=True,
                check=True,
            )
            diff_content = result.stdout

        return split_unified_diff(diff_content)

    except subprocess.CalledProcessError as e:
        raise SourceError(f"Git command failed: {e.stderr}") from e
    except FileNotFoundError:
        raise SourceError("Git not found. Is git installed?")
