"""Diff data structures for Diffreel."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiffLineKind(Enum):
    """Type of line in a processed diff."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    HUNK = "hunk"


class FileStatus(Enum):
    """Status of a changed file, using the GitHub vocabulary."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffLine:
    """A single line of a parsed patch.

    ``original_index`` is the 0-based position of the line within the parsed
    sequence for its file and is the address every downstream stage uses.
    """

    kind: DiffLineKind
    content: str
    old_line: Optional[int]
    new_line: Optional[int]
    original_index: int

    @property
    def is_change(self) -> bool:
        """Check if this line is an addition or a removal."""
        return self.kind in (DiffLineKind.ADDED, DiffLineKind.REMOVED)

    @property
    def line_number(self) -> Optional[int]:
        """Return the number shown in a gutter (old number first)."""
        if self.old_line is not None:
            return self.old_line
        return self.new_line

    def to_dict(self) -> dict:
        """Convert line to dictionary."""
        return {
            "type": self.kind.value,
            "content": self.content,
            "old_line": self.old_line,
            "new_line": self.new_line,
            "original_index": self.original_index,
        }


@dataclass(frozen=True)
class DiffStats:
    """Line counts for one file diff."""

    additions: int = 0
    deletions: int = 0

    @property
    def changes(self) -> int:
        """Total number of changed lines."""
        return self.additions + self.deletions

    @classmethod
    def from_lines(cls, lines: tuple[DiffLine, ...]) -> "DiffStats":
        """Count additions and deletions in a parsed line sequence."""
        additions = sum(1 for line in lines if line.kind == DiffLineKind.ADDED)
        deletions = sum(1 for line in lines if line.kind == DiffLineKind.REMOVED)
        return cls(additions=additions, deletions=deletions)

    def to_dict(self) -> dict:
        """Convert stats to dictionary."""
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "changes": self.changes,
        }


@dataclass(frozen=True)
class ChangedFile:
    """One changed file as supplied by the pull-request host.

    This is the input boundary of the pipeline: fetching it (and any
    authentication) is the caller's business.
    """

    filename: str
    status: Optional[FileStatus] = None
    patch: Optional[str] = None
    language: Optional[str] = None
    additions: int = 0
    deletions: int = 0
    previous_filename: Optional[str] = None

    @property
    def has_patch(self) -> bool:
        """Check if the host supplied patch text for this file."""
        return self.patch is not None

    @property
    def is_renamed(self) -> bool:
        """Check if this file was renamed."""
        return self.previous_filename is not None and self.previous_filename != self.filename


@dataclass(frozen=True)
class ProcessedDiff:
    """A single file's parsed diff, ready for rendering and narration."""

    file_name: str
    language: str
    lines: tuple[DiffLine, ...]
    stats: DiffStats
    status: FileStatus = FileStatus.MODIFIED

    @property
    def line_count(self) -> int:
        """Number of parsed lines."""
        return len(self.lines)

    def changed_lines(self) -> tuple[DiffLine, ...]:
        """Return all added and removed lines in order."""
        return tuple(line for line in self.lines if line.is_change)

    def to_dict(self) -> dict:
        """Convert processed diff to dictionary."""
        return {
            "file_name": self.file_name,
            "language": self.language,
            "status": self.status.value,
            "stats": self.stats.to_dict(),
            "lines": [line.to_dict() for line in self.lines],
        }
