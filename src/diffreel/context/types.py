"""Change context data structures for Diffreel."""

from dataclasses import dataclass
from enum import Enum

from diffreel.diff.types import DiffLine, DiffLineKind


class Importance(Enum):
    """Narrative significance of a change block."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def __lt__(self, other: "Importance") -> bool:
        if not isinstance(other, Importance):
            return NotImplemented
        order = [Importance.LOW, Importance.MEDIUM, Importance.HIGH, Importance.CRITICAL]
        return order.index(self) < order.index(other)

    def __le__(self, other: "Importance") -> bool:
        if not isinstance(other, Importance):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: "Importance") -> bool:
        if not isinstance(other, Importance):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Importance") -> bool:
        if not isinstance(other, Importance):
            return NotImplemented
        return not self < other


@dataclass(frozen=True)
class ChangeContext:
    """A change block with the context lines that surround it."""

    before_context: tuple[DiffLine, ...]
    change: tuple[DiffLine, ...]
    after_context: tuple[DiffLine, ...]
    summary: str
    importance: Importance

    def __post_init__(self) -> None:
        if not self.change:
            raise ValueError("ChangeContext requires at least one changed line")
        if not all(line.is_change for line in self.change):
            raise ValueError("ChangeContext.change may only hold added or removed lines")

    @property
    def first_index(self) -> int:
        """Lowest original_index covered by this context."""
        return (self.before_context or self.change)[0].original_index

    @property
    def last_index(self) -> int:
        """Highest original_index covered by this context."""
        return (self.after_context or self.change)[-1].original_index

    @property
    def additions(self) -> int:
        return sum(1 for line in self.change if line.kind == DiffLineKind.ADDED)

    @property
    def deletions(self) -> int:
        return sum(1 for line in self.change if line.kind == DiffLineKind.REMOVED)

    def to_dict(self) -> dict:
        """Convert context to dictionary."""
        return {
            "summary": self.summary,
            "importance": self.importance.value,
            "start_index": self.first_index,
            "end_index": self.last_index,
            "before_context": [line.to_dict() for line in self.before_context],
            "change": [line.to_dict() for line in self.change],
            "after_context": [line.to_dict() for line in self.after_context],
        }
