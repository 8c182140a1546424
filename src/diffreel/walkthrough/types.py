"""Walkthrough data structures for Diffreel."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FocusType(Enum):
    """How the renderer should draw attention to a step's lines."""

    HIGHLIGHT = "highlight"
    ZOOM = "zoom"
    CALLOUT = "callout"


@dataclass(frozen=True)
class WalkthroughStep:
    """A timed unit of narration focused on a range of diff lines.

    ``start_line`` and ``end_line`` are original_index positions of the
    processed diff, inclusive.
    """

    start_line: int
    end_line: int
    title: str
    description: str
    focus_type: FocusType
    duration: int

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Step duration must be >= 0, got {self.duration}")
        if self.end_line < self.start_line:
            raise ValueError(f"Step ends before it starts: {self.start_line}..{self.end_line}")

    def to_dict(self) -> dict:
        """Convert step to dictionary."""
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "title": self.title,
            "description": self.description,
            "focus_type": self.focus_type.value,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "WalkthroughStep":
        """Build a step from a mapping (e.g. a scripted walkthrough file).

        Raises:
            ValueError: If a field is missing or invalid.
        """
        try:
            return cls(
                start_line=int(raw["start_line"]),
                end_line=int(raw["end_line"]),
                title=str(raw["title"]),
                description=str(raw.get("description", "")),
                focus_type=FocusType(raw.get("focus_type", FocusType.HIGHLIGHT.value)),
                duration=int(raw["duration"]),
            )
        except KeyError as e:
            raise ValueError(f"Walkthrough step is missing field {e}") from e
        except TypeError as e:
            raise ValueError(f"Invalid walkthrough step: {e}") from e


@dataclass(frozen=True)
class StepPosition:
    """Where an elapsed time falls within a schedule."""

    index: int
    step: WalkthroughStep
    progress: float
