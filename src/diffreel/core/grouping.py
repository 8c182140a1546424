"""Group processed diffs into storytelling units."""

from dataclasses import dataclass
from enum import Enum

from diffreel.context.types import Importance
from diffreel.diff.types import FileStatus, ProcessedDiff

REFACTOR_THRESHOLD = 100
HIGH_IMPACT_THRESHOLD = 200
MEDIUM_IMPACT_THRESHOLD = 50

IMPACT_WEIGHT = {
    Importance.HIGH: 3,
    Importance.MEDIUM: 2,
    Importance.LOW: 1,
}


class ChangeType(Enum):
    """Kind of change a group of files represents."""

    ADDITION = "addition"
    DELETION = "deletion"
    MODIFICATION = "modification"
    REFACTOR = "refactor"


@dataclass(frozen=True)
class ChangeGroup:
    """Files of one language sharing a change pattern."""

    type: ChangeType
    description: str
    files: tuple[ProcessedDiff, ...]
    impact: Importance
    complexity: int

    @property
    def total_changes(self) -> int:
        return sum(diff.stats.changes for diff in self.files)

    def to_dict(self) -> dict:
        """Convert group to dictionary."""
        return {
            "type": self.type.value,
            "description": self.description,
            "files": [diff.file_name for diff in self.files],
            "impact": self.impact.value,
            "complexity": self.complexity,
            "changes": self.total_changes,
        }


def group_related_changes(diffs: list[ProcessedDiff]) -> tuple[ChangeGroup, ...]:
    """Group diffs by language and status, most significant group first.

    Args:
        diffs: Processed diffs of one pull request.

    Returns:
        Groups sorted by impact weight times complexity, descending.
        Equal groups keep first-seen order.
    """
    buckets: dict[tuple[str, FileStatus], list[ProcessedDiff]] = {}
    for diff in diffs:
        buckets.setdefault((diff.language, diff.status), []).append(diff)

    groups: list[ChangeGroup] = []
    for (language, status), files in buckets.items():
        total = sum(diff.stats.changes for diff in files)

        if status == FileStatus.ADDED:
            change_type = ChangeType.ADDITION
            description = f"New {language} files"
        elif status == FileStatus.REMOVED:
            change_type = ChangeType.DELETION
            description = f"Removed {language} files"
        elif total > REFACTOR_THRESHOLD:
            change_type = ChangeType.REFACTOR
            description = f"Major {language} refactoring"
        else:
            change_type = ChangeType.MODIFICATION
            description = f"{language} improvements"

        if total > HIGH_IMPACT_THRESHOLD:
            impact = Importance.HIGH
        elif total > MEDIUM_IMPACT_THRESHOLD:
            impact = Importance.MEDIUM
        else:
            impact = Importance.LOW

        groups.append(
            ChangeGroup(
                type=change_type,
                description=description,
                files=tuple(files),
                impact=impact,
                complexity=min(10, total // 10),
            )
        )

    groups.sort(key=lambda g: IMPACT_WEIGHT[g.impact] * g.complexity, reverse=True)
    return tuple(groups)
