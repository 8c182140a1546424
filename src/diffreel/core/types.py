"""Core result types for Diffreel."""

from dataclasses import dataclass, field
from typing import Optional

from diffreel.context.types import ChangeContext, Importance
from diffreel.core.grouping import ChangeGroup
from diffreel.diff.types import ProcessedDiff
from diffreel.walkthrough.types import WalkthroughStep


@dataclass(frozen=True)
class FileReport:
    """Everything the narration layer needs for one file."""

    diff: ProcessedDiff
    contexts: tuple[ChangeContext, ...]
    steps: tuple[WalkthroughStep, ...]

    @property
    def top_importance(self) -> Optional[Importance]:
        """Highest importance among the file's contexts."""
        if not self.contexts:
            return None
        return max(context.importance for context in self.contexts)

    def to_dict(self) -> dict:
        """Convert report to dictionary."""
        result = self.diff.to_dict()
        result["contexts"] = [context.to_dict() for context in self.contexts]
        result["walkthrough"] = [step.to_dict() for step in self.steps]
        return result


@dataclass(frozen=True)
class FileResult:
    """Outcome of processing one file: a report or an error."""

    file_name: str
    report: Optional[FileReport] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.report is None) == (self.error is None):
            raise ValueError("FileResult needs exactly one of report or error")

    @property
    def ok(self) -> bool:
        return self.report is not None

    @classmethod
    def success(cls, report: FileReport) -> "FileResult":
        return cls(file_name=report.diff.file_name, report=report)

    @classmethod
    def failure(cls, file_name: str, error: str) -> "FileResult":
        return cls(file_name=file_name, error=error)

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        if self.report is not None:
            return {"file_name": self.file_name, "status": "ok", "report": self.report.to_dict()}
        return {"file_name": self.file_name, "status": "error", "error": self.error}


@dataclass
class BatchResult:
    """Result of processing every changed file of a target."""

    target: str
    results: list[FileResult] = field(default_factory=list)
    groups: tuple[ChangeGroup, ...] = ()
    errors: list[str] = field(default_factory=list)

    @property
    def reports(self) -> list[FileReport]:
        """Reports of the files that processed successfully."""
        return [r.report for r in self.results if r.report is not None]

    @property
    def failed(self) -> list[FileResult]:
        """Results of the files that failed to parse."""
        return [r for r in self.results if not r.ok]

    @property
    def summary(self) -> dict:
        """Generate summary statistics."""
        by_importance: dict[str, int] = {}
        additions = 0
        deletions = 0

        for report in self.reports:
            additions += report.diff.stats.additions
            deletions += report.diff.stats.deletions
            for context in report.contexts:
                level = context.importance.value
                by_importance[level] = by_importance.get(level, 0) + 1

        return {
            "files": len(self.results),
            "processed": len(self.reports),
            "failed": len(self.failed),
            "additions": additions,
            "deletions": deletions,
            "changes": additions + deletions,
            "contexts": sum(by_importance.values()),
            "by_importance": by_importance,
        }
