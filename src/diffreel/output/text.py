"""Text output formatter for Diffreel."""

from diffreel.context.types import Importance
from diffreel.core.types import BatchResult, FileReport
from diffreel.diff.types import DiffLineKind
from diffreel.output.base import Formatter
from diffreel.walkthrough.scheduler import total_duration


# ANSI color codes
COLORS = {
    Importance.CRITICAL: "\033[91m",  # Red
    Importance.HIGH: "\033[93m",  # Yellow
    Importance.MEDIUM: "\033[94m",  # Blue
    Importance.LOW: "\033[90m",  # Gray
}
LINE_COLORS = {
    DiffLineKind.ADDED: "\033[92m",
    DiffLineKind.REMOVED: "\033[91m",
    DiffLineKind.HUNK: "\033[96m",
}
MARKERS = {
    DiffLineKind.ADDED: "+",
    DiffLineKind.REMOVED: "-",
    DiffLineKind.CONTEXT: " ",
    DiffLineKind.HUNK: "",
}
RESET = "\033[0m"
BOLD = "\033[1m"


class TextFormatter(Formatter):
    """Human-readable text formatter for terminal output."""

    @property
    def name(self) -> str:
        return "text"

    def format(
        self,
        result: BatchResult,
        include_lines: bool = True,
    ) -> str:
        """Format batch results as human-readable text.

        Args:
            result: The batch result to format.
            include_lines: Whether to include the diff lines of each file.

        Returns:
            Formatted text output.
        """
        lines: list[str] = []

        # Header
        lines.append(f"{BOLD}Diffreel Walkthrough{RESET}")
        lines.append(f"Target: {result.target}")
        lines.append("")

        if not result.results:
            lines.append("No changes.")
            return "\n".join(lines)

        summary = result.summary
        lines.append(
            f"{summary['files']} file(s), +{summary['additions']}/-{summary['deletions']}, "
            f"{summary['contexts']} change block(s)"
        )

        by_importance = summary["by_importance"]
        parts = []
        for level in [Importance.CRITICAL, Importance.HIGH, Importance.MEDIUM, Importance.LOW]:
            count = by_importance.get(level.value, 0)
            if count > 0:
                parts.append(f"{COLORS[level]}{count} {level.value}{RESET}")
        if parts:
            lines.append("  " + ", ".join(parts))
        lines.append("")

        for report in result.reports:
            lines.extend(self._format_report(report, include_lines))
            lines.append("")

        if result.errors:
            lines.append(f"{BOLD}Errors:{RESET}")
            for error in result.errors:
                lines.append(f"  - {error}")

        return "\n".join(lines).rstrip() + "\n"

    def _format_report(self, report: FileReport, include_lines: bool) -> list[str]:
        """Format one file's report."""
        diff = report.diff
        header = (
            f"{BOLD}{diff.file_name}{RESET} ({diff.language}, {diff.status.value}, "
            f"+{diff.stats.additions}/-{diff.stats.deletions})"
        )
        top = report.top_importance
        if top is not None:
            header += f" {COLORS[top]}top: {top.value}{RESET}"
        lines = [header]

        for context in report.contexts:
            color = COLORS[context.importance]
            lines.append(
                f"  {color}[{context.importance.value.upper()}]{RESET} "
                f"{context.summary} (lines {context.first_index}-{context.last_index})"
            )

        lines.append(f"  Walkthrough ({total_duration(report.steps)} total):")
        for step in report.steps:
            lines.append(
                f"    {step.start_line}-{step.end_line} {step.focus_type.value:<9} "
                f"{step.duration:>5}  {step.title}"
            )

        if include_lines and diff.lines:
            lines.append("")
            for line in diff.lines:
                color = LINE_COLORS.get(line.kind, "")
                reset = RESET if color else ""
                number = line.line_number
                gutter = f"{number:>5}" if number is not None else "     "
                lines.append(f"  {gutter} {color}{MARKERS[line.kind]}{line.content}{reset}")

        return lines
