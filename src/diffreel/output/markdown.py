"""Markdown output formatter for Diffreel."""

from diffreel.context.types import Importance
from diffreel.core.types import BatchResult, FileReport
from diffreel.diff.types import DiffLineKind
from diffreel.output.base import Formatter

IMPORTANCE_EMOJI = {
    Importance.CRITICAL: ":red_circle:",
    Importance.HIGH: ":orange_circle:",
    Importance.MEDIUM: ":yellow_circle:",
    Importance.LOW: ":white_circle:",
}


class MarkdownFormatter(Formatter):
    """Markdown formatter for PR comments and narration drafts."""

    @property
    def name(self) -> str:
        return "markdown"

    def format(
        self,
        result: BatchResult,
        include_lines: bool = True,
    ) -> str:
        """Format batch results as Markdown.

        Args:
            result: The batch result to format.
            include_lines: Whether to include a diff block per file.

        Returns:
            Formatted Markdown string.
        """
        lines: list[str] = []

        lines.append("## Diffreel Walkthrough")
        lines.append("")

        if not result.results:
            lines.append("No changes.")
            return "\n".join(lines)

        summary = result.summary
        lines.append(
            f"**{summary['files']} file(s)** in `{result.target}`: "
            f"+{summary['additions']}/-{summary['deletions']}"
        )
        lines.append("")

        if result.groups:
            lines.append("### Change groups")
            lines.append("")
            for group in result.groups:
                lines.append(
                    f"- **{group.description}** ({group.type.value}, {group.impact.value} impact): "
                    f"{', '.join(f'`{d.file_name}`' for d in group.files)}"
                )
            lines.append("")

        for report in result.reports:
            lines.extend(self._format_report(report, include_lines))

        if result.errors:
            lines.append("### Errors")
            lines.append("")
            for error in result.errors:
                lines.append(f"- {error}")
            lines.append("")

        return "\n".join(lines)

    def _format_report(self, report: FileReport, include_lines: bool) -> list[str]:
        """Format one file's section."""
        diff = report.diff
        lines = [f"### `{diff.file_name}`", ""]

        top = report.top_importance
        if top is not None:
            lines.append(f"Top importance: {IMPORTANCE_EMOJI[top]} **{top.value}**")
            lines.append("")

        lines.append("| Step | Lines | Focus | Duration | Title | Description |")
        lines.append("|------|-------|-------|----------|-------|-------------|")
        for i, step in enumerate(report.steps, start=1):
            title = step.title.replace("|", "\\|")
            description = step.description.replace("|", "\\|")
            lines.append(
                f"| {i} | {step.start_line}-{step.end_line} | {step.focus_type.value} "
                f"| {step.duration} | {title} | {description} |"
            )
        lines.append("")

        for context in report.contexts:
            emoji = IMPORTANCE_EMOJI[context.importance]
            lines.append(f"- {emoji} {context.importance.value.upper()}: {context.summary}")
        if report.contexts:
            lines.append("")

        if include_lines and diff.lines:
            lines.append("```diff")
            for line in diff.lines:
                if line.kind == DiffLineKind.HUNK:
                    lines.append(line.content)
                elif line.kind == DiffLineKind.ADDED:
                    lines.append(f"+{line.content}")
                elif line.kind == DiffLineKind.REMOVED:
                    lines.append(f"-{line.content}")
                else:
                    lines.append(f" {line.content}")
            lines.append("```")
            lines.append("")

        return lines
