"""JSON output formatter for Diffreel."""

import json

from diffreel import __version__
from diffreel.core.types import BatchResult
from diffreel.output.base import Formatter


class JSONFormatter(Formatter):
    """JSON formatter for the rendering and narration stages."""

    @property
    def name(self) -> str:
        return "json"

    def format(
        self,
        result: BatchResult,
        include_lines: bool = True,
    ) -> str:
        """Format batch results as JSON.

        Args:
            result: The batch result to format.
            include_lines: Whether to include the diff lines of each file.

        Returns:
            Formatted JSON string.
        """
        output = {
            "version": __version__,
            "target": result.target,
            "summary": result.summary,
            "groups": [group.to_dict() for group in result.groups],
            "files": [],
            "errors": result.errors,
        }

        for file_result in result.results:
            entry = file_result.to_dict()
            if not include_lines and "report" in entry:
                entry["report"].pop("lines", None)
            output["files"].append(entry)

        return json.dumps(output, indent=2)
