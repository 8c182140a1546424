"""Formatter interface for Diffreel batch results."""

from abc import ABC, abstractmethod

from diffreel.core.types import BatchResult


class Formatter(ABC):
    """Renders a BatchResult for people or for the narration pipeline.

    Every formatter reports files in input order, keeps failed files as
    errors next to the processed ones, and can leave out the per-line diff
    when only change blocks and walkthrough steps are wanted.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used for ``--output`` and in config."""
        pass

    @abstractmethod
    def format(
        self,
        result: BatchResult,
        include_lines: bool = True,
    ) -> str:
        """Render processed files, their change blocks and walkthrough steps.

        Args:
            result: Outcome of one engine run.
            include_lines: Whether to emit every parsed diff line per file.

        Returns:
            The rendered document.
        """
        pass
