"""Change context extraction for Diffreel."""

from dataclasses import dataclass
from typing import Optional

from diffreel.context.scoring import DEFAULT_SCORER, ImportanceScorer
from diffreel.context.types import ChangeContext
from diffreel.diff.types import DiffLine, DiffLineKind

DEFAULT_CONTEXT_SIZE = 3


@dataclass(frozen=True)
class _Run:
    """Positions of one merged change run within the line sequence."""

    start: int
    end: int  # inclusive


def extract_change_contexts(
    lines: tuple[DiffLine, ...],
    context_size: int = DEFAULT_CONTEXT_SIZE,
    scorer: Optional[ImportanceScorer] = None,
) -> tuple[ChangeContext, ...]:
    """Group changed lines into scored context windows.

    Runs of added/removed lines separated by no more than
    ``2 * context_size`` context lines (and no hunk header) are merged, so
    windows never overlap and come out in line order.

    Args:
        lines: Parsed lines of one file, in original_index order.
        context_size: Context lines to keep on each side of a change.
        scorer: Importance scorer (defaults to the built-in heuristic).

    Returns:
        Ordered tuple of ChangeContext; empty if nothing changed.

    Raises:
        ValueError: If context_size is negative.
    """
    if context_size < 0:
        raise ValueError(f"context_size must be >= 0, got {context_size}")

    scorer = scorer or DEFAULT_SCORER
    lines = tuple(lines)
    contexts: list[ChangeContext] = []

    for run in _find_runs(lines, max_gap=2 * context_size):
        change = tuple(line for line in lines[run.start:run.end + 1] if line.is_change)
        contexts.append(
            ChangeContext(
                before_context=_before(lines, run.start, context_size),
                change=change,
                after_context=_after(lines, run.end, context_size),
                summary=summarize_change(change),
                importance=scorer.score(change),
            )
        )

    return tuple(contexts)


def _find_runs(lines: tuple[DiffLine, ...], max_gap: int) -> list[_Run]:
    """Single scan for change runs, merging across short context gaps."""
    runs: list[_Run] = []
    start: Optional[int] = None
    end = -1
    gap = 0
    gap_has_hunk = False

    for i, line in enumerate(lines):
        if line.is_change:
            if start is not None and (gap > max_gap or gap_has_hunk):
                runs.append(_Run(start, end))
                start = None
            if start is None:
                start = i
            end = i
            gap = 0
            gap_has_hunk = False
        elif start is not None:
            if line.kind == DiffLineKind.HUNK:
                gap_has_hunk = True
            else:
                gap += 1

    if start is not None:
        runs.append(_Run(start, end))

    return runs


def _before(lines: tuple[DiffLine, ...], start: int, size: int) -> tuple[DiffLine, ...]:
    collected: list[DiffLine] = []
    i = start - 1
    while i >= 0 and len(collected) < size and lines[i].kind == DiffLineKind.CONTEXT:
        collected.append(lines[i])
        i -= 1
    return tuple(reversed(collected))


def _after(lines: tuple[DiffLine, ...], end: int, size: int) -> tuple[DiffLine, ...]:
    collected: list[DiffLine] = []
    i = end + 1
    while i < len(lines) and len(collected) < size and lines[i].kind == DiffLineKind.CONTEXT:
        collected.append(lines[i])
        i += 1
    return tuple(collected)


def summarize_change(change: tuple[DiffLine, ...]) -> str:
    """Describe a change run in a few words."""
    additions = sum(1 for line in change if line.kind == DiffLineKind.ADDED)
    deletions = sum(1 for line in change if line.kind == DiffLineKind.REMOVED)

    if additions and deletions:
        count = max(additions, deletions)
        return f"Modified {count} {_lines(count)} (+{additions}/-{deletions})"
    if additions:
        return f"Added {additions} {_lines(additions)}"
    if deletions:
        return f"Removed {deletions} {_lines(deletions)}"
    return "No changes"


def _lines(count: int) -> str:
    return "line" if count == 1 else "lines"
