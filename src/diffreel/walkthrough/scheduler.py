"""Walkthrough scheduling for Diffreel."""

from typing import Optional, Sequence

from diffreel.context.types import ChangeContext, Importance
from diffreel.walkthrough.types import FocusType, StepPosition, WalkthroughStep

OVERVIEW_TITLE = "Overview"
OVERVIEW_DESCRIPTION = "Reviewing the file as a whole"


def schedule(
    contexts: Sequence[ChangeContext],
    total_duration: int,
    explicit_steps: Optional[Sequence[WalkthroughStep]] = None,
    line_count: Optional[int] = None,
) -> tuple[WalkthroughStep, ...]:
    """Build the narration schedule for one file.

    Args:
        contexts: Change contexts of the file, in order.
        total_duration: Budget to spread over the steps (any integer unit).
        explicit_steps: A scripted walkthrough; returned unchanged if non-empty.
        line_count: Number of parsed lines in the file, used to clamp ranges.

    Returns:
        Ordered steps. Synthesized schedules sum exactly to total_duration.

    Raises:
        ValueError: If total_duration is negative.
    """
    if explicit_steps:
        return tuple(explicit_steps)

    if total_duration < 0:
        raise ValueError(f"total_duration must be >= 0, got {total_duration}")

    last_line = max((line_count or 0) - 1, 0)

    if not contexts:
        return (
            WalkthroughStep(
                start_line=0,
                end_line=last_line,
                title=OVERVIEW_TITLE,
                description=OVERVIEW_DESCRIPTION,
                focus_type=FocusType.HIGHLIGHT,
                duration=total_duration,
            ),
        )

    share, remainder = divmod(total_duration, len(contexts))
    steps: list[WalkthroughStep] = []

    for i, context in enumerate(contexts):
        start, end = context.first_index, context.last_index
        if line_count is not None:
            start = _clamp(start, last_line)
            end = _clamp(end, last_line)

        is_last = i == len(contexts) - 1
        steps.append(
            WalkthroughStep(
                start_line=start,
                end_line=end,
                title=context.summary,
                description=f"Reviewing {context.importance.value} priority change",
                focus_type=FocusType.ZOOM if context.importance == Importance.CRITICAL else FocusType.HIGHLIGHT,
                duration=share + remainder if is_last else share,
            )
        )

    return tuple(steps)


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def locate_step(steps: Sequence[WalkthroughStep], elapsed: float) -> Optional[StepPosition]:
    """Find the step playing at an elapsed position of the schedule.

    Args:
        steps: A schedule.
        elapsed: Position from the start, in the schedule's duration unit.

    Returns:
        The active step with its progress in [0, 1), the last step with
        progress 1.0 once the schedule has finished, or None if there are
        no steps.
    """
    if not steps:
        return None

    offset = max(0.0, float(elapsed))
    for i, step in enumerate(steps):
        if offset < step.duration:
            return StepPosition(index=i, step=step, progress=offset / step.duration)
        offset -= step.duration

    return StepPosition(index=len(steps) - 1, step=steps[-1], progress=1.0)


def total_duration(steps: Sequence[WalkthroughStep]) -> int:
    """Sum the durations of a schedule."""
    return sum(step.duration for step in steps)
