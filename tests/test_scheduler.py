"""Tests for walkthrough scheduling."""

import pytest

from diffreel.context.extractor import extract_change_contexts
from diffreel.context.types import ChangeContext, Importance
from diffreel.diff.parser import parse_patch
from diffreel.diff.types import DiffLine, DiffLineKind
from diffreel.walkthrough.scheduler import locate_step, schedule, total_duration
from diffreel.walkthrough.types import FocusType, WalkthroughStep


def make_context(index, importance=Importance.LOW, summary="Added 1 line"):
    line = DiffLine(DiffLineKind.ADDED, "x", None, index + 1, index)
    return ChangeContext((), (line,), (), summary, importance)


def make_step(start=0, end=0, duration=10, title="Step"):
    return WalkthroughStep(
        start_line=start,
        end_line=end,
        title=title,
        description="",
        focus_type=FocusType.CALLOUT,
        duration=duration,
    )


class TestSchedule:
    """Tests for schedule."""

    def test_even_split(self):
        """Test three contexts share the budget evenly."""
        contexts = [make_context(1), make_context(5), make_context(9)]
        steps = schedule(contexts, 90)

        assert [s.duration for s in steps] == [30, 30, 30]
        assert [(s.start_line, s.end_line) for s in steps] == [(1, 1), (5, 5), (9, 9)]

    def test_no_contexts_overview(self):
        """Test a file without changes gets one overview step."""
        steps = schedule([], 60, line_count=12)

        assert len(steps) == 1
        assert steps[0].duration == 60
        assert (steps[0].start_line, steps[0].end_line) == (0, 11)
        assert steps[0].title == "Overview"
        assert steps[0].focus_type == FocusType.HIGHLIGHT

    def test_no_contexts_no_lines(self):
        """Test the overview of an empty file."""
        steps = schedule([], 60)
        assert (steps[0].start_line, steps[0].end_line) == (0, 0)

    def test_remainder_goes_to_last_step(self):
        """Test uneven budgets still sum exactly."""
        contexts = [make_context(1), make_context(2), make_context(3)]
        assert [s.duration for s in schedule(contexts, 100)] == [33, 33, 34]

    def test_budget_smaller_than_steps(self):
        """Test budgets below the step count."""
        contexts = [make_context(i) for i in range(4)]
        assert [s.duration for s in schedule(contexts, 2)] == [0, 0, 0, 2]

    def test_zero_budget(self):
        """Test a zero budget gives zero-length steps."""
        steps = schedule([make_context(1), make_context(2)], 0)
        assert [s.duration for s in steps] == [0, 0]

    def test_negative_budget_rejected(self):
        """Test a negative budget is an error."""
        with pytest.raises(ValueError):
            schedule([make_context(1)], -1)

    def test_explicit_steps_returned_unchanged(self):
        """Test a scripted walkthrough overrides synthesis."""
        explicit = (make_step(0, 3, 7, "Intro"), make_step(4, 9, 13, "Body"))
        steps = schedule([make_context(1)], 90, explicit_steps=explicit)

        assert steps == explicit
        assert total_duration(steps) == 20

    def test_empty_explicit_steps_ignored(self):
        """Test an empty script falls back to synthesis."""
        steps = schedule([make_context(1)], 90, explicit_steps=[])
        assert steps[0].duration == 90

    def test_titles_and_focus(self):
        """Test step text and focus come from the context."""
        steps = schedule(
            [make_context(1, Importance.CRITICAL, "Added 1 line"), make_context(3, Importance.MEDIUM)],
            10,
        )

        assert steps[0].title == "Added 1 line"
        assert steps[0].description == "Reviewing critical priority change"
        assert steps[0].focus_type == FocusType.ZOOM
        assert steps[1].focus_type == FocusType.HIGHLIGHT

    def test_ranges_cover_context_window(self):
        """Test steps span before and after context."""
        lines = parse_patch("@@ -1,3 +1,4 @@\n line1\n-line2\n+line2 modified\n+line3\n line4")
        contexts = extract_change_contexts(lines)
        step = schedule(contexts, 30, line_count=len(lines))[0]

        assert (step.start_line, step.end_line) == (1, 5)

    def test_clamped_to_line_count(self):
        """Test ranges are clamped to the file."""
        step = schedule([make_context(20)], 10, line_count=5)[0]
        assert (step.start_line, step.end_line) == (4, 4)

    @pytest.mark.parametrize("budget", [0, 1, 7, 60, 299, 1000])
    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_sum_matches_budget(self, budget, count):
        """Test synthesized durations always sum to the budget."""
        steps = schedule([make_context(i) for i in range(count)], budget)
        assert total_duration(steps) == budget
        assert all(s.duration >= 0 for s in steps)


class TestLocateStep:
    """Tests for locate_step."""

    def test_empty(self):
        """Test no steps."""
        assert locate_step([], 5) is None

    def test_positions(self):
        """Test the active step and progress."""
        steps = [make_step(duration=10), make_step(duration=30)]

        first = locate_step(steps, 5)
        assert first.index == 0
        assert first.progress == pytest.approx(0.5)

        second = locate_step(steps, 25)
        assert second.index == 1
        assert second.progress == pytest.approx(0.5)

    def test_before_start(self):
        """Test negative positions clamp to the start."""
        assert locate_step([make_step(duration=10)], -3).progress == 0.0

    def test_after_end(self):
        """Test finished schedules report the last step complete."""
        position = locate_step([make_step(duration=10), make_step(duration=10)], 50)
        assert position.index == 1
        assert position.progress == 1.0

    def test_zero_duration_steps_skipped(self):
        """Test zero-length steps are never active."""
        steps = [make_step(duration=0), make_step(duration=10)]
        assert locate_step(steps, 0).index == 1


class TestWalkthroughStep:
    """Tests for WalkthroughStep validation."""

    def test_negative_duration(self):
        """Test durations cannot be negative."""
        with pytest.raises(ValueError):
            make_step(duration=-1)

    def test_inverted_range(self):
        """Test ranges cannot run backwards."""
        with pytest.raises(ValueError):
            make_step(start=5, end=2)

    def test_from_dict(self):
        """Test building a step from a mapping."""
        step = WalkthroughStep.from_dict(
            {"start_line": 1, "end_line": 4, "title": "Intro", "duration": 20}
        )
        assert step.focus_type == FocusType.HIGHLIGHT
        assert step.description == ""
        assert step.to_dict()["duration"] == 20

    def test_from_dict_missing_field(self):
        """Test missing fields are reported."""
        with pytest.raises(ValueError, match="missing field"):
            WalkthroughStep.from_dict({"start_line": 1})

    def test_from_dict_bad_focus(self):
        """Test unknown focus types are rejected."""
        with pytest.raises(ValueError):
            WalkthroughStep.from_dict(
                {"start_line": 1, "end_line": 1, "title": "x", "duration": 1, "focus_type": "spin"}
            )
