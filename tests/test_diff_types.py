"""Tests for diff data structures."""

from diffreel.diff.types import ChangedFile, DiffLine, DiffLineKind, DiffStats


def make_line(kind, index, old=None, new=None, content="x"):
    return DiffLine(kind=kind, content=content, old_line=old, new_line=new, original_index=index)


class TestDiffLine:
    """Tests for DiffLine."""

    def test_is_change(self):
        """Test only added and removed lines are changes."""
        assert make_line(DiffLineKind.ADDED, 0, new=1).is_change
        assert make_line(DiffLineKind.REMOVED, 0, old=1).is_change
        assert not make_line(DiffLineKind.CONTEXT, 0, 1, 1).is_change
        assert not make_line(DiffLineKind.HUNK, 0).is_change

    def test_line_number_prefers_old(self):
        """Test the gutter number."""
        assert make_line(DiffLineKind.CONTEXT, 0, 4, 6).line_number == 4
        assert make_line(DiffLineKind.ADDED, 0, new=6).line_number == 6
        assert make_line(DiffLineKind.HUNK, 0).line_number is None

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = make_line(DiffLineKind.ADDED, 3, new=9, content="y = 1").to_dict()
        assert data == {
            "type": "added",
            "content": "y = 1",
            "old_line": None,
            "new_line": 9,
            "original_index": 3,
        }


class TestDiffStats:
    """Tests for DiffStats."""

    def test_changes(self):
        """Test changes is the sum of both counts."""
        assert DiffStats(additions=3, deletions=2).changes == 5

    def test_from_lines(self):
        """Test counting parsed lines."""
        lines = (
            make_line(DiffLineKind.HUNK, 0),
            make_line(DiffLineKind.ADDED, 1, new=1),
            make_line(DiffLineKind.ADDED, 2, new=2),
            make_line(DiffLineKind.REMOVED, 3, old=1),
            make_line(DiffLineKind.CONTEXT, 4, 2, 3),
        )
        stats = DiffStats.from_lines(lines)
        assert (stats.additions, stats.deletions, stats.changes) == (2, 1, 3)


class TestChangedFile:
    """Tests for ChangedFile."""

    def test_defaults(self):
        """Test a bare changed file."""
        changed = ChangedFile(filename="a.py")
        assert not changed.has_patch
        assert not changed.is_renamed

    def test_empty_patch_still_counts(self):
        """Test an empty string is a supplied patch."""
        assert ChangedFile(filename="a.py", patch="").has_patch

    def test_renamed(self):
        """Test rename detection."""
        assert ChangedFile(filename="b.py", previous_filename="a.py").is_renamed
        assert not ChangedFile(filename="a.py", previous_filename="a.py").is_renamed
