"""Tests for change grouping."""

from diffreel.context.types import Importance
from diffreel.core.grouping import ChangeType, group_related_changes
from diffreel.diff.types import DiffStats, FileStatus, ProcessedDiff


def make_diff(name, language="python", status=FileStatus.MODIFIED, additions=1, deletions=1):
    return ProcessedDiff(
        file_name=name,
        language=language,
        lines=(),
        stats=DiffStats(additions=additions, deletions=deletions),
        status=status,
    )


class TestGroupRelatedChanges:
    """Tests for group_related_changes."""

    def test_empty(self):
        """Test no diffs means no groups."""
        assert group_related_changes([]) == ()

    def test_groups_by_language_and_status(self):
        """Test bucketing keys."""
        groups = group_related_changes([
            make_diff("a.py"),
            make_diff("b.py"),
            make_diff("c.js", language="javascript"),
            make_diff("d.py", status=FileStatus.ADDED, deletions=0),
        ])

        assert len(groups) == 3
        by_description = {g.description: g for g in groups}
        assert [d.file_name for d in by_description["python improvements"].files] == ["a.py", "b.py"]
        assert by_description["New python files"].type == ChangeType.ADDITION
        assert by_description["javascript improvements"].type == ChangeType.MODIFICATION

    def test_deletion_group(self):
        """Test removed files form a deletion group."""
        groups = group_related_changes([make_diff("a.go", "go", FileStatus.REMOVED, 0, 9)])
        assert groups[0].type == ChangeType.DELETION
        assert groups[0].description == "Removed go files"

    def test_refactor_and_impact(self):
        """Test large groups become refactors with higher impact."""
        groups = group_related_changes([make_diff("big.py", additions=150, deletions=100)])
        group = groups[0]

        assert group.type == ChangeType.REFACTOR
        assert group.impact == Importance.HIGH
        assert group.complexity == 10
        assert group.total_changes == 250

    def test_medium_impact(self):
        """Test the medium impact band."""
        groups = group_related_changes([make_diff("mid.py", additions=40, deletions=20)])
        assert groups[0].impact == Importance.MEDIUM
        assert groups[0].complexity == 6

    def test_sorted_by_significance(self):
        """Test the most significant group comes first."""
        groups = group_related_changes([
            make_diff("small.js", language="javascript"),
            make_diff("big.py", additions=300),
        ])
        assert groups[0].files[0].file_name == "big.py"

    def test_ties_keep_first_seen_order(self):
        """Test equal groups keep input order."""
        groups = group_related_changes([
            make_diff("a.rs", language="rust"),
            make_diff("b.go", language="go"),
        ])
        assert [g.files[0].language for g in groups] == ["rust", "go"]

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = group_related_changes([make_diff("a.py")])[0].to_dict()
        assert data["files"] == ["a.py"]
        assert data["type"] == "modification"
        assert data["impact"] == "low"
        assert data["changes"] == 2
