"""Tests for output formatters."""

import json
from pathlib import Path

import pytest

from diffreel.core.config import Config
from diffreel.core.engine import NarrationEngine
from diffreel.core.types import BatchResult
from diffreel.output import get_formatter
from diffreel.output.json import JSONFormatter
from diffreel.output.markdown import MarkdownFormatter
from diffreel.output.text import TextFormatter

PR_FILES = Path(__file__).parent.parent / "fixtures" / "pr_files.json"


@pytest.fixture
def sample_result() -> BatchResult:
    """Process the pull request fixture."""
    return NarrationEngine(Config(), quiet=True).process_target(str(PR_FILES))


@pytest.fixture
def empty_result() -> BatchResult:
    """Create an empty result."""
    return BatchResult(target="empty.patch")


class TestGetFormatter:
    """Tests for get_formatter."""

    @pytest.mark.parametrize(
        "name,cls",
        [("text", TextFormatter), ("json", JSONFormatter), ("markdown", MarkdownFormatter)],
    )
    def test_known(self, name, cls):
        """Test known formatter names."""
        formatter = get_formatter(name)
        assert isinstance(formatter, cls)
        assert formatter.name == name

    def test_unknown(self):
        """Test unknown formatter names."""
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("sarif")


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_structure(self, sample_result):
        """Test the top-level document."""
        data = json.loads(JSONFormatter().format(sample_result))

        assert data["version"] == "0.1.0"
        assert data["target"].endswith("pr_files.json")
        assert data["summary"]["files"] == 4
        assert len(data["files"]) == 4
        assert len(data["errors"]) == 1
        assert data["groups"][0]["files"] == ["src/auth/session.py"]

    def test_file_entries(self, sample_result):
        """Test per-file reports and errors."""
        files = json.loads(JSONFormatter().format(sample_result))["files"]

        session = files[0]["report"]
        assert files[0]["status"] == "ok"
        assert session["language"] == "python"
        assert session["lines"][0]["type"] == "hunk"
        assert session["contexts"][0]["importance"] == "critical"
        assert session["walkthrough"][0]["focus_type"] == "zoom"

        assert files[2]["status"] == "error"
        assert "Malformed hunk header" in files[2]["error"]

    def test_without_lines(self, sample_result):
        """Test lines can be omitted."""
        files = json.loads(JSONFormatter().format(sample_result, include_lines=False))["files"]
        assert "lines" not in files[0]["report"]
        assert "contexts" in files[0]["report"]

    def test_empty(self, empty_result):
        """Test an empty result is valid JSON."""
        data = json.loads(JSONFormatter().format(empty_result))
        assert data["files"] == []
        assert data["summary"]["files"] == 0


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_contents(self, sample_result):
        """Test the report mentions files, blocks and errors."""
        output = TextFormatter().format(sample_result)

        assert "Diffreel Walkthrough" in output
        assert "src/auth/session.py" in output
        assert "[CRITICAL]" in output
        assert "Modified 2 lines (+2/-1)" in output
        assert "Errors:" in output
        assert "broken.py" in output

    def test_file_summary_lines(self, sample_result):
        """Test each file shows its top importance and walkthrough total."""
        output = TextFormatter().format(sample_result)

        assert "top: critical" in output
        assert "Walkthrough (300 total):" in output

    def test_lines_included(self, sample_result):
        """Test diff lines appear by default."""
        output = TextFormatter().format(sample_result)
        assert "self.token = new_token()" in output

    def test_lines_omitted(self, sample_result):
        """Test diff lines can be left out."""
        output = TextFormatter().format(sample_result, include_lines=False)
        assert "self.token = new_token()" not in output

    def test_empty(self, empty_result):
        """Test output for no changes."""
        assert "No changes." in TextFormatter().format(empty_result)


class TestMarkdownFormatter:
    """Tests for MarkdownFormatter."""

    def test_contents(self, sample_result):
        """Test headings, step table and diff block."""
        output = MarkdownFormatter().format(sample_result)

        assert output.startswith("## Diffreel Walkthrough")
        assert "### `src/auth/session.py`" in output
        assert "| Step | Lines | Focus | Duration | Title | Description |" in output
        assert "| 1 | 1-5 | zoom | 300 |" in output
        assert "```diff" in output
        assert "+        self.token = new_token()" in output
        assert "### Errors" in output

    def test_top_importance(self, sample_result):
        """Test files with change blocks show their top importance."""
        output = MarkdownFormatter().format(sample_result)

        assert "Top importance: :red_circle: **critical**" in output
        assert output.count("Top importance:") == 2

    def test_without_lines(self, sample_result):
        """Test diff blocks can be omitted."""
        assert "```diff" not in MarkdownFormatter().format(sample_result, include_lines=False)

    def test_empty(self, empty_result):
        """Test output for no changes."""
        assert "No changes." in MarkdownFormatter().format(empty_result)
