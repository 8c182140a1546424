"""Tests for the line tokenizer."""

import pytest

from diffreel.highlight import DEFAULT_COLORS, TokenType, tokenize, tokenize_lines
from diffreel.lang import get_language, supported_languages


def kinds(tokens):
    return [(t.type, t.content) for t in tokens]


SAMPLE_LINES = [
    "def add(a, b): return a + 42  # sum",
    'const s = "a\\"b"; // note',
    "int x = 3.14; /* block */ y++;",
    "SELECT * FROM t WHERE id = 'x' -- trailing",
    "unterminated = 'abc",
    '    x = """doc""" + `tpl` # c',
    "<!-- html --> <div class=\"a\">",
    "\\",
    "   ",
]


class TestTokenize:
    """Tests for tokenize."""

    def test_python_example(self):
        """Test the documented python example."""
        tokens = tokenize("def add(a, b): return a + 42  # sum", "python")

        assert kinds(tokens) == [
            (TokenType.KEYWORD, "def"),
            (TokenType.PLAIN, " add(a, b): "),
            (TokenType.KEYWORD, "return"),
            (TokenType.PLAIN, " a + "),
            (TokenType.NUMBER, "42"),
            (TokenType.PLAIN, "  "),
            (TokenType.COMMENT, "# sum"),
        ]

    def test_whole_line_comment(self):
        """Test a line that is only a comment."""
        tokens = tokenize("// todo: fix", "javascript")
        assert kinds(tokens) == [(TokenType.COMMENT, "// todo: fix")]

    def test_empty_line(self):
        """Test an empty line yields no tokens."""
        assert tokenize("", "python") == ()

    def test_unknown_language_single_plain_token(self):
        """Test unknown languages degrade to plain text."""
        tokens = tokenize("def x(): pass", "brainfuck")
        assert kinds(tokens) == [(TokenType.PLAIN, "def x(): pass")]

    def test_escaped_string_then_comment(self):
        """Test escapes do not end a string early."""
        tokens = tokenize('const s = "a\\"b"; // note', "javascript")

        assert kinds(tokens) == [
            (TokenType.KEYWORD, "const"),
            (TokenType.PLAIN, " s = "),
            (TokenType.STRING, '"a\\"b"'),
            (TokenType.PLAIN, "; "),
            (TokenType.COMMENT, "// note"),
        ]

    def test_unterminated_string_runs_to_end(self):
        """Test an unclosed string covers the rest of the line."""
        tokens = tokenize("x = 'abc", "python")
        assert kinds(tokens) == [(TokenType.PLAIN, "x = "), (TokenType.STRING, "'abc")]

    def test_triple_quoted_string(self):
        """Test the longest delimiter wins."""
        tokens = tokenize('s = """doc"""', "python")
        assert kinds(tokens)[-1] == (TokenType.STRING, '"""doc"""')

    def test_comment_marker_inside_string(self):
        """Test comment markers in strings stay in the string."""
        tokens = tokenize('url = "http://x"', "javascript")
        assert kinds(tokens)[-1] == (TokenType.STRING, '"http://x"')

    def test_block_comment(self):
        """Test a closed block comment in mid-line."""
        tokens = tokenize("int x; /* c */ y", "c")
        assert kinds(tokens) == [
            (TokenType.KEYWORD, "int"),
            (TokenType.PLAIN, " x; "),
            (TokenType.COMMENT, "/* c */"),
            (TokenType.PLAIN, " y"),
        ]

    def test_sql_keywords_case_insensitive(self):
        """Test SQL keyword matching ignores case."""
        tokens = tokenize("SELECT id from users", "sql")
        assert kinds(tokens) == [
            (TokenType.KEYWORD, "SELECT"),
            (TokenType.PLAIN, " id "),
            (TokenType.KEYWORD, "from"),
            (TokenType.PLAIN, " users"),
        ]

    def test_keyword_inside_identifier_is_plain(self):
        """Test keywords only match whole words."""
        tokens = tokenize("format = 1", "python")
        assert kinds(tokens) == [(TokenType.PLAIN, "format = "), (TokenType.NUMBER, "1")]

    def test_digits_in_identifier(self):
        """Test digits inside identifiers are not numbers."""
        tokens = tokenize("abc123", "python")
        assert kinds(tokens) == [(TokenType.PLAIN, "abc123")]

    def test_decimal_number(self):
        """Test a decimal is one number token."""
        tokens = tokenize("x = 3.14", "python")
        assert kinds(tokens)[-1] == (TokenType.NUMBER, "3.14")

    def test_colors_and_styles(self):
        """Test tokens carry the palette color and font hints."""
        tokens = tokenize("def f(): # c", "python")

        assert tokens[0].color == DEFAULT_COLORS[TokenType.KEYWORD]
        assert tokens[0].style.font_weight == "bold"
        assert tokens[-1].style.font_style == "italic"
        assert tokens[1].style is None

    def test_color_override(self):
        """Test per-type color overrides."""
        tokens = tokenize("return", "python", colors={TokenType.KEYWORD: "#ff0000"})
        assert tokens[0].color == "#ff0000"

    def test_accepts_language_spec(self):
        """Test a LanguageSpec can be passed directly."""
        tokens = tokenize("return", get_language("python"))
        assert tokens[0].type == TokenType.KEYWORD

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = tokenize("return", "python")[0].to_dict()
        assert data == {
            "content": "return",
            "type": "keyword",
            "color": DEFAULT_COLORS[TokenType.KEYWORD],
            "style": {"font_weight": "bold"},
        }

    @pytest.mark.parametrize("language", supported_languages() + ["text", "unknown"])
    @pytest.mark.parametrize("line", SAMPLE_LINES)
    def test_lossless(self, language, line):
        """Test joined token content always equals the input line."""
        tokens = tokenize(line, language)

        assert "".join(t.content for t in tokens) == line
        assert all(t.content for t in tokens)

    @pytest.mark.parametrize("line", SAMPLE_LINES)
    def test_no_adjacent_plain_tokens(self, line):
        """Test plain fragments are merged."""
        tokens = tokenize(line, "python")
        for left, right in zip(tokens, tokens[1:]):
            assert not (left.type == right.type == TokenType.PLAIN)


class TestTokenizeLines:
    """Tests for tokenize_lines."""

    def test_one_result_per_line(self):
        """Test every line is tokenized."""
        result = tokenize_lines(["import os", "", "x = 1"], "python")

        assert len(result) == 3
        assert result[1] == ()
        assert result[0][0].type == TokenType.KEYWORD
