"""Syntax highlighting module for Diffreel."""

from diffreel.highlight.theme import DEFAULT_COLORS, DEFAULT_STYLES
from diffreel.highlight.tokenizer import tokenize, tokenize_lines
from diffreel.highlight.types import SyntaxToken, TokenStyle, TokenType

__all__ = [
    "SyntaxToken",
    "TokenStyle",
    "TokenType",
    "DEFAULT_COLORS",
    "DEFAULT_STYLES",
    "tokenize",
    "tokenize_lines",
]
