"""Line tokenizer for syntax highlighting.

Tokens are a flat, lossless partition of the input line: joining their
``content`` gives the line back exactly.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from diffreel.highlight.theme import DEFAULT_COLORS, DEFAULT_STYLES
from diffreel.highlight.types import SyntaxToken, TokenType
from diffreel.lang import get_language
from diffreel.lang.base import LanguageSpec

IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
NUMBER = re.compile(r"\d+(?:\.\d+)?")


@dataclass(frozen=True)
class _Rules:
    """Markers of one language, longest first."""

    comments: tuple[tuple[str, Optional[str]], ...]
    delimiters: tuple[str, ...]


@lru_cache(maxsize=None)
def _rules_for(spec: LanguageSpec) -> _Rules:
    comments: list[tuple[str, Optional[str]]] = [(marker, None) for marker in spec.line_comments]
    comments.extend(spec.block_comments)
    return _Rules(
        comments=tuple(sorted(comments, key=lambda c: len(c[0]), reverse=True)),
        delimiters=tuple(sorted(spec.string_delimiters, key=len, reverse=True)),
    )


def tokenize(
    line: str,
    language: Union[str, LanguageSpec, None],
    colors: Optional[dict[TokenType, str]] = None,
) -> tuple[SyntaxToken, ...]:
    """Split one line of code into highlighting tokens.

    Args:
        line: The line content, without diff prefix or newline.
        language: Language name/alias, or a LanguageSpec.
        colors: Optional per-type color overrides.

    Returns:
        Tokens in line order. An unknown language yields a single plain
        token; an empty line yields no tokens.
    """
    if not line:
        return ()

    spec = language if isinstance(language, LanguageSpec) else get_language(language)
    palette = {**DEFAULT_COLORS, **(colors or {})}

    if not spec.has_rules:
        return (_make_token(line, TokenType.PLAIN, palette),)

    rules = _rules_for(spec)
    tokens: list[SyntaxToken] = []
    pending_plain: list[str] = []
    pos = 0

    while pos < len(line):
        token_type, end = _next_token(line, pos, spec, rules)

        if token_type is TokenType.PLAIN:
            pending_plain.append(line[pos:end])
        else:
            if pending_plain:
                tokens.append(_make_token("".join(pending_plain), TokenType.PLAIN, palette))
                pending_plain = []
            tokens.append(_make_token(line[pos:end], token_type, palette))
        pos = end

    if pending_plain:
        tokens.append(_make_token("".join(pending_plain), TokenType.PLAIN, palette))

    return tuple(tokens)


def _next_token(line: str, pos: int, spec: LanguageSpec, rules: _Rules) -> tuple[TokenType, int]:
    """Classify the token starting at pos and return (type, end)."""
    for opener, closer in rules.comments:
        if line.startswith(opener, pos):
            if closer is None:
                return TokenType.COMMENT, len(line)
            close_at = line.find(closer, pos + len(opener))
            if close_at == -1:
                return TokenType.COMMENT, len(line)
            return TokenType.COMMENT, close_at + len(closer)

    for delimiter in rules.delimiters:
        if line.startswith(delimiter, pos):
            return TokenType.STRING, _string_end(line, pos, delimiter)

    match = IDENTIFIER.match(line, pos)
    if match:
        if spec.is_keyword(match.group()):
            return TokenType.KEYWORD, match.end()
        return TokenType.PLAIN, match.end()

    match = NUMBER.match(line, pos)
    if match:
        return TokenType.NUMBER, match.end()

    return TokenType.PLAIN, pos + 1


def _string_end(line: str, pos: int, delimiter: str) -> int:
    """Find the end of a string literal, or the end of an unterminated one."""
    i = pos + len(delimiter)
    while i < len(line):
        if line[i] == "\\":
            i += 2
            continue
        if line.startswith(delimiter, i):
            return i + len(delimiter)
        i += 1
    return len(line)


def _make_token(content: str, token_type: TokenType, palette: dict[TokenType, str]) -> SyntaxToken:
    return SyntaxToken(
        content=content,
        type=token_type,
        color=palette[token_type],
        style=DEFAULT_STYLES.get(token_type),
    )


def tokenize_lines(lines: list[str], language: Union[str, LanguageSpec, None]) -> list[tuple[SyntaxToken, ...]]:
    """Tokenize several lines of the same language."""
    spec = language if isinstance(language, LanguageSpec) else get_language(language)
    return [tokenize(line, spec) for line in lines]
