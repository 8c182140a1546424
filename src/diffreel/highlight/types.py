"""Syntax token data structures for Diffreel."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    """Highlighting class of a token."""

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"
    PLAIN = "plain"


@dataclass(frozen=True)
class TokenStyle:
    """Font hints for a token."""

    font_weight: Optional[str] = None
    font_style: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert style to dictionary, omitting unset fields."""
        result = {}
        if self.font_weight is not None:
            result["font_weight"] = self.font_weight
        if self.font_style is not None:
            result["font_style"] = self.font_style
        return result


@dataclass(frozen=True)
class SyntaxToken:
    """A classified, lossless slice of a source line."""

    content: str
    type: TokenType
    color: str
    style: Optional[TokenStyle] = None

    def to_dict(self) -> dict:
        """Convert token to dictionary."""
        return {
            "content": self.content,
            "type": self.type.value,
            "color": self.color,
            "style": self.style.to_dict() if self.style is not None else None,
        }
