"""Default token colors and styles."""

from diffreel.highlight.types import TokenStyle, TokenType

DEFAULT_COLORS: dict[TokenType, str] = {
    TokenType.KEYWORD: "#7c3aed",
    TokenType.STRING: "#16a34a",
    TokenType.COMMENT: "#6b7280",
    TokenType.NUMBER: "#d97706",
    TokenType.PLAIN: "#1f2937",
}

DEFAULT_STYLES: dict[TokenType, TokenStyle] = {
    TokenType.KEYWORD: TokenStyle(font_weight="bold"),
    TokenType.COMMENT: TokenStyle(font_style="italic"),
}
