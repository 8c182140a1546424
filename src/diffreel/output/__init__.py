"""Output formatters for Diffreel."""

from diffreel.output.base import Formatter
from diffreel.output.json import JSONFormatter
from diffreel.output.markdown import MarkdownFormatter
from diffreel.output.text import TextFormatter

_FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
    "markdown": MarkdownFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Get a formatter by name.

    Args:
        name: Formatter name (text, json, markdown).

    Returns:
        Formatter instance.

    Raises:
        ValueError: If formatter name is unknown.
    """
    if name not in _FORMATTERS:
        raise ValueError(f"Unknown formatter: {name}")
    return _FORMATTERS[name]()


__all__ = [
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "get_formatter",
]
