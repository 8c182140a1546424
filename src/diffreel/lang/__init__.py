"""Language table module for Diffreel."""

from typing import Optional

from diffreel.lang.base import LanguageError, LanguageSpec, LanguageTable
from diffreel.lang.languages import BUILTIN_LANGUAGES, DEFAULT_TABLE, TEXT


def get_language(name: Optional[str]) -> LanguageSpec:
    """Get a built-in language entry, falling back to plain text."""
    return DEFAULT_TABLE.get(name)


def detect_language(path: str, extra_extensions: Optional[dict[str, str]] = None) -> str:
    """Detect a language name from a file path ("text" if unknown)."""
    return DEFAULT_TABLE.detect(path, extra_extensions).name


def is_language_supported(name: Optional[str]) -> bool:
    """Check if a language name or alias is in the built-in table."""
    return DEFAULT_TABLE.is_supported(name)


def supported_languages() -> list[str]:
    """List the names of all built-in languages."""
    return DEFAULT_TABLE.names()


__all__ = [
    "LanguageError",
    "LanguageSpec",
    "LanguageTable",
    "BUILTIN_LANGUAGES",
    "DEFAULT_TABLE",
    "TEXT",
    "get_language",
    "detect_language",
    "is_language_supported",
    "supported_languages",
]
