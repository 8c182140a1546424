"""Language table definitions for Diffreel."""

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional


class LanguageError(ValueError):
    """Invalid language table entry."""

    pass


@dataclass(frozen=True)
class LanguageSpec:
    """Lexical rules for one language.

    Only what line-level highlighting needs: a closed keyword set, comment
    markers and string delimiters. Anything richer belongs to a real parser.
    """

    name: str
    extensions: frozenset[str] = field(default_factory=frozenset)
    filenames: frozenset[str] = field(default_factory=frozenset)
    aliases: frozenset[str] = field(default_factory=frozenset)
    keywords: frozenset[str] = field(default_factory=frozenset)
    line_comments: tuple[str, ...] = ()
    block_comments: tuple[tuple[str, str], ...] = ()
    string_delimiters: tuple[str, ...] = ()
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        validate_language(self)

    def is_keyword(self, word: str) -> bool:
        """Check if a whole word is a keyword of this language."""
        if self.case_sensitive:
            return word in self.keywords
        return word.lower() in self.keywords

    @property
    def has_rules(self) -> bool:
        """Check if this entry recognizes anything beyond plain text."""
        return bool(
            self.keywords or self.line_comments or self.block_comments or self.string_delimiters
        )


def validate_language(spec: LanguageSpec) -> None:
    """Validate a language entry.

    Raises:
        LanguageError: If any values are invalid.
    """
    if not spec.name or spec.name != spec.name.strip().lower():
        raise LanguageError(f"Language name must be a lowercase identifier, got {spec.name!r}")

    for ext in spec.extensions:
        if not ext.startswith(".") or ext != ext.lower():
            raise LanguageError(f"{spec.name}: extension must be lowercase and start with '.', got {ext!r}")

    for marker in spec.line_comments:
        if not marker:
            raise LanguageError(f"{spec.name}: empty line comment marker")

    for opener, closer in spec.block_comments:
        if not opener or not closer:
            raise LanguageError(f"{spec.name}: empty block comment marker")

    for delimiter in spec.string_delimiters:
        if not delimiter:
            raise LanguageError(f"{spec.name}: empty string delimiter")

    if not spec.case_sensitive and any(k != k.lower() for k in spec.keywords):
        raise LanguageError(f"{spec.name}: case-insensitive keywords must be lowercase")


def _normalize(key: str) -> str:
    return key.strip().lower()


class LanguageTable:
    """Lookup table of language entries, queried by normalized key.

    Unknown names and file types resolve to the table's default entry
    instead of raising.
    """

    def __init__(self, languages: Iterable[LanguageSpec], default: LanguageSpec) -> None:
        self.default = default
        self._by_name: dict[str, LanguageSpec] = {}
        self._by_key: dict[str, LanguageSpec] = {}
        self._by_extension: dict[str, LanguageSpec] = {}
        self._by_filename: dict[str, LanguageSpec] = {}

        for spec in languages:
            self._add(spec)

    def _add(self, spec: LanguageSpec) -> None:
        if spec.name in self._by_name:
            raise LanguageError(f"Duplicate language: {spec.name}")
        self._by_name[spec.name] = spec

        for key in (spec.name, *spec.aliases):
            key = _normalize(key)
            if key in self._by_key:
                raise LanguageError(f"Language key {key!r} is claimed twice")
            self._by_key[key] = spec

        for ext in spec.extensions:
            if ext in self._by_extension:
                raise LanguageError(f"Extension {ext!r} is claimed twice")
            self._by_extension[ext] = spec

        for filename in spec.filenames:
            self._by_filename[_normalize(filename)] = spec

    def get(self, name: Optional[str]) -> LanguageSpec:
        """Get a language entry by name or alias.

        Args:
            name: Language name, alias, or None.

        Returns:
            The matching entry, or the default entry.
        """
        if not name:
            return self.default
        return self._by_key.get(_normalize(name), self.default)

    def is_supported(self, name: Optional[str]) -> bool:
        """Check if a name or alias maps to a known language."""
        if not name:
            return False
        key = _normalize(name)
        return key == self.default.name or key in self._by_key

    def detect(self, path: str, extra_extensions: Optional[dict[str, str]] = None) -> LanguageSpec:
        """Detect the language of a file from its name.

        Args:
            path: File path as reported by the diff.
            extra_extensions: Optional extension -> language name overrides.

        Returns:
            The matching entry, or the default entry.
        """
        basename = os.path.basename(path)
        ext = os.path.splitext(basename)[1].lower()

        if extra_extensions and ext in extra_extensions:
            return self.get(extra_extensions[ext])

        by_name = self._by_filename.get(_normalize(basename))
        if by_name is not None:
            return by_name

        return self._by_extension.get(ext, self.default)

    def names(self) -> list[str]:
        """Get all language names in table order."""
        return list(self._by_name.keys())

    def all(self) -> list[LanguageSpec]:
        """Get all language entries in table order."""
        return list(self._by_name.values())
