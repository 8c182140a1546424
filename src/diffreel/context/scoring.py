"""Importance scoring for change blocks.

The score is a sum of points over one change run:

- size: 30+ lines +3, 10+ lines +2, 4+ lines +1
- security-related words +6
- structural declarations +2
- error-handling words +1
- deletion weight: pure deletion of 5+ lines +2, otherwise removals at least
  twice the additions (and 3+) +1

Levels: 6+ critical, 4+ high, 2+ medium, otherwise low. Words and their
snake_case or camelCase parts match whole and case-insensitively, so identical
input always scores identically.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from diffreel.context.types import Importance
from diffreel.diff.types import DiffLine, DiffLineKind

SECURITY_KEYWORDS = frozenset({
    "auth", "authenticate", "authentication", "authorization", "authorize",
    "credential", "credentials", "crypto", "csrf", "decrypt", "encrypt",
    "jwt", "login", "oauth", "password", "passwd", "permission",
    "permissions", "private_key", "sanitize", "secret", "secrets",
    "security", "session", "token", "xss",
})

STRUCTURAL_KEYWORDS = frozenset({
    "class", "def", "enum", "export", "fn", "func", "function", "impl",
    "interface", "module", "struct", "trait", "type",
})

ERROR_HANDLING_KEYWORDS = frozenset({
    "catch", "error", "except", "exception", "finally", "panic", "raise",
    "rescue", "throw", "throws", "try",
})

SIZE_POINTS = ((30, 3), (10, 2), (4, 1))

WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
WORD_PART = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


@dataclass(frozen=True)
class ImportanceThresholds:
    """Minimum scores for each importance level."""

    critical: int = 6
    high: int = 4
    medium: int = 2

    def __post_init__(self) -> None:
        if not self.critical >= self.high >= self.medium >= 0:
            raise ValueError(
                "Importance thresholds must satisfy critical >= high >= medium >= 0, "
                f"got {self.critical}/{self.high}/{self.medium}"
            )

    def level(self, score: int) -> Importance:
        """Map a score to an importance level."""
        if score >= self.critical:
            return Importance.CRITICAL
        if score >= self.high:
            return Importance.HIGH
        if score >= self.medium:
            return Importance.MEDIUM
        return Importance.LOW


@dataclass(frozen=True)
class ImportanceScorer:
    """Deterministic importance heuristic for change runs."""

    security_keywords: frozenset[str] = SECURITY_KEYWORDS
    structural_keywords: frozenset[str] = STRUCTURAL_KEYWORDS
    error_keywords: frozenset[str] = ERROR_HANDLING_KEYWORDS
    thresholds: ImportanceThresholds = field(default_factory=ImportanceThresholds)

    @classmethod
    def with_extra_keywords(
        cls,
        security: Iterable[str] = (),
        structural: Iterable[str] = (),
        error_handling: Iterable[str] = (),
        thresholds: Optional[ImportanceThresholds] = None,
    ) -> "ImportanceScorer":
        """Build a scorer extending the default keyword sets."""
        return cls(
            security_keywords=SECURITY_KEYWORDS | {w.lower() for w in security},
            structural_keywords=STRUCTURAL_KEYWORDS | {w.lower() for w in structural},
            error_keywords=ERROR_HANDLING_KEYWORDS | {w.lower() for w in error_handling},
            thresholds=thresholds or ImportanceThresholds(),
        )

    def points(self, change: tuple[DiffLine, ...]) -> int:
        """Compute the raw score of a change run."""
        added = sum(1 for line in change if line.kind == DiffLineKind.ADDED)
        removed = sum(1 for line in change if line.kind == DiffLineKind.REMOVED)
        words = _words(change)

        score = 0
        for minimum, points in SIZE_POINTS:
            if added + removed >= minimum:
                score += points
                break

        if words & self.security_keywords:
            score += 6
        if words & self.structural_keywords:
            score += 2
        if words & self.error_keywords:
            score += 1

        if added == 0 and removed >= 5:
            score += 2
        elif removed >= 2 * added and removed >= 3:
            score += 1

        return score

    def score(self, change: tuple[DiffLine, ...]) -> Importance:
        """Classify a change run."""
        return self.thresholds.level(self.points(change))


DEFAULT_SCORER = ImportanceScorer()


def _words(change: tuple[DiffLine, ...]) -> set[str]:
    """Lowercased words of a change run, plus their snake/camel case parts."""
    words: set[str] = set()
    for line in change:
        for word in WORD.findall(line.content):
            words.add(word.lower())
            words.update(part.lower() for part in WORD_PART.findall(word))
    return words
