"""Change context extraction module for Diffreel."""

from diffreel.context.extractor import DEFAULT_CONTEXT_SIZE, extract_change_contexts, summarize_change
from diffreel.context.scoring import DEFAULT_SCORER, ImportanceScorer, ImportanceThresholds
from diffreel.context.types import ChangeContext, Importance

__all__ = [
    "ChangeContext",
    "Importance",
    "ImportanceScorer",
    "ImportanceThresholds",
    "DEFAULT_SCORER",
    "DEFAULT_CONTEXT_SIZE",
    "extract_change_contexts",
    "summarize_change",
]
