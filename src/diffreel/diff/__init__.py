"""Diff parsing module for Diffreel."""

from diffreel.diff.parser import (
    ParseError,
    determine_file_status,
    parse_patch,
    parse_processed_diff,
    process_changed_file,
    split_lines,
)
from diffreel.diff.split import split_diff_file, split_unified_diff
from diffreel.diff.types import ChangedFile, DiffLine, DiffLineKind, DiffStats, FileStatus, ProcessedDiff

__all__ = [
    "DiffLineKind",
    "DiffLine",
    "DiffStats",
    "FileStatus",
    "ChangedFile",
    "ProcessedDiff",
    "ParseError",
    "parse_patch",
    "parse_processed_diff",
    "process_changed_file",
    "determine_file_status",
    "split_lines",
    "split_unified_diff",
    "split_diff_file",
]
