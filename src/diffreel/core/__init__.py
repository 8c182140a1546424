"""Core module for Diffreel."""

from diffreel.core.config import (
    Config,
    ConfigError,
    ScoringConfig,
    find_config_file,
    load_config,
    merge_cli_args,
)
from diffreel.core.types import BatchResult, FileReport, FileResult

__all__ = [
    "FileReport",
    "FileResult",
    "BatchResult",
    "Config",
    "ConfigError",
    "ScoringConfig",
    "load_config",
    "find_config_file",
    "merge_cli_args",
]
