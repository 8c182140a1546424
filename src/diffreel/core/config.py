"""Configuration loading and validation for Diffreel."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from diffreel.context.extractor import DEFAULT_CONTEXT_SIZE
from diffreel.context.scoring import ImportanceScorer, ImportanceThresholds
from diffreel.lang import is_language_supported

CONFIG_FILENAMES = (".diffreel.yaml", ".diffreel.yml")
OUTPUT_FORMATS = {"text", "json", "markdown"}
DEFAULT_DURATION = 300


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass
class ScoringConfig:
    """Configuration for importance scoring."""

    critical: int = 6
    high: int = 4
    medium: int = 2
    security_keywords: list[str] = field(default_factory=list)
    structural_keywords: list[str] = field(default_factory=list)
    error_keywords: list[str] = field(default_factory=list)

    def build_scorer(self) -> ImportanceScorer:
        """Create the scorer described by this config."""
        return ImportanceScorer.with_extra_keywords(
            security=self.security_keywords,
            structural=self.structural_keywords,
            error_handling=self.error_keywords,
            thresholds=ImportanceThresholds(
                critical=self.critical,
                high=self.high,
                medium=self.medium,
            ),
        )


@dataclass
class Config:
    """Full application configuration."""

    context_size: int = DEFAULT_CONTEXT_SIZE
    duration: int = DEFAULT_DURATION
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    extensions: dict[str, str] = field(default_factory=dict)
    output_format: str = "text"
    workers: int = 1
    ignore_paths: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_config(self)


def validate_config(config: Config) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If any values are invalid.
    """
    if not isinstance(config.context_size, int) or config.context_size < 0:
        raise ConfigError(f"context_size must be a non-negative integer, got {config.context_size}")

    if not isinstance(config.duration, int) or config.duration < 0:
        raise ConfigError(f"duration must be a non-negative integer, got {config.duration}")

    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {sorted(OUTPUT_FORMATS)}, got {config.output_format}"
        )

    if not isinstance(config.workers, int) or config.workers < 1:
        raise ConfigError(f"workers must be a positive integer, got {config.workers}")

    scoring = config.scoring
    if not scoring.critical >= scoring.high >= scoring.medium >= 0:
        raise ConfigError(
            "scoring thresholds must satisfy critical >= high >= medium >= 0, "
            f"got {scoring.critical}/{scoring.high}/{scoring.medium}"
        )

    for ext, language in config.extensions.items():
        if not ext.startswith("."):
            raise ConfigError(f"Extension must start with '.', got {ext!r}")
        if not is_language_supported(language):
            raise ConfigError(f"Unknown language for {ext}: {language}")


def find_config_file(start_path: Optional[str] = None) -> Optional[str]:
    """Find .diffreel.yaml in current directory or parents.

    Args:
        start_path: Starting directory (defaults to cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path:
        current = Path(start_path).resolve()
    else:
        current = Path.cwd()

    while True:
        for name in CONFIG_FILENAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)

        # Stop at git root
        if (current / ".git").exists():
            break

        # Stop at filesystem root
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, searches for .diffreel.yaml.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    if raw is None:
        return Config()

    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a mapping")

    return _parse_config(raw)


def _section(raw: dict, name: str) -> dict:
    """Get a top-level section, treating null as empty."""
    value = raw.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return value


def _parse_config(raw: dict) -> Config:
    """Parse raw YAML dict into Config object."""
    extract = _section(raw, "extract")
    walkthrough = _section(raw, "walkthrough")
    settings = _section(raw, "settings")
    languages = _section(raw, "languages")
    ignore = _section(raw, "ignore")

    extensions = languages.get("extensions") or {}
    if not isinstance(extensions, dict):
        raise ConfigError("languages.extensions must be a mapping")

    ignore_paths = ignore.get("paths") or []
    if not isinstance(ignore_paths, list):
        raise ConfigError("ignore.paths must be a list")

    return Config(
        context_size=extract.get("context_size", DEFAULT_CONTEXT_SIZE),
        duration=walkthrough.get("duration", DEFAULT_DURATION),
        scoring=_parse_scoring_config(_section(raw, "scoring")),
        extensions={str(k).lower(): str(v) for k, v in extensions.items()},
        output_format=settings.get("output_format", "text"),
        workers=settings.get("workers", 1),
        ignore_paths=[str(p) for p in ignore_paths],
    )


def _parse_scoring_config(raw: dict) -> ScoringConfig:
    """Parse scoring configuration."""
    thresholds = raw.get("thresholds") or {}
    keywords = raw.get("keywords") or {}
    if not isinstance(thresholds, dict) or not isinstance(keywords, dict):
        raise ConfigError("scoring.thresholds and scoring.keywords must be mappings")

    defaults = ScoringConfig()
    try:
        return ScoringConfig(
            critical=int(thresholds.get("critical", defaults.critical)),
            high=int(thresholds.get("high", defaults.high)),
            medium=int(thresholds.get("medium", defaults.medium)),
            security_keywords=list(keywords.get("security") or []),
            structural_keywords=list(keywords.get("structural") or []),
            error_keywords=list(keywords.get("error_handling") or []),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid scoring configuration: {e}") from e


def merge_cli_args(config: Config, **kwargs: Any) -> Config:
    """Merge CLI arguments into configuration.

    CLI args take precedence over config file values.

    Args:
        config: Base configuration.
        **kwargs: CLI arguments (context_size, duration, output_format, workers)

    Returns:
        New Config with merged values.
    """
    overrides = {
        name: kwargs[name]
        for name in ("context_size", "duration", "output_format", "workers")
        if kwargs.get(name) is not None
    }

    return Config(
        context_size=overrides.get("context_size", config.context_size),
        duration=overrides.get("duration", config.duration),
        scoring=config.scoring,
        extensions=dict(config.extensions),
        output_format=overrides.get("output_format", config.output_format),
        workers=overrides.get("workers", config.workers),
        ignore_paths=list(config.ignore_paths),
    )
