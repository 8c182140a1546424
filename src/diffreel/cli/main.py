"""Diffreel CLI entry point."""

import json
import sys
from pathlib import Path

import click

from diffreel import __version__
from diffreel.core.config import ConfigError, load_config, merge_cli_args
from diffreel.core.engine import EngineError, NarrationEngine
from diffreel.highlight import tokenize
from diffreel.lang import DEFAULT_TABLE, is_language_supported
from diffreel.output import get_formatter
from diffreel.walkthrough.script import ScriptError, load_walkthrough_script


@click.group()
@click.version_option(version=__version__, prog_name="diffreel")
def cli() -> None:
    """Diffreel - Turn pull-request diffs into narrated code walkthroughs.

    Parse per-file patches, find and score change blocks, and schedule a
    timed walkthrough for the narration and rendering stages.
    """
    pass


@cli.command()
@click.argument("target", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["text", "json", "markdown"]),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "-f",
    "--output-file",
    type=click.Path(),
    default=None,
    help="Write output to file (default: stdout).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Config file path (default: .diffreel.yaml).",
)
@click.option(
    "--context-size",
    type=click.IntRange(min=0),
    default=None,
    help="Context lines around each change block (default: 3).",
)
@click.option(
    "--duration",
    type=click.IntRange(min=0),
    default=None,
    help="Walkthrough budget per file (default: 300).",
)
@click.option(
    "--steps",
    "steps_path",
    type=click.Path(exists=True),
    default=None,
    help="YAML walkthrough script overriding the generated steps.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Process files on this many threads (default: 1).",
)
@click.option(
    "--no-lines",
    is_flag=True,
    default=False,
    help="Omit diff lines from output.",
)
@click.option(
    "--fail-on-error",
    is_flag=True,
    default=False,
    help="Exit non-zero if any file failed to parse.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output.")
def process(
    target: str,
    output_format: str | None,
    output_file: str | None,
    config_path: str | None,
    context_size: int | None,
    duration: int | None,
    steps_path: str | None,
    workers: int | None,
    no_lines: bool,
    fail_on_error: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Process changed files and output their walkthroughs.

    TARGET can be a patch file (.patch, .diff), a GitHub pull request
    files payload (.json), or a directory with uncommitted git changes.
    """
    try:
        config = load_config(config_path)
        config = merge_cli_args(
            config,
            context_size=context_size,
            duration=duration,
            output_format=output_format,
            workers=workers,
        )

        script = load_walkthrough_script(steps_path) if steps_path else None

        engine = NarrationEngine(config, verbose=verbose, quiet=quiet)
        result = engine.process_target(target, script=script)

        formatter = get_formatter(config.output_format)
        output = formatter.format(result, include_lines=not no_lines)

        if output_file:
            Path(output_file).write_text(output)
            if not quiet:
                click.echo(f"Output written to {output_file}")
        else:
            click.echo(output)

        if fail_on_error and result.failed:
            sys.exit(1)

    except (ConfigError, ScriptError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except EngineError as e:
        click.echo(f"Processing error: {e}", err=True)
        sys.exit(3)


@cli.command("tokenize")
@click.argument("line")
@click.option(
    "-l",
    "--language",
    default="text",
    help="Language name or alias (default: text).",
)
@click.option("--json", "as_json", is_flag=True, help="Print tokens as JSON.")
def tokenize_command(line: str, language: str, as_json: bool) -> None:
    """Print the highlighting tokens of one line of code."""
    if not is_language_supported(language):
        click.echo(f"Unknown language '{language}', using plain text.", err=True)

    tokens = tokenize(line, language)

    if as_json:
        click.echo(json.dumps([token.to_dict() for token in tokens], indent=2))
        return

    for token in tokens:
        click.echo(f"{token.type.value:<8} {token.content!r}")


@cli.command("languages")
def list_languages() -> None:
    """List supported languages."""
    click.echo("Supported languages:\n")
    for spec in DEFAULT_TABLE.all():
        extensions = " ".join(sorted(spec.extensions | spec.filenames))
        click.echo(f"  {spec.name:<12} {extensions}")


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing config file.",
)
def init(force: bool) -> None:
    """Create .diffreel.yaml config file."""
    config_path = Path(".diffreel.yaml")

    if config_path.exists() and not force:
        click.echo(
            "Config file already exists. Use --force to overwrite.", err=True
        )
        sys.exit(1)

    default_config = """\
# Diffreel configuration

extract:
  context_size: 3

walkthrough:
  duration: 300

scoring:
  thresholds:
    critical: 6
    high: 4
    medium: 2
  keywords:
    security: []
    structural: []
    error_handling: []

languages:
  extensions: {}
  # extensions:
  #   ".svelte": html

settings:
  output_format: text
  workers: 1

ignore:
  paths:
    - "*.lock"
    - "**/dist/**"
"""
    config_path.write_text(default_config)
    click.echo(f"Created {config_path}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
