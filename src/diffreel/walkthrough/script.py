"""Scripted walkthrough files.

A script maps file names to explicit steps that replace the synthesized
schedule for that file::

    src/auth.py:
      - start_line: 0
        end_line: 12
        title: New login flow
        description: Sessions are now rotated on login
        focus_type: callout
        duration: 150
"""

from typing import Any

import yaml

from diffreel.walkthrough.types import WalkthroughStep


class ScriptError(Exception):
    """Error in a walkthrough script."""

    pass


def parse_walkthrough_script(raw: Any) -> dict[str, tuple[WalkthroughStep, ...]]:
    """Parse a loaded script mapping.

    Raises:
        ScriptError: If the script has the wrong shape or a step is invalid.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ScriptError("Walkthrough script must map file names to step lists")

    script: dict[str, tuple[WalkthroughStep, ...]] = {}
    for file_name, steps in raw.items():
        if not isinstance(steps, list):
            raise ScriptError(f"Steps for {file_name} must be a list")
        try:
            script[str(file_name)] = tuple(WalkthroughStep.from_dict(step) for step in steps)
        except (ValueError, AttributeError) as e:
            raise ScriptError(f"Invalid step for {file_name}: {e}") from e

    return script


def load_walkthrough_script(path: str) -> dict[str, tuple[WalkthroughStep, ...]]:
    """Load a walkthrough script from a YAML file.

    Raises:
        ScriptError: If the file cannot be read or parsed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScriptError(f"Invalid YAML in walkthrough script: {e}") from e
    except OSError as e:
        raise ScriptError(f"Cannot read walkthrough script: {e}") from e

    return parse_walkthrough_script(raw)
