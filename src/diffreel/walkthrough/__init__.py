"""Walkthrough scheduling module for Diffreel."""

from diffreel.walkthrough.scheduler import locate_step, schedule, total_duration
from diffreel.walkthrough.script import ScriptError, load_walkthrough_script, parse_walkthrough_script
from diffreel.walkthrough.types import FocusType, StepPosition, WalkthroughStep

__all__ = [
    "FocusType",
    "StepPosition",
    "WalkthroughStep",
    "schedule",
    "locate_step",
    "total_duration",
    "ScriptError",
    "load_walkthrough_script",
    "parse_walkthrough_script",
]
