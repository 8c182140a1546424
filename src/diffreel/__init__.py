"""Diffreel - Turn pull-request diffs into narrated code walkthroughs."""

__version__ = "0.1.0"
