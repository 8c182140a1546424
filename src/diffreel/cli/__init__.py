"""Command-line interface for Diffreel."""
