"""Command-line application."""

from textconv.app.cli import cli

__all__ = ["cli"]
