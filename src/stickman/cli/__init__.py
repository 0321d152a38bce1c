"""Command-line interface for stickman."""

from stickman.cli.commands.root import cli

__all__ = ["cli"]
