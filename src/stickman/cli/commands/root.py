"""Root CLI command registration."""

from __future__ import annotations

import click

from stickman import __version__

from .config import config
from .play import play

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Play a looped text animation in the terminal.

    Each file in the animation directory is one 80x24 frame; files are
    shown in byte-wise name order.

    Press Ctrl+C to stop the animation.
    """
    if version:
        click.echo(f"stickman version {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(play)


cli.add_command(play)
cli.add_command(config)
