"""Config command: show or initialize the configuration file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stickman.constants import EXIT_LOAD_FAILURE
from stickman.paths import get_config_path


@click.command()
@click.option("--init", "init_", is_flag=True, help="Write the default config file")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.option(
    "--path",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file location (default: XDG config path)",
)
def config(init_: bool, force: bool, config_path: Path | None) -> None:
    """Show the effective configuration as TOML."""
    from stickman.config import StickmanConfig
    from stickman.errors import ConfigError

    path = config_path if config_path is not None else get_config_path()

    if init_:
        if path.exists() and not force:
            click.secho(f"Config already exists: {path} (use --force to overwrite)", fg="yellow")
            sys.exit(EXIT_LOAD_FAILURE)
        StickmanConfig().save(path)
        click.secho(f"Wrote default config to {path}", fg="green")
        return

    try:
        loaded = StickmanConfig.load(path)
    except ConfigError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(EXIT_LOAD_FAILURE)

    click.echo(f"# {path}{'' if path.exists() else ' (not found, showing defaults)'}")
    click.echo(loaded.to_toml(), nl=False)
