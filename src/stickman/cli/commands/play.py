"""Play command: load frames and run the animation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from stickman.constants import EXIT_LOAD_FAILURE
from stickman.paths import get_debug_log_path

log = logging.getLogger(__name__)


@click.command()
@click.option(
    "-d",
    "--delay",
    type=click.IntRange(min=1),
    default=None,
    help="Animation delay in milliseconds (default: 100, or the config value)",
)
@click.option(
    "-a",
    "--anim-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory holding one text file per frame (default: anim)",
)
@click.option(
    "-n",
    "--loops",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Stop after this many full cycles (0 plays until interrupted)",
)
@click.option(
    "--debug-log",
    "debug_log",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write the captured debug log to this file on exit",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Write the captured debug log to the default data directory on exit",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file to read (default: XDG config path)",
)
def play(
    delay: int | None,
    anim_dir: Path | None,
    loops: int,
    debug_log: Path | None,
    debug: bool,
    config_path: Path | None,
) -> None:
    """Play the animation (default command). Press Ctrl+C to stop."""
    from stickman.app import StickmanApp
    from stickman.config import StickmanConfig
    from stickman.debug_log import clear_log_buffer, entries_at_least, setup_debug_logging
    from stickman.errors import AnimationLoadError, ConfigError

    setup_debug_logging()
    clear_log_buffer()
    if debug and debug_log is None:
        debug_log = get_debug_log_path()

    try:
        loaded = StickmanConfig.load(config_path)
    except ConfigError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(EXIT_LOAD_FAILURE)

    updates: dict[str, object] = {}
    if delay is not None:
        updates["delay_ms"] = delay
    if anim_dir is not None:
        updates["anim_dir"] = str(anim_dir)
    playback = loaded.playback.model_copy(update=updates)

    app = StickmanApp(playback, loops=loops, debug_log_path=debug_log)
    try:
        result = app.run()
    except AnimationLoadError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(EXIT_LOAD_FAILURE)
    except MemoryError:
        click.secho("Error: Memory allocation failed", fg="red", err=True)
        sys.exit(EXIT_LOAD_FAILURE)

    for entry in entries_at_least(logging.WARNING):
        click.secho(f"Warning: {entry.message}", fg="yellow", err=True)
    log.debug("Session finished after %d tick(s)", result.ticks)
