"""Animation session: load frames, own the terminal, play, clean up."""

from __future__ import annotations

import contextlib
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from stickman.debug_log import export_logs_to_file
from stickman.loader import load_frame_set
from stickman.paths import ensure_directories
from stickman.playback import StopFlag, play, stop_on_signals
from stickman.terminal import AnsiTerminal

if TYPE_CHECKING:
    from collections.abc import Callable

    from stickman.config import PlaybackConfig
    from stickman.frame import FrameSequence

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Outcome of one playback session."""

    ticks: int
    frame_count: int
    stopped_by_signal: bool


class StickmanApp:
    """Runs one playback session.

    Frames are loaded before the terminal is touched, so a load failure
    leaves the screen alone. Stop signals are routed to the flag before
    loading starts, so an interrupt during a slow load still exits cleanly.
    Terminal restore, signal handler restore and the optional log export
    each run exactly once on every exit path.
    """

    def __init__(
        self,
        playback: PlaybackConfig,
        *,
        terminal: AnsiTerminal | None = None,
        loops: int = 0,
        debug_log_path: Path | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.playback = playback
        self.terminal = terminal if terminal is not None else AnsiTerminal()
        self.loops = loops
        self.debug_log_path = debug_log_path
        self.stop = StopFlag()
        self._sleep = sleep if sleep is not None else time.sleep
        self._sequence: FrameSequence | None = None

    @property
    def sequence(self) -> FrameSequence | None:
        return self._sequence

    def load(self) -> FrameSequence:
        """Load the frame sequence from the configured directory.

        Raises:
            AnimationLoadError: The directory or one of its frames is unusable.
        """
        self._sequence = load_frame_set(
            Path(self.playback.anim_dir),
            max_frames=self.playback.max_frames,
        )
        return self._sequence

    def run(self) -> SessionResult:
        """Load, then play until stopped or until ``loops`` cycles are done."""
        with contextlib.ExitStack() as stack:
            stack.callback(self._release)
            if self.debug_log_path is not None:
                stack.callback(self._export_logs, self.debug_log_path)

            stack.enter_context(stop_on_signals(self.stop))
            sequence = self.load()
            if self.stop.is_set:
                log.info("Stop requested during load; not starting playback")
                return SessionResult(ticks=0, frame_count=len(sequence), stopped_by_signal=True)

            max_ticks = self.loops * len(sequence) if self.loops > 0 else None
            stack.enter_context(self.terminal.session())

            ticks = play(
                sequence,
                self.terminal,
                self.stop,
                delay=self.playback.delay_seconds,
                sleep=self._sleep,
                max_ticks=max_ticks,
            )
            return SessionResult(
                ticks=ticks,
                frame_count=len(sequence),
                stopped_by_signal=self.stop.is_set,
            )

    def _release(self) -> None:
        if self._sequence is not None:
            log.debug("Releasing %d frame(s)", len(self._sequence))
        self._sequence = None

    @staticmethod
    def _export_logs(path: Path) -> None:
        try:
            ensure_directories()
            count = export_logs_to_file(path)
        except OSError as exc:
            log.error("Could not export debug log to %s: %s", path, exc)
            return
        log.debug("Exported %d log entries to %s", count, path)
