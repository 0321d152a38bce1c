"""Looped playback of a frame sequence with cooperative stop handling."""

from __future__ import annotations

import contextlib
import logging
import signal
import time
from typing import TYPE_CHECKING

from stickman.frame import Frame
from stickman.render import render_diff

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from types import FrameType

    from stickman.frame import FrameSequence
    from stickman.terminal import TerminalSurface

log = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class StopFlag:
    """One-way stop request, polled once per tick by :func:`play`.

    Setting it is a single attribute store, so it is safe from a signal handler.
    """

    __slots__ = ("_stopped",)

    def __init__(self) -> None:
        self._stopped = False

    def set(self) -> None:
        self._stopped = True

    @property
    def is_set(self) -> bool:
        return self._stopped


@contextlib.contextmanager
def stop_on_signals(
    flag: StopFlag,
    signals: Sequence[signal.Signals] = STOP_SIGNALS,
) -> Iterator[StopFlag]:
    """Route ``signals`` to ``flag`` for the duration of the block.

    Previous handlers are put back on exit.
    """

    def _handle(signum: int, _frame: FrameType | None) -> None:
        flag.set()

    previous = {sig: signal.signal(sig, _handle) for sig in signals}
    try:
        yield flag
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def play(
    sequence: FrameSequence,
    surface: TerminalSurface,
    stop: StopFlag,
    *,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
    on_tick: Callable[[int], None] | None = None,
) -> int:
    """Display frames in order, wrapping around, until ``stop`` is set.

    Each tick renders the current frame against the previously rendered one,
    advances the cursor modulo the sequence length and then sleeps ``delay``
    seconds. The stop flag is read once at the start of every tick.

    Args:
        sequence: Frames to cycle through.
        surface: Where cell writes go.
        stop: Polled once per tick; playback ends when it is set.
        delay: Seconds to sleep after each tick.
        sleep: Sleep function, replaceable in tests.
        max_ticks: Optional upper bound on ticks (None runs until stopped).
        on_tick: Called with the index of each frame that was displayed.

    Returns:
        Number of ticks run.
    """
    height, width = sequence.shape
    blank = Frame.blank(width=width, height=height)
    previous = blank
    cursor = 0
    ticks = 0
    count = len(sequence)

    log.info("Playback started: %d frame(s), %.3fs per frame", count, delay)
    while not stop.is_set:
        if max_ticks is not None and ticks >= max_ticks:
            break
        current = sequence[cursor]
        try:
            render_diff(surface, previous, current)
        except OSError as exc:
            log.warning("Render of frame %d failed: %s", cursor, exc)
            # Screen state is unknown; redraw everything next tick
            previous = blank
        else:
            previous = current
        if on_tick is not None:
            on_tick(cursor)
        cursor = (cursor + 1) % count
        ticks += 1
        sleep(delay)

    log.info("Playback stopped after %d tick(s)", ticks)
    return ticks
