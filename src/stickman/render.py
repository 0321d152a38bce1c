"""Differential rendering: write only the cells that changed."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stickman.frame import Frame
    from stickman.terminal import TerminalSurface


class CellWrite(NamedTuple):
    """One character update at a 0-based screen position."""

    row: int
    col: int
    char: str


def diff_frames(previous: Frame, current: Frame) -> Iterator[CellWrite]:
    """Yield the cells of ``current`` that differ from ``previous``, row-major."""
    if previous.shape != current.shape:
        raise ValueError(f"Cannot diff frames of shape {previous.shape} and {current.shape}")
    for row, (old_row, new_row) in enumerate(zip(previous.rows, current.rows, strict=True)):
        if old_row == new_row:
            continue
        for col, (old, new) in enumerate(zip(old_row, new_row, strict=True)):
            if old != new:
                yield CellWrite(row, col, new)


def render_diff(surface: TerminalSurface, previous: Frame, current: Frame) -> int:
    """Bring ``surface`` from ``previous`` to ``current`` and return the write count.

    Unchanged cells are never touched, so identical frames produce no output.
    """
    writes = 0
    for write in diff_frames(previous, current):
        surface.move_cursor(write.row, write.col)
        surface.write(write.char)
        writes += 1
    if writes:
        surface.flush()
    return writes
