"""Terminal surface: cursor-addressed character output over ANSI escapes."""

from __future__ import annotations

import contextlib
import sys
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator

CSI = "\033["
CLEAR_SCREEN = f"{CSI}2J{CSI}H"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"


class TerminalSurface(Protocol):
    """What the renderer needs from a display device.

    Positions are 0-based; implementations translate to their own addressing.
    """

    def move_cursor(self, row: int, col: int) -> None: ...

    def write(self, text: str) -> None: ...

    def clear_screen(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def flush(self) -> None: ...


def cursor_position(row: int, col: int) -> str:
    """ANSI cursor-position sequence for a 0-based (row, col)."""
    return f"{CSI}{row + 1};{col + 1}H"


class AnsiTerminal:
    """TerminalSurface writing ANSI escape sequences to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def move_cursor(self, row: int, col: int) -> None:
        self.stream.write(cursor_position(row, col))

    def write(self, text: str) -> None:
        self.stream.write(text)

    def clear_screen(self) -> None:
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def show_cursor(self) -> None:
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()

    def flush(self) -> None:
        self.stream.flush()

    @contextlib.contextmanager
    def session(self) -> Iterator[AnsiTerminal]:
        """Clear and hide the cursor; on exit show it again and clear.

        The restore step runs even if the body raises.
        """
        self.clear_screen()
        self.hide_cursor()
        try:
            yield self
        finally:
            self.show_cursor()
            self.clear_screen()
