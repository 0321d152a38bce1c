"""Pytest fixtures for stickman tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="stickman-tests-"))
os.environ["STICKMAN_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["STICKMAN_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


class RecordingSurface:
    """TerminalSurface fake that records every call in order."""

    def __init__(self, fail_on_write: int | None = None) -> None:
        self.calls: list[tuple] = []
        self.cursor: tuple[int, int] | None = None
        self.cells: dict[tuple[int, int], str] = {}
        self.writes: list[tuple[int, int, str]] = []
        self.flushes = 0
        self._fail_on_write = fail_on_write

    def move_cursor(self, row: int, col: int) -> None:
        self.calls.append(("move", row, col))
        self.cursor = (row, col)

    def write(self, text: str) -> None:
        if self._fail_on_write is not None and len(self.writes) == self._fail_on_write:
            self._fail_on_write = None
            raise BrokenPipeError("terminal went away")
        self.calls.append(("write", text))
        assert self.cursor is not None, "write before move_cursor"
        row, col = self.cursor
        self.writes.append((row, col, text))
        self.cells[(row, col)] = text
        self.cursor = (row, col + len(text))

    def clear_screen(self) -> None:
        self.calls.append(("clear",))
        self.cells.clear()

    def hide_cursor(self) -> None:
        self.calls.append(("hide",))

    def show_cursor(self) -> None:
        self.calls.append(("show",))

    def flush(self) -> None:
        self.calls.append(("flush",))
        self.flushes += 1

    def screen_row(self, row: int, width: int) -> str:
        return "".join(self.cells.get((row, col), " ") for col in range(width))


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def make_surface() -> Callable[..., RecordingSurface]:
    return RecordingSurface


@pytest.fixture
def write_frames(tmp_path: Path) -> Callable[[Mapping[str, str | bytes]], Path]:
    """Create an animation directory from a {filename: content} mapping."""

    def _write(files: Mapping[str, str | bytes], dirname: str = "anim") -> Path:
        directory = tmp_path / dirname
        directory.mkdir(exist_ok=True)
        for name, content in files.items():
            target = directory / name
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_bytes(content.encode("utf-8"))
        return directory

    return _write
