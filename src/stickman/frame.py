"""Fixed-size character grid for one terminal screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stickman.constants import FILLER
from stickman.limits import FRAME_HEIGHT, FRAME_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class Frame:
    """An immutable grid of ``height`` rows, each exactly ``width`` characters.

    The shape is checked on construction, so a Frame can never hold a
    short or long row. Use :meth:`from_lines` to build one from ragged text.
    """

    rows: tuple[str, ...]
    width: int = FRAME_WIDTH
    height: int = FRAME_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Frame dimensions must be positive, got {self.width}x{self.height}")
        if len(self.rows) != self.height:
            raise ValueError(f"Frame needs {self.height} rows, got {len(self.rows)}")
        for index, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(
                    f"Frame row {index} must be {self.width} characters, got {len(row)}"
                )

    @classmethod
    def blank(cls, width: int = FRAME_WIDTH, height: int = FRAME_HEIGHT) -> Frame:
        """Return the all-space frame."""
        return cls(rows=(FILLER * width,) * height, width=width, height=height)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        width: int = FRAME_WIDTH,
        height: int = FRAME_HEIGHT,
    ) -> Frame:
        """Build a frame from already-stripped lines.

        Lines are padded or cut to ``width``; missing rows are blank and
        lines past ``height`` are ignored.
        """
        rows: list[str] = []
        for line in lines:
            if len(rows) == height:
                break
            rows.append(line[:width].ljust(width, FILLER))
        rows.extend(FILLER * width for _ in range(height - len(rows)))
        return cls(rows=tuple(rows), width=width, height=height)

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width) of the grid."""
        return (self.height, self.width)

    def cell(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, row: int) -> str:
        return self.rows[row]

    def render_text(self) -> str:
        """Join rows with newlines, e.g. for snapshots or debugging."""
        return "\n".join(self.rows)


@dataclass(frozen=True, slots=True)
class FrameSequence:
    """Ordered, non-empty frames paired with the sources they came from."""

    frames: tuple[Frame, ...]
    sources: tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("FrameSequence must contain at least one frame")
        if len(self.frames) != len(self.sources):
            raise ValueError("FrameSequence needs exactly one source per frame")
        shapes = {frame.shape for frame in self.frames}
        if len(shapes) != 1:
            raise ValueError(f"All frames must share one shape, got {sorted(shapes)}")

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    @property
    def shape(self) -> tuple[int, int]:
        return self.frames[0].shape
