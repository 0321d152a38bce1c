"""Frame and frame-set loading from plain text files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from stickman.constants import FILLER
from stickman.errors import DirectoryUnreadableError, EmptyDirectoryError, FrameLoadError
from stickman.frame import Frame, FrameSequence
from stickman.limits import FRAME_HEIGHT, FRAME_WIDTH, MAX_FRAMES

log = logging.getLogger(__name__)

_LINE_ENDINGS = "\r\n"


def normalize_line(line: str, width: int = FRAME_WIDTH) -> str:
    """Strip trailing CR/LF and pad or cut the line to exactly ``width``.

    LF, CR and CRLF are treated alike; any trailing run of them is removed.
    """
    return line.rstrip(_LINE_ENDINGS)[:width].ljust(width, FILLER)


def load_frame(
    path: Path | str,
    *,
    width: int = FRAME_WIDTH,
    height: int = FRAME_HEIGHT,
) -> Frame:
    """Read a text file into a Frame.

    At most ``height`` lines are read. Short lines are padded with spaces and
    long lines are truncated; an empty file gives an all-space frame.

    Raises:
        FrameLoadError: The file cannot be opened or read.
    """
    path = Path(path)
    rows: list[str] = []
    truncated = 0
    try:
        # newline="" keeps terminators and splits on LF, CR and CRLF alike
        with path.open(encoding="utf-8", errors="replace", newline="") as handle:
            for line in handle:
                stripped = line.rstrip(_LINE_ENDINGS)
                if len(stripped) > width:
                    truncated += 1
                rows.append(normalize_line(stripped, width))
                if len(rows) == height:
                    break
    except OSError as exc:
        raise FrameLoadError(path, exc.strerror or "Could not load frame", exc.errno) from exc

    if truncated:
        log.debug("Truncated %d line(s) wider than %d in %s", truncated, width, path)
    return Frame.from_lines(rows, width=width, height=height)


def _sort_key(name: str) -> bytes:
    # Byte-wise order: "frame10" sorts before "frame2"
    return os.fsencode(name)


def list_frame_sources(directory: Path | str, max_frames: int = MAX_FRAMES) -> list[Path]:
    """Return the frame files of ``directory`` in load order.

    Hidden entries (leading ``.``) and subdirectories are skipped, names are
    sorted byte-wise, and anything past ``max_frames`` is dropped.

    Raises:
        DirectoryUnreadableError: The directory is missing or inaccessible.
    """
    directory = Path(directory)
    try:
        names = os.listdir(directory)
    except OSError as exc:
        raise DirectoryUnreadableError(directory) from exc

    candidates: list[str] = []
    for name in names:
        if name.startswith("."):
            continue
        if (directory / name).is_dir():
            log.debug("Skipping subdirectory %s", directory / name)
            continue
        candidates.append(name)

    candidates.sort(key=_sort_key)
    if len(candidates) > max_frames:
        log.warning(
            "Found %d frames in %s; keeping the first %d and ignoring %d",
            len(candidates),
            directory,
            max_frames,
            len(candidates) - max_frames,
        )
        candidates = candidates[:max_frames]
    return [directory / name for name in candidates]


def load_frame_set(
    directory: Path | str,
    *,
    max_frames: int = MAX_FRAMES,
    width: int = FRAME_WIDTH,
    height: int = FRAME_HEIGHT,
) -> FrameSequence:
    """Load every frame of ``directory`` into an ordered FrameSequence.

    The first frame that fails to load aborts the whole operation.

    Raises:
        DirectoryUnreadableError: The directory is missing or inaccessible.
        EmptyDirectoryError: No frame files remain after filtering.
        FrameLoadError: One of the frame files could not be read.
    """
    sources = list_frame_sources(directory, max_frames)
    if not sources:
        raise EmptyDirectoryError(directory)

    frames = tuple(load_frame(source, width=width, height=height) for source in sources)
    log.info("Loaded %d frame(s) from %s", len(frames), directory)
    return FrameSequence(frames=frames, sources=tuple(sources))
