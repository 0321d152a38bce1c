"""Atomic file writing utilities."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

# mkstemp creates 0600 files; config files are meant to be world-readable
DEFAULT_FILE_MODE = 0o644


def atomic_write(path: Path, content: str, *, mode: int | None = None) -> None:
    """Write file atomically so a crash never leaves a half-written config.

    The permission bits of an existing file are kept; a new file gets
    ``mode`` (default ``0o644``).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if mode is None:
        try:
            mode = stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            mode = DEFAULT_FILE_MODE
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(tmp_path, mode)
        Path(tmp_path).replace(path)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise
