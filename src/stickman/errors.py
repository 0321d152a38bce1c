"""Exception hierarchy for animation loading and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StickmanError(Exception):
    """Base class for all errors raised by stickman."""


class AnimationLoadError(StickmanError):
    """Raised when the frame sequence cannot be built.

    Every load failure is fatal: playback never starts with a partial sequence.
    """

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class FrameLoadError(AnimationLoadError, OSError):
    """Raised when a frame source cannot be opened or read.

    Also an ``OSError``, so callers catching I/O errors see it; the original
    ``OSError`` is chained as ``__cause__`` and its errno is copied over.
    """

    def __init__(
        self,
        path: Path | str,
        reason: str = "Could not load frame",
        errno: int | None = None,
    ) -> None:
        super().__init__(path, reason)
        self.errno = errno


class DirectoryUnreadableError(AnimationLoadError):
    """Raised when the animation directory is missing or inaccessible."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "Could not read animation directory")


class EmptyDirectoryError(AnimationLoadError):
    """Raised when the animation directory holds no frame sources."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "No animation frames found in directory")


class ConfigError(StickmanError):
    """Raised when the config file is not valid TOML or fails validation."""

    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config file {path}: {detail}")
