"""Numeric limits and timings - no circular dependencies."""

from __future__ import annotations

FRAME_WIDTH = 80
FRAME_HEIGHT = 24

# Frames beyond this count are dropped (logged, not an error)
MAX_FRAMES = 20

# Playback timing (milliseconds per frame), 100ms = 10 FPS
DEFAULT_DELAY_MS = 100

MAX_LOG_LINES = 2000
MAX_LOG_MESSAGE_LENGTH = 4096
