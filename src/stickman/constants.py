from stickman.limits import (
    DEFAULT_DELAY_MS,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    MAX_FRAMES,
)

DEFAULT_ANIM_DIR = "anim"

FILLER = " "

EXIT_LOAD_FAILURE = 1

__all__ = [
    "DEFAULT_ANIM_DIR",
    "DEFAULT_DELAY_MS",
    "EXIT_LOAD_FAILURE",
    "FILLER",
    "FRAME_HEIGHT",
    "FRAME_WIDTH",
    "MAX_FRAMES",
]
