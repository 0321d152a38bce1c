"""Configuration loader for stickman."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import tomlkit
from pydantic import BaseModel, Field, ValidationError

from stickman.atomic import atomic_write
from stickman.constants import DEFAULT_ANIM_DIR
from stickman.errors import ConfigError
from stickman.limits import DEFAULT_DELAY_MS, MAX_FRAMES
from stickman.paths import ensure_directories, get_config_path

if TYPE_CHECKING:
    from pathlib import Path


class PlaybackConfig(BaseModel):
    """Playback settings."""

    delay_ms: int = Field(
        default=DEFAULT_DELAY_MS, ge=1, description="Delay between frames in milliseconds"
    )
    anim_dir: str = Field(
        default=DEFAULT_ANIM_DIR, description="Directory holding one text file per frame"
    )
    max_frames: int = Field(
        default=MAX_FRAMES,
        ge=1,
        le=MAX_FRAMES,
        description="Frames beyond this count are ignored",
    )

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000


class StickmanConfig(BaseModel):
    """Root configuration model."""

    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> StickmanConfig:
        """Load configuration from TOML file or use defaults.

        Raises:
            ConfigError: The file exists but is not valid TOML or fails validation.
        """
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(config_path, str(exc)) from exc
        except ValidationError as exc:
            raise ConfigError(config_path, _summarize(exc)) from exc

    def to_toml(self) -> str:
        """Serialize the config as a TOML document."""
        doc = tomlkit.document()
        doc.add(tomlkit.comment("stickman configuration"))

        playback_table = tomlkit.table()
        for key, value in self.playback.model_dump().items():
            playback_table[key] = value
            description = PlaybackConfig.model_fields[key].description
            if description:
                playback_table[key].comment(description)
        doc["playback"] = playback_table

        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Write the config to ``path`` atomically (parents are created)."""
        ensure_directories()
        atomic_write(path, self.to_toml())


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
