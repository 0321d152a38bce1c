"""XDG-compliant path helpers for stickman configuration and logs."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir


def get_data_dir() -> Path:
    """Get the data directory for stickman (exported debug logs)."""
    override = os.environ.get("STICKMAN_DATA_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_data_dir("stickman"))


def get_config_dir() -> Path:
    """Get the config directory for stickman (config.toml)."""
    override = os.environ.get("STICKMAN_CONFIG_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_config_dir("stickman"))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    """Get the default path for debug log exports."""
    return get_data_dir() / "debug.log"



def ensure_directories() -> None:
    """Create all necessary directories if they don't exist."""
    get_data_dir().mkdir(parents=True, exist_ok=True)
    get_config_dir().mkdir(parents=True, exist_ok=True)
