"""Helpers for environment overrides."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_config_path(default_path: Path) -> Path:
    """Pick config path based on environment overrides."""

    env_path = os.environ.get("EXTM3U_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    env_dir = os.environ.get("EXTM3U_CONFIG_DIR")
    if env_dir:
        return Path(env_dir) / "settings.yaml"
    return default_path


def resolve_log_level(default: str = "WARNING") -> str:
    """Return the log level name requested through ``LOGLEVEL``."""

    flag = os.environ.get("LOGLEVEL", "")
    return (flag.strip() or default).upper()
