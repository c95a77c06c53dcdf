"""Configuration management package.

The public API is available as `extm3u.core.config` while implementation is
split into focused modules.
"""

from __future__ import annotations

from .defaults import DEFAULT_CONFIG, LINE_SEPARATORS
from .settings import SettingsManager

__all__ = [
    "DEFAULT_CONFIG",
    "LINE_SEPARATORS",
    "SettingsManager",
]
