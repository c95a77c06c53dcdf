"""Settings manager backed by a YAML file."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .defaults import DEFAULT_CONFIG, LINE_SEPARATORS
from extm3u.core.env import resolve_config_path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` applied section by section."""

    merged: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass
class SettingsManager:
    """YAML configuration layered over the default values."""

    config_path: Path = Path("config/settings.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(self.config_path)
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if not self.config_path.exists():
            self._data = copy.deepcopy(DEFAULT_CONFIG)
            return
        with self.config_path.open("r", encoding="utf-8") as file:
            user_config = yaml.safe_load(file) or {}
        if not isinstance(user_config, dict):
            logger.warning("Ignoring settings in %s: top level is not a mapping", self.config_path)
            user_config = {}
        self._data = merge_config(DEFAULT_CONFIG, user_config)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=False, sort_keys=True)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._data.get(name)
        if not isinstance(section, dict):
            section = copy.deepcopy(DEFAULT_CONFIG[name])
            self._data[name] = section
        return section

    def get_line_separator(self) -> str:
        name = str(self._section("render").get("line_separator", "lf")).lower()
        return LINE_SEPARATORS.get(name, LINE_SEPARATORS["lf"])

    def set_line_separator(self, name: str) -> None:
        normalized = str(name).strip().lower()
        if normalized not in LINE_SEPARATORS:
            raise ValueError(f"Unknown line separator: {name!r}")
        self._section("render")["line_separator"] = normalized

    def get_trailing_newline(self) -> bool:
        return bool(self._section("render").get("trailing_newline", False))

    def set_trailing_newline(self, enabled: bool) -> None:
        self._section("render")["trailing_newline"] = bool(enabled)

    def get_strip_bom(self) -> bool:
        return bool(self._section("parse").get("strip_bom", False))

    def set_strip_bom(self, enabled: bool) -> None:
        self._section("parse")["strip_bom"] = bool(enabled)

    def get_log_level(self) -> str:
        level = str(self._section("logging").get("level", "WARNING")).upper()
        return level if level in _LOG_LEVELS else "WARNING"

    def set_log_level(self, level: str) -> None:
        normalized = str(level).strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        self._section("logging")["level"] = normalized
