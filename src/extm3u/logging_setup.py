"""Logging configuration for applications embedding extm3u."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from extm3u.core.env import resolve_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level_override: Optional[str] = None, log_path: Optional[Path] = None) -> Optional[Path]:
    """Install stream (and optionally file) handlers on the root logger.

    ``LOGLEVEL`` wins over ``level_override``; unknown names fall back to WARNING.
    Returns the log file path when one could be opened.
    """

    level_name = resolve_log_level(level_override or "WARNING")
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    open_error: Optional[OSError] = None
    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as exc:
            open_error = exc
        else:
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logger = logging.getLogger(__name__)
    if open_error is not None:
        logger.warning("Cannot write log to %s: %s", log_path, open_error)
        return None
    if log_path is not None:
        logger.info("Writing log to %s", log_path)
    return log_path
