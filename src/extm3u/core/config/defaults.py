"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

LINE_SEPARATORS: Dict[str, str] = {
    "lf": "\n",
    "crlf": "\r\n",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "render": {
        "line_separator": "lf",
        "trailing_newline": False,
    },
    "parse": {
        "strip_bom": False,
    },
    "logging": {
        "level": "WARNING",
    },
}
