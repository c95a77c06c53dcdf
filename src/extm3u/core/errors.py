"""Exception types raised by extm3u."""

from __future__ import annotations


class ExtM3UError(Exception):
    """Base class for library errors."""


class PlaylistDataError(ExtM3UError, ValueError):
    """Structured data could not be turned into an entry or playlist."""
