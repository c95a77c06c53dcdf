"""Playlist data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass
class Entry:
    url: str
    title: Optional[str] = None
    time: Optional[int] = None
    options: List[Tuple[str, str]] = field(default_factory=list)

    def render(self) -> str:
        """Return the entry as M3U lines, without a trailing newline."""

        return m3u.render_entry(self)

    def __str__(self) -> str:
        return self.render()

    def add_option(self, key: str, value: str) -> None:
        self.options.append((key, value))

    def to_dict(self) -> Dict[str, Any]:
        return serialization.entry_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        return serialization.entry_from_dict(data)


@dataclass
class Playlist:
    entries: List[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def render(self) -> str:
        return m3u.render(self)

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, text: str) -> "Playlist":
        """Build a playlist from M3U text. Malformed input never raises."""

        return m3u.parse(text)

    def to_dict(self) -> Dict[str, Any]:
        return serialization.playlist_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        return serialization.playlist_from_dict(data)


# m3u and serialization build Entry/Playlist objects themselves
from extm3u.core import m3u, serialization  # noqa: E402  # pylint: disable=wrong-import-position
