"""Conversion between playlists and plain data (dicts / JSON)."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from extm3u.core.errors import PlaylistDataError
from extm3u.core.playlist import Entry, Playlist


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    return {
        "url": entry.url,
        "title": entry.title,
        "time": entry.time,
        "options": [[key, value] for key, value in entry.options],
    }


def _optional_time(value: Any) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass but never a duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise PlaylistDataError(f"Invalid time value: {value!r}")
    return value


def _options(value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise PlaylistDataError(f"Options must be a list, got {type(value).__name__}")
    options: List[Tuple[str, str]] = []
    for pair in value:
        if (
            not isinstance(pair, (list, tuple))
            or len(pair) != 2
            or not all(isinstance(part, str) for part in pair)
        ):
            raise PlaylistDataError(f"Invalid option pair: {pair!r}")
        options.append((pair[0], pair[1]))
    return options


def entry_from_dict(data: Dict[str, Any]) -> Entry:
    if not isinstance(data, dict):
        raise PlaylistDataError(f"Entry must be a mapping, got {type(data).__name__}")
    url = data.get("url")
    if not isinstance(url, str):
        raise PlaylistDataError("Entry requires a string 'url'")
    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise PlaylistDataError(f"Invalid title value: {title!r}")
    return Entry(
        url=url,
        title=title,
        time=_optional_time(data.get("time")),
        options=_options(data.get("options")),
    )


def playlist_to_dict(playlist: Playlist) -> Dict[str, Any]:
    return {"entries": [entry_to_dict(entry) for entry in playlist.entries]}


def playlist_from_dict(data: Dict[str, Any]) -> Playlist:
    if not isinstance(data, dict):
        raise PlaylistDataError(f"Playlist must be a mapping, got {type(data).__name__}")
    entries = data.get("entries", [])
    if not isinstance(entries, list):
        raise PlaylistDataError("Playlist 'entries' must be a list")
    return Playlist([entry_from_dict(item) for item in entries])


def dumps_json(playlist: Playlist, indent: Optional[int] = None) -> str:
    return json.dumps(playlist_to_dict(playlist), ensure_ascii=False, indent=indent)


def loads_json(text: str) -> Playlist:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlaylistDataError(f"Invalid playlist JSON: {exc}") from exc
    return playlist_from_dict(data)
