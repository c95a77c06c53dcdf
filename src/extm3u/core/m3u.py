"""M3U playlist parsing/serialization helpers."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

from extm3u.core.playlist import Entry, Playlist

logger = logging.getLogger(__name__)

EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF"
EXTVLCOPT = "#EXTVLCOPT"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_duration(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def render_entry(entry: Entry) -> str:
    prefix = "".join(f"{EXTVLCOPT}:{key}={value}\n" for key, value in entry.options)
    body = f"{prefix}{entry.url}"

    if entry.title is not None:
        time = int(entry.time) if entry.time is not None else 0
        if entry.title:
            return f"{EXTINF}:{time},{entry.title}\n{body}"
        return f"{EXTINF}:{time}\n{body}"
    if entry.time is not None:
        return f"{EXTINF}:{int(entry.time)}\n{body}"
    return body


def render(playlist: Playlist) -> str:
    return f"{EXTM3U}\n" + "\n".join(render_entry(entry) for entry in playlist.entries)


def parse_m3u_lines(lines: Iterable[str]) -> List[Entry]:
    """Collect entries from the lines that follow an ``#EXTM3U`` header.

    ``#EXTINF`` and ``#EXTVLCOPT`` lines accumulate on the pending entry; the
    next non-empty line of any other kind is its URL and closes it.
    """

    entries: List[Entry] = []
    current = Entry(url="")

    for line in lines:
        stripped = line.strip()
        if stripped.startswith(EXTINF):
            header, _, title = stripped[len(EXTINF) + 1 :].partition(",")
            current.time = _parse_duration(header)
            current.title = title
        elif stripped.startswith(EXTVLCOPT):
            key, _, value = stripped[len(EXTVLCOPT) + 1 :].partition("=")
            if key and value:
                current.add_option(key, value)
            else:
                logger.debug("Dropping malformed option line %r", stripped)
        elif stripped:
            current.url = stripped
            entries.append(current)
            current = Entry(url="")

    if current.title is not None or current.options:
        logger.debug("Discarding metadata without a URL line: %r", current)
    return entries


def parse(text: str) -> Playlist:
    if not text:
        return Playlist()

    lines = text.replace("\r\n", "\n").split("\n")
    if lines[0].strip() != EXTM3U:
        logger.debug("Missing %s header, reading %d lines as plain URLs", EXTM3U, len(lines))
        return Playlist([Entry(url=line.strip()) for line in lines])
    return Playlist(parse_m3u_lines(lines[1:]))
