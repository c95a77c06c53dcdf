"""Settings-driven front end for rendering and parsing playlists."""

from __future__ import annotations

from dataclasses import dataclass

from extm3u.core.config import LINE_SEPARATORS, SettingsManager
from extm3u.core.playlist import Playlist

_BOM = "\ufeff"


@dataclass
class M3UCodec:
    line_separator: str = "\n"
    trailing_newline: bool = False
    strip_bom: bool = False

    def __post_init__(self) -> None:
        if self.line_separator not in LINE_SEPARATORS.values():
            raise ValueError(f"Unsupported line separator: {self.line_separator!r}")

    @classmethod
    def from_settings(cls, settings: SettingsManager) -> "M3UCodec":
        return cls(
            line_separator=settings.get_line_separator(),
            trailing_newline=settings.get_trailing_newline(),
            strip_bom=settings.get_strip_bom(),
        )

    def dumps(self, playlist: Playlist) -> str:
        text = playlist.render()
        if self.line_separator != "\n":
            text = text.replace("\n", self.line_separator)
        if self.trailing_newline:
            text += self.line_separator
        return text

    def loads(self, text: str) -> Playlist:
        if self.strip_bom and text.startswith(_BOM):
            text = text[len(_BOM) :]
        return Playlist.parse(text)
