from __future__ import annotations

from extm3u.core.playlist import Entry, Playlist


def _make_playlist(names: list[str]) -> Playlist:
    return Playlist([Entry(url=f"{name}.mp3", title=name, time=60 * index) for index, name in enumerate(names)])


def test_entry_defaults_are_absent() -> None:
    entry = Entry(url="x.mp3")

    assert entry.title is None
    assert entry.time is None
    assert entry.options == []


def test_entries_do_not_share_option_lists() -> None:
    first = Entry(url="a.mp3")
    second = Entry(url="b.mp3")

    first.add_option("k", "v")

    assert second.options == []


def test_add_option_keeps_duplicates_in_order() -> None:
    entry = Entry(url="x.mp3")
    entry.add_option("network-caching", "1000")
    entry.add_option("network-caching", "2000")

    assert entry.options == [("network-caching", "1000"), ("network-caching", "2000")]


def test_absent_and_empty_title_are_different_entries() -> None:
    assert Entry(url="x.mp3", title=None) != Entry(url="x.mp3", title="")


def test_playlist_len_and_iteration_follow_play_order() -> None:
    playlist = _make_playlist(["A", "B", "A"])

    assert len(playlist) == 3
    assert [entry.title for entry in playlist] == ["A", "B", "A"]


def test_playlist_parse_and_render_methods() -> None:
    playlist = _make_playlist(["A", "B"])

    assert Playlist.parse(playlist.render()) == playlist
