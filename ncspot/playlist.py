"""Playlists and sorting their tracks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Iterable, Mapping, TypeVar

from ncspot.playable import Playable
from ncspot.track import Track

SHARE_PREFIX = "https://open.spotify.com/user/"

_T = TypeVar("_T")


class SortKey(enum.Enum):
    TITLE = "title"
    DURATION = "duration"
    ARTIST = "artist"
    ALBUM = "album"
    ADDED = "added"


class SortDirection(enum.Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _cmp_optional(a: _T | None, b: _T | None) -> int:
    """Compare two optional values, with a missing value sorting first."""
    if a is None or b is None:
        return _cmp(a is not None, b is not None)
    return _cmp(a, b)


def _sanitize_artist(name: str) -> str:
    words = name.lower().split(" ")
    position = 0
    while position < len(words) and words[position] == "the":
        position += 1
    return "".join(words[position:])


def _compare_artists(a: list[str], b: list[str]) -> int:
    return _cmp([_sanitize_artist(n) for n in a], [_sanitize_artist(n) for n in b])


def _compare_album(a: Track, b: Track) -> int:
    album_a = a.album.lower() if a.album is not None else None
    album_b = b.album.lower() if b.album is not None else None
    return (
        _cmp_optional(album_a, album_b)
        or _cmp(a.disc_number, b.disc_number)
        or _cmp(a.track_number, b.track_number)
    )


def _compare_tracks(a: Track, b: Track, key: SortKey) -> int:
    if key is SortKey.TITLE:
        return _cmp(a.title.lower(), b.title.lower())
    if key is SortKey.DURATION:
        return _cmp(a.duration, b.duration)
    if key is SortKey.ALBUM:
        return _compare_album(a, b)
    if key is SortKey.ADDED:
        return _cmp_optional(a.added_at, b.added_at)
    return _compare_artists(a.artists, b.artists) or _compare_album(a, b)


@dataclass
class Playlist:
    """A user playlist, optionally with its loaded items."""

    id: str
    name: str
    owner_id: str
    owner_name: str | None
    snapshot_id: str
    num_tracks: int
    tracks: list[Playable] | None = None
    collaborative: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Playlist:
        """Build a playlist from a simplified or full Web API playlist object."""
        owner = data["owner"]
        return cls(
            id=data["id"],
            name=data["name"],
            owner_id=owner["id"],
            owner_name=owner.get("display_name"),
            snapshot_id=data["snapshot_id"],
            num_tracks=int(data["tracks"]["total"]),
            tracks=None,
            collaborative=bool(data.get("collaborative", False)),
        )

    def has_track(self, track_id: str) -> bool:
        if self.tracks is None:
            return False
        return any(item.id() == track_id for item in self.tracks)

    def sort(self, key: SortKey, direction: SortDirection) -> None:
        """Sort the loaded tracks in place; episodes compare as equal."""
        if self.tracks is None:
            return

        def compare(left: Playable, right: Playable) -> int:
            a, b = left.track(), right.track()
            if a is None or b is None:
                return 0
            if direction is SortDirection.DESCENDING:
                a, b = b, a
            return _compare_tracks(a, b, key)

        self.tracks.sort(key=cmp_to_key(compare))

    def display_left(self, hide_owners: bool) -> str:
        if self.owner_name is not None and not hide_owners:
            return f"{self.name} • {self.owner_name}"
        return self.name

    def share_url(self) -> str:
        return f"{SHARE_PREFIX}{self.owner_id}/playlist/{self.id}"

    def is_playing(self, queued_ids: Iterable[str]) -> bool:
        """True when the queue holds exactly this playlist's loaded items."""
        if self.tracks is None:
            return False
        ids = [item.id() for item in self.tracks if item.id() is not None]
        return bool(ids) and list(queued_ids) == ids