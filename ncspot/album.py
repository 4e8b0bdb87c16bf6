"""Albums and their tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping

from ncspot.artist import Artist, artists_of
from ncspot.playable import Playable
from ncspot.track import Track

SHARE_PREFIX = "https://open.spotify.com/album/"


def _year(release_date: str | None) -> str:
    return (release_date or "").split("-")[0]


@dataclass
class Album:
    """An album, optionally with its loaded tracks."""

    id: str | None
    title: str
    artists: list[str] = field(default_factory=list)
    artist_ids: list[str] = field(default_factory=list)
    year: str = ""
    cover_url: str | None = None
    url: str | None = None
    tracks: list[Track] | None = None
    added_at: datetime | None = None
    total_tracks: int | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Album:
        """Build an album from a simplified or full Web API album object.

        A full album carries a ``tracks`` page whose items become the
        album's tracks.
        """
        album_id = data.get("id")
        artists = data.get("artists", [])
        images = data.get("images")
        album = cls(
            id=album_id,
            title=data["name"],
            artists=[artist["name"] for artist in artists],
            artist_ids=[a["id"] for a in artists if a.get("id") is not None],
            year=_year(data.get("release_date")),
            cover_url=images[0]["url"] if images else None,
        )

        page = data.get("tracks")
        if isinstance(page, Mapping) and "items" in page:
            album.url = f"spotify:album:{album_id}"
            album.tracks = [
                Track.from_simplified_track(item, data) for item in page["items"]
            ]
            album.total_tracks = int(page["total"])
        elif album_id is not None:
            album.url = f"{SHARE_PREFIX}{album_id}"
        return album

    @classmethod
    def from_saved(cls, data: Mapping[str, Any]) -> Album:
        """Build an album from a saved-album object carrying ``added_at``."""
        album = cls.from_api(data["album"])
        album.added_at = datetime.fromisoformat(data["added_at"])
        return album

    def __str__(self) -> str:
        return f"{', '.join(self.artists)} - {self.title}"

    def share_url(self) -> str | None:
        if self.id is None:
            return None
        return f"{SHARE_PREFIX}{self.id}"

    def artist_list(self) -> list[Artist]:
        return artists_of(self.artist_ids, self.artists)

    def is_playing(self, queued_ids: Iterable[str]) -> bool:
        """True when the queue holds exactly this album's loaded tracks."""
        if self.tracks is None:
            return False
        ids = [track.id for track in self.tracks if track.id is not None]
        return bool(ids) and list(queued_ids) == ids

    def playables(self) -> list[Playable]:
        """The loaded tracks as playables; empty when none are loaded."""
        return [Playable(track) for track in self.tracks or []]