"""Music tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

SHARE_PREFIX = "https://open.spotify.com/track/"


def _names(artists: list[Mapping[str, Any]]) -> list[str]:
    return [artist["name"] for artist in artists]


def _ids(artists: list[Mapping[str, Any]]) -> list[str]:
    return [artist["id"] for artist in artists if artist.get("id") is not None]


def _first_image(images: list[Mapping[str, Any]] | None) -> str | None:
    return images[0]["url"] if images else None


@dataclass
class Track:
    """A single song, with what is known about its album."""

    id: str | None
    uri: str
    title: str
    track_number: int
    disc_number: int
    duration: int
    artists: list[str] = field(default_factory=list)
    artist_ids: list[str] = field(default_factory=list)
    album: str | None = None
    album_id: str | None = None
    album_artists: list[str] = field(default_factory=list)
    cover_url: str | None = None
    url: str = ""
    added_at: datetime | None = None
    list_index: int = 0

    @classmethod
    def _base(cls, data: Mapping[str, Any]) -> Track:
        track_id = data.get("id")
        return cls(
            id=track_id,
            uri=f"spotify:track:{track_id}" if track_id is not None else "",
            title=data["name"],
            track_number=data["track_number"],
            disc_number=data["disc_number"],
            duration=int(data["duration_ms"]),
            artists=_names(data["artists"]),
            artist_ids=_ids(data["artists"]),
            url=f"{SHARE_PREFIX}{track_id}" if track_id is not None else "",
        )

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Track:
        """Build a track from a simplified or full Web API track object."""
        track = cls._base(data)
        album = data.get("album")
        if album is not None:
            track.album = album["name"]
            track.album_id = album.get("id")
            track.album_artists = _names(album.get("artists", []))
            track.cover_url = _first_image(album.get("images"))
        return track

    @classmethod
    def from_simplified_track(
        cls, track: Mapping[str, Any], album: Mapping[str, Any]
    ) -> Track:
        """Build a track from a simplified track and the full album it is on."""
        result = cls._base(track)
        result.album = album["name"]
        result.album_id = album["id"]
        result.album_artists = _names(album.get("artists", []))
        result.cover_url = _first_image(album.get("images"))
        return result

    @classmethod
    def from_saved(cls, data: Mapping[str, Any]) -> Track:
        """Build a track from a saved-track object carrying ``added_at``."""
        track = cls.from_api(data["track"])
        track.added_at = datetime.fromisoformat(data["added_at"])
        return track

    def __str__(self) -> str:
        return f"{', '.join(self.artists)} - {self.title}"

    def share_url(self) -> str | None:
        if self.id is None:
            return None
        return f"{SHARE_PREFIX}{self.id}"