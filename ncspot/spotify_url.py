"""Spotify URIs and open.spotify.com share links."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from urllib.parse import urlsplit

SHARE_HOST = "open.spotify.com"


class UriType(enum.Enum):
    """Kind of Spotify entity a URI or share link points at."""

    ALBUM = "album"
    ARTIST = "artist"
    TRACK = "track"
    PLAYLIST = "playlist"
    SHOW = "show"
    EPISODE = "episode"

    @classmethod
    def from_uri(cls, uri: str) -> UriType | None:
        """Return the entity type of a ``spotify:...`` URI, or None."""
        if uri.startswith("spotify:album:"):
            return cls.ALBUM
        if uri.startswith("spotify:artist:"):
            return cls.ARTIST
        if uri.startswith("spotify:track:"):
            return cls.TRACK
        if uri.startswith("spotify:") and ":playlist:" in uri:
            return cls.PLAYLIST
        if uri.startswith("spotify:show:"):
            return cls.SHOW
        if uri.startswith("spotify:episode:"):
            return cls.EPISODE
        return None


_ENTITIES = {member.value: member for member in UriType}


@dataclass(frozen=True)
class SpotifyUrl:
    """An entity id together with its type."""

    id: str
    uri_type: UriType

    def __str__(self) -> str:
        return f"https://{SHARE_HOST}/{self.uri_type.value}/{self.id}"

    @classmethod
    def from_url(cls, url: str) -> SpotifyUrl | None:
        """Get media id and type from an open.spotify.com URL."""
        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError:
            return None
        if not parts.scheme or host != SHARE_HOST:
            return None

        segments = iter(parts.path.removeprefix("/").split("/"))
        entity = next(segments, None)
        if entity is None:
            return None

        entity = entity.lower()
        if entity == "user":
            if next(segments, None) is None:
                return None
            if next(segments, None) != "playlist":
                return None
            uri_type = UriType.PLAYLIST
        elif entity in _ENTITIES:
            uri_type = _ENTITIES[entity]
        else:
            return None

        entity_id = next(segments, None)
        if entity_id is None:
            return None
        return cls(entity_id, uri_type)