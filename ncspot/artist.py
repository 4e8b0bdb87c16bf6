"""Artists and their top tracks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

SHARE_PREFIX = "https://open.spotify.com/artist/"


@dataclass
class Artist:
    """A performer, optionally with a list of loaded tracks."""

    id: str | None
    name: str
    url: str | None = None
    tracks: list[Any] | None = None
    is_followed: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Artist:
        """Build an artist from a simplified or full Web API artist object."""
        artist_id = data.get("id")
        return cls(
            id=artist_id,
            name=data["name"],
            url=f"{SHARE_PREFIX}{artist_id}" if artist_id is not None else None,
        )

    def __str__(self) -> str:
        return self.name

    def share_url(self) -> str | None:
        if self.id is None:
            return None
        return f"{SHARE_PREFIX}{self.id}"

    def is_playing(self, queued_ids: Iterable[str]) -> bool:
        """True when the queue holds exactly this artist's loaded tracks."""
        if self.tracks is None:
            return False
        ids = [track.id for track in self.tracks if track.id is not None]
        return bool(ids) and list(queued_ids) == ids


def artists_of(artist_ids: Iterable[str], names: Iterable[str]) -> list[Artist]:
    """Pair artist ids with names; extra entries on either side are dropped."""
    return [Artist(id=artist_id, name=name) for artist_id, name in zip(artist_ids, names)]