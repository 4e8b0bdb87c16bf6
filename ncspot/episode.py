"""Podcast episodes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

SHARE_PREFIX = "https://open.spotify.com/episode/"


@dataclass
class Episode:
    """A single episode of a show."""

    id: str
    uri: str
    duration: int
    name: str
    description: str
    release_date: str
    cover_url: str | None = None
    added_at: datetime | None = None
    list_index: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Episode:
        """Build an episode from a simplified or full Web API episode object."""
        episode_id = data["id"]
        images = data.get("images")
        return cls(
            id=episode_id,
            uri=f"spotify:episode:{episode_id}",
            duration=int(data["duration_ms"]),
            name=data["name"],
            description=data["description"],
            release_date=data["release_date"],
            cover_url=images[0]["url"] if images else None,
        )

    def __str__(self) -> str:
        return self.name

    def share_url(self) -> str:
        return f"{SHARE_PREFIX}{self.id}"