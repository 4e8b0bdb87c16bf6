"""Podcast shows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ncspot.episode import Episode
from ncspot.playable import Playable

SHARE_PREFIX = "https://open.spotify.com/show/"


@dataclass
class Show:
    """A podcast show, optionally with its loaded episodes."""

    id: str
    uri: str
    name: str
    publisher: str
    description: str
    cover_url: str | None = None
    episodes: list[Episode] | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Show:
        """Build a show from a simplified or full Web API show object."""
        show_id = data["id"]
        images = data.get("images")
        return cls(
            id=show_id,
            uri=f"spotify:show:{show_id}",
            name=data["name"],
            publisher=data["publisher"],
            description=data["description"],
            cover_url=images[0]["url"] if images else None,
        )

    def __str__(self) -> str:
        return f"{self.publisher} - {self.name}"

    def share_url(self) -> str:
        return f"{SHARE_PREFIX}{self.id}"

    def playables(self) -> list[Playable]:
        """The loaded episodes as playables; empty when none are loaded."""
        return [Playable(episode) for episode in self.episodes or []]