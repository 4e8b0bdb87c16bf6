"""Items that can be put in the queue and played: tracks and episodes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from ncspot.episode import Episode
from ncspot.track import Track


@dataclass
class Playable:
    """A track or an episode."""

    item: Track | Episode

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Playable:
        """Build a playable from a Web API track or episode object."""
        kind = data.get("type")
        if kind == "track":
            return cls(Track.from_api(data))
        if kind == "episode":
            return cls(Episode.from_api(data))
        raise ValueError(f"not a playable item type: {kind!r}")

    def id(self) -> str | None:
        return self.item.id

    def uri(self) -> str:
        return self.item.uri

    def cover_url(self) -> str | None:
        return self.item.cover_url

    def duration(self) -> int:
        """Duration in milliseconds."""
        return self.item.duration

    def list_index(self) -> int:
        return self.item.list_index

    def set_list_index(self, index: int) -> None:
        self.item.list_index = index

    def set_added_at(self, added_at: datetime | None) -> None:
        self.item.added_at = added_at

    def track(self) -> Track | None:
        """The underlying track, or None for an episode."""
        return self.item if isinstance(self.item, Track) else None

    def share_url(self) -> str | None:
        return self.item.share_url()

    def __str__(self) -> str:
        return str(self.item)