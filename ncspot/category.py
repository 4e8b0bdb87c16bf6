"""Browse categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

SHARE_PREFIX = "https://open.spotify.com/genre/"


@dataclass(frozen=True)
class Category:
    """A browse category grouping playlists."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Category:
        return cls(id=data["id"], name=data["name"])

    def __str__(self) -> str:
        return self.name

    def share_url(self) -> str:
        return f"{SHARE_PREFIX}{self.id}"