from datetime import datetime, timezone

import pytest

from ncspot.episode import Episode
from ncspot.playable import Playable
from ncspot.track import Track


def track_data(track_id="t1"):
    return {
        "type": "track",
        "id": track_id,
        "name": "Song",
        "track_number": 3,
        "disc_number": 1,
        "duration_ms": 215000,
        "artists": [{"id": "a1", "name": "Band"}],
        "album": {
            "id": "al1",
            "name": "Record",
            "artists": [{"id": "a1", "name": "Band"}],
            "images": [{"url": "http://img.example.com/cover.jpg"}],
        },
    }


def episode_data(episode_id="e1"):
    return {
        "type": "episode",
        "id": episode_id,
        "name": "Pilot",
        "description": "First one",
        "release_date": "2020-02-02",
        "duration_ms": 3600000,
        "images": [],
    }


def test_track_from_api():
    playable = Playable.from_api(track_data())
    assert playable.id() == "t1"
    assert playable.uri() == "spotify:track:t1"
    assert playable.duration() == 215000
    assert playable.cover_url() == "http://img.example.com/cover.jpg"
    assert isinstance(playable.track(), Track)
    assert playable.track().title == "Song"


def test_episode_from_api():
    playable = Playable.from_api(episode_data())
    assert playable.id() == "e1"
    assert playable.uri() == "spotify:episode:e1"
    assert playable.track() is None
    assert playable.cover_url() is None
    assert playable.share_url() == "https://open.spotify.com/episode/e1"


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        Playable.from_api({"type": "album", "id": "x"})


def test_list_index_round_trip():
    playable = Playable.from_api(track_data())
    assert playable.list_index() == 0
    playable.set_list_index(7)
    assert playable.list_index() == 7
    assert playable.item.list_index == 7


def test_added_at_round_trip():
    playable = Playable.from_api(episode_data())
    stamp = datetime(2021, 5, 6, tzinfo=timezone.utc)
    playable.set_added_at(stamp)
    assert playable.item.added_at == stamp
    playable.set_added_at(None)
    assert playable.item.added_at is None


def test_str_delegates_to_item():
    track = Playable.from_api(track_data())
    episode = Playable.from_api(episode_data())
    assert str(track) == str(track.item)
    assert str(episode) == "Pilot"


def test_share_url_of_track():
    playable = Playable.from_api(track_data("xyz"))
    assert playable.share_url() == "https://open.spotify.com/track/xyz"


def test_wraps_existing_episode():
    episode = Episode(
        id="e9",
        uri="spotify:episode:e9",
        duration=1000,
        name="Talk",
        description="",
        release_date="2019-01-01",
    )
    playable = Playable(episode)
    assert playable.duration() == 1000
    assert playable.id() == "e9"