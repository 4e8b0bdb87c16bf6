from datetime import datetime, timezone

from ncspot.album import Album


def simple_track(track_id, number):
    return {
        "id": track_id,
        "name": f"Song {number}",
        "track_number": number,
        "disc_number": 1,
        "duration_ms": 1000 * number,
        "artists": [{"id": "a1", "name": "Alpha"}],
    }


def full_album():
    return {
        "id": "al1",
        "name": "Record",
        "release_date": "1999-05-01",
        "artists": [{"id": "a1", "name": "Alpha"}, {"id": "a2", "name": "Beta"}],
        "images": [{"url": "http://img.example.com/a.jpg"}],
        "tracks": {
            "items": [simple_track("t1", 1), simple_track("t2", 2)],
            "total": 2,
        },
    }


def simplified_album():
    return {
        "id": "al2",
        "name": "Single",
        "release_date": "2004-01-01",
        "artists": [{"id": "a1", "name": "Alpha"}, {"name": "Nobody"}],
        "images": [],
    }


def test_full_album_loads_tracks():
    album = Album.from_api(full_album())
    assert album.id == "al1"
    assert [t.id for t in album.tracks] == ["t1", "t2"]
    assert album.total_tracks == 2
    assert all(t.album == "Record" for t in album.tracks)
    assert all(t.album_id == "al1" for t in album.tracks)
    assert all(t.cover_url == "http://img.example.com/a.jpg" for t in album.tracks)
    assert album.url == "spotify:album:al1"


def test_year_is_first_part_of_release_date():
    assert Album.from_api(full_album()).year == "1999"
    assert Album.from_api(simplified_album()).year == "2004"


def test_simplified_album():
    album = Album.from_api(simplified_album())
    assert album.tracks is None
    assert album.total_tracks is None
    assert album.cover_url is None
    assert album.artists == ["Alpha", "Nobody"]
    assert album.artist_ids == ["a1"]
    assert album.url == album.share_url()
    assert album.share_url() == "https://open.spotify.com/album/al2"


def test_missing_release_date_gives_empty_year():
    data = simplified_album()
    data["release_date"] = None
    assert Album.from_api(data).year == ""


def test_from_saved_sets_added_at():
    album = Album.from_saved({"added_at": "2020-03-04T05:06:07+00:00", "album": full_album()})
    assert album.added_at == datetime(2020, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    assert album.title == "Record"


def test_str_joins_artists():
    assert str(Album.from_api(full_album())) == "Alpha, Beta - Record"


def test_artist_list_pairs_ids_and_names():
    artists = Album.from_api(full_album()).artist_list()
    assert [(a.id, a.name) for a in artists] == [("a1", "Alpha"), ("a2", "Beta")]


def test_is_playing():
    album = Album.from_api(full_album())
    assert album.is_playing(["t1", "t2"])
    assert not album.is_playing(["t2", "t1"])
    assert not album.is_playing([])
    assert not Album.from_api(simplified_album()).is_playing(["t1"])


def test_playables():
    album = Album.from_api(full_album())
    assert [p.id() for p in album.playables()] == ["t1", "t2"]
    assert Album.from_api(simplified_album()).playables() == []


def test_share_url_without_id():
    assert Album(id=None, title="x").share_url() is None