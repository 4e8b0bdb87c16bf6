# ncspot

Media models and share-link parsing for a terminal music streaming client.
The package turns web API data (plain dictionaries, as decoded from JSON)
into tracks, episodes, albums, artists, playlists, shows and categories, and
parses and builds `spotify:` URIs and `open.spotify.com` share links. It has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ncspot.spotify_url`: `UriType` and `SpotifyUrl`.
  `UriType.from_uri` recognises URIs such as `spotify:track:…`,
  `spotify:album:…` and `spotify:user:…:playlist:…`, and returns `None` for
  anything else. `SpotifyUrl.from_url` parses `open.spotify.com` links,
  including the older `/user/<name>/playlist/<id>` form, and returns `None`
  for other hosts or unknown entity types. `str()` of a `SpotifyUrl` gives
  the share link back.
- `ncspot.track`: `Track`, built with `Track.from_api` (simplified or full
  track objects), `Track.from_simplified_track` (a track plus the full album
  it belongs to) or `Track.from_saved` (a saved-track object with
  `added_at`).
- `ncspot.episode`: `Episode`, built with `Episode.from_api`.
- `ncspot.playable`: `Playable` wraps a `Track` or an `Episode`. It has
  accessors for the id, URI, cover URL, duration in milliseconds and list
  index, and `track()` returns the track, or `None` for an episode.
  `Playable.from_api` dispatches on the object's `type` field and raises
  `ValueError` for other types.
- `ncspot.artist`: `Artist`, built with `Artist.from_api`. `artists_of`
  pairs artist ids with names.
- `ncspot.album`: `Album`, built with `Album.from_api` or `Album.from_saved`.
  A full album object fills in its tracks. `artist_list()` returns the
  album's `Artist`s and `playables()` returns its loaded tracks as
  `Playable`s.
- `ncspot.playlist`: `Playlist`, built with `Playlist.from_api`, together
  with `SortKey` and `SortDirection`. `Playlist.sort` sorts the loaded items
  in place by title, duration, album (then disc and track number), date
  added, or artist. The artist sort ignores a leading "the". Episodes
  compare as equal.
- `ncspot.show`: `Show`, built with `Show.from_api`. `playables()` returns
  its loaded episodes.
- `ncspot.category`: `Category`, built with `Category.from_api`.

Every model has a `share_url()` that gives its `open.spotify.com` link.
`Album`, `Artist` and `Playlist` have `is_playing(queued_ids)`. It returns
`True` when the given sequence of queued item ids matches exactly the ids of
the loaded tracks.

## Example

```python
from ncspot.spotify_url import SpotifyUrl, UriType
from ncspot.track import Track

url = SpotifyUrl.from_url("https://open.spotify.com/track/6fRJg3R90w0juYoCJXxj2d")
assert url.uri_type is UriType.TRACK
print(url)  # https://open.spotify.com/track/6fRJg3R90w0juYoCJXxj2d

track = Track.from_api({
    "id": "abc",
    "name": "Song",
    "track_number": 1,
    "disc_number": 1,
    "duration_ms": 180000,
    "artists": [{"id": "a1", "name": "Band"}],
})
print(track)          # Band - Song
print(track.uri)      # spotify:track:abc
```

## What this package does not do

The package holds data models and link parsing only. It does not talk to
the web API or play audio. It keeps no play queue, with no shuffle and no
repeat. It does not read or write configuration or state files, and it
offers no media-player control interface and no command-line program.
Callers fetch the API data themselves and pass the decoded dictionaries to
the `from_api` constructors.