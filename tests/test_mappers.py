import pytest

from spotilookup.core.mappers import (
    album_stats,
    format_duration,
    map_album,
    map_artist_full,
    map_artist_short,
    map_track,
    not_found,
)
from spotilookup.errors import MappingError
from spotilookup.models.upstream import (
    Album,
    Artist,
    ArtistAlbums,
    ArtistTopTracks,
    SimpleAlbum,
    Track,
    parse_payload,
)
from tests.support import factories


@pytest.mark.parametrize(
    "ms, expected",
    [
        (0, "0:00"),
        (999, "0:00"),
        (1000, "0:01"),
        (59999, "0:59"),
        (60000, "1:00"),
        (200040, "3:20"),
        (3600000, "60:00"),
        (7322000, "122:02"),
    ],
)
def test_format_duration(ms, expected):
    assert format_duration(ms) == expected


def test_format_duration_pads_seconds_for_every_second_of_a_minute():
    for second in range(60):
        minutes, seconds = format_duration(5 * 60000 + second * 1000).split(":")
        assert minutes == "5"
        assert len(seconds) == 2
        assert int(seconds) == second


def test_not_found_message():
    body = not_found("tracks")
    assert body.model_dump() == {"success": False, "message": "No tracks found"}


def test_album_stats_counts_exact_types_and_drops_unknown():
    albums = [
        SimpleAlbum(name="a", album_type="album"),
        SimpleAlbum(name="b", album_type="single"),
        SimpleAlbum(name="c", album_type="single"),
        SimpleAlbum(name="d", album_type="compilation"),
        SimpleAlbum(name="e", album_type="appears_on"),
        SimpleAlbum(name="f", album_type="Album"),
    ]
    stats = album_stats(albums)
    assert (stats.album, stats.single, stats.compilation) == (1, 2, 1)
    assert stats.album + stats.single + stats.compilation == len(albums) - 2


def test_album_stats_sum_matches_item_count_when_all_types_known():
    types = ["album", "single", "compilation", "single", "album", "album"]
    stats = album_stats(SimpleAlbum(name=str(i), album_type=t) for i, t in enumerate(types))
    assert stats.album + stats.single + stats.compilation == len(types)
    assert stats.album == types.count("album")


def test_map_track():
    body = map_track(Track.model_validate(factories.track()))
    dumped = body.model_dump(by_alias=True)
    assert dumped["success"] is True
    assert dumped["track"] == {
        "name": "Blinding Lights",
        "fullTitle": "",
        "id": "0VjIjW4GlUZAMYd2vXMi3b",
        "url": "https://open.spotify.com/track/0VjIjW4GlUZAMYd2vXMi3b",
        "preview_url": "",
        "duration": "3:20",
        "duration_ms": 200040,
        "explicit": False,
        "popularity": 94,
    }


def test_map_artist_short_uses_first_image_and_counts_releases():
    artist = Artist.model_validate(factories.artist())
    albums = ArtistAlbums.model_validate(
        factories.artist_albums(
            factories.simple_album("After Hours", "album"),
            factories.simple_album("Starboy", "album"),
            factories.simple_album("Dancing In The Flames", "single"),
            factories.simple_album("The Highlights", "compilation"),
        )
    )
    info = map_artist_short(artist, albums).artist
    assert info.image == "https://i.scdn.co/image/large"
    assert info.genres == ["canadian contemporary r&b", "pop"]
    assert info.followers == 94000000
    assert (info.albums, info.singles, info.compilations) == (2, 1, 1)


def test_map_artist_short_without_images_has_empty_image():
    artist = Artist.model_validate(factories.artist(images=[]))
    info = map_artist_short(artist, ArtistAlbums(items=[])).artist
    assert info.image == ""
    assert (info.albums, info.singles, info.compilations) == (0, 0, 0)


def test_map_artist_full():
    artist = Artist.model_validate(factories.artist())
    top = ArtistTopTracks.model_validate(factories.top_tracks(("Blinding Lights", 94), ("Starboy", 90)))
    albums = ArtistAlbums.model_validate(
        factories.artist_albums(
            factories.simple_album("After Hours", "album"),
            factories.simple_album("Open Hearts", "single"),
        )
    )
    dumped = map_artist_full(artist, top, albums).model_dump(by_alias=True)
    assert dumped["artist"] == {
        "name": "The Weeknd",
        "topTracks": [
            {"name": "Blinding Lights", "popularity": 94},
            {"name": "Starboy", "popularity": 90},
        ],
        "albums": [
            {"name": "After Hours", "type": "album"},
            {"name": "Open Hearts", "type": "single"},
        ],
        "albumStats": {"album": 1, "single": 1, "compilation": 0},
    }


def test_map_album():
    dumped = map_album(Album.model_validate(factories.album())).model_dump(by_alias=True)
    album = dumped["album"]
    assert album["name"] == "After Hours"
    assert album["releaseDate"] == "2020-03-20"
    assert album["genres"] is None
    assert album["totalTracks"] == 2
    assert album["type"] == "album"
    assert album["artists"] == [
        {
            "name": "The Weeknd",
            "id": "1Xyo4u8uXC1ZmMpatF05PJ",
            "url": "https://open.spotify.com/artist/1Xyo4u8uXC1ZmMpatF05PJ",
        }
    ]
    assert album["images"] == [{"url": "https://i.scdn.co/image/cover", "height": 640, "width": 640}]
    assert album["tracks"][0] == {
        "name": "Alone Again",
        "duration": 250053,
        "trackNumber": 1,
        "url": "https://open.spotify.com/track/a",
    }


def test_parse_payload_rejects_missing_field():
    payload = factories.track()
    del payload["popularity"]
    with pytest.raises(MappingError, match="popularity"):
        parse_payload(Track, payload)


def test_parse_payload_rejects_wrong_type():
    payload = factories.album()
    payload["tracks"] = ["not", "a", "page"]
    with pytest.raises(MappingError):
        parse_payload(Album, payload)


def test_parse_payload_rejects_non_object():
    with pytest.raises(MappingError):
        parse_payload(Track, ["unexpected"])


@pytest.mark.parametrize(
    "field, value",
    [
        ("duration_ms", "200040"),
        ("duration_ms", 200040.5),
        ("popularity", True),
        ("popularity", "94"),
        ("name", 42),
    ],
)
def test_parse_payload_does_not_coerce_scalar_types(field, value):
    payload = factories.track()
    payload[field] = value
    with pytest.raises(MappingError, match=field):
        parse_payload(Track, payload)


def test_parse_payload_rejects_string_count_in_nested_object():
    payload = factories.artist()
    payload["followers"]["total"] = "94000000"
    with pytest.raises(MappingError, match="followers.total"):
        parse_payload(Artist, payload)
