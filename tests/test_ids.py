import pytest

from spotterm.ids import ItemType, SpotifyId, TracksId, context_uri

TRACK_URI = "spotify:track:4uLU6hMCjMI75M1A2tKUQC"


def test_from_uri_parses_type_and_id():
    sid = SpotifyId.from_uri(TRACK_URI)
    assert sid.type is ItemType.TRACK
    assert sid.id == "4uLU6hMCjMI75M1A2tKUQC"


def test_uri_round_trip():
    assert SpotifyId.from_uri(TRACK_URI).uri() == TRACK_URI


@pytest.mark.parametrize("kind", [t for t in ItemType if t is not ItemType.USER])
def test_round_trip_every_type(kind):
    sid = SpotifyId(kind, "abc123XYZ")
    assert SpotifyId.from_uri(sid.uri()) == sid


def test_slash_separator_accepted():
    sid = SpotifyId.from_uri("spotify/album/abc123")
    assert sid == SpotifyId(ItemType.ALBUM, "abc123")


def test_user_id_allows_any_characters():
    sid = SpotifyId.from_uri("spotify:user:some.user-name")
    assert sid.id == "some.user-name"
    assert sid.type is ItemType.USER


@pytest.mark.parametrize(
    "uri",
    [
        "track:abc",
        "spotify-track:abc",
        "spotify:foo:bar",
        "spotify:track:",
        "spotify:track:ab-c",
        "spotify:user:x:playlist:y",
        "spotify",
        "spotify:track",
    ],
)
def test_invalid_uris_raise(uri):
    with pytest.raises(ValueError):
        SpotifyId.from_uri(uri)


def test_constructor_validates_id():
    with pytest.raises(ValueError):
        SpotifyId(ItemType.PLAYLIST, "has space")


def test_ids_are_hashable_and_comparable():
    a = SpotifyId.from_uri(TRACK_URI)
    b = SpotifyId(ItemType.TRACK, "4uLU6hMCjMI75M1A2tKUQC")
    assert {a: 1}[b] == 1


def test_context_uri_for_tracks_id():
    tid = TracksId("tracks:user-top-tracks", "Top Tracks")
    assert context_uri(tid) == "tracks:user-top-tracks"


def test_context_uri_for_spotify_id():
    sid = SpotifyId.from_uri("spotify:playlist:abc")
    assert context_uri(sid) == sid.uri()


def test_context_uri_rejects_other_values():
    with pytest.raises(TypeError):
        context_uri("spotify:playlist:abc")