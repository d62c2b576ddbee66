from datetime import datetime, timedelta, timezone
from functools import cmp_to_key

import pytest

from spotterm.ids import ItemType, SpotifyId
from spotterm.models import (
    USER_TOP_TRACKS_ID,
    Album,
    AlbumContext,
    Artist,
    ArtistContext,
    ContextPlayback,
    Device,
    Episode,
    Lyrics,
    Playlist,
    PlaylistContext,
    PlaylistFolder,
    Show,
    ShowContext,
    Track,
    TrackOrder,
    TracksContext,
    UrisPlayback,
    bidi_display,
    folder_item_from_dict,
    folder_item_to_dict,
    play_time,
)


def _artist(name="Band", ident="ar1"):
    return Artist(SpotifyId(ItemType.ARTIST, ident), name)


def _track(name="Song", secs=30, ident="t1", explicit=False, album=None, artists=None, added_at=0):
    return Track(
        id=SpotifyId(ItemType.TRACK, ident),
        name=name,
        artists=artists if artists is not None else [_artist()],
        album=album,
        duration=timedelta(seconds=secs),
        explicit=explicit,
        added_at=added_at,
    )


def _album(name="Record"):
    return Album(SpotifyId(ItemType.ALBUM, "al1"), "2001-02-03", name, [_artist()], "album", 5)


def _playlist():
    return Playlist(
        id=SpotifyId(ItemType.PLAYLIST, "pl1"),
        collaborative=True,
        name="Mix",
        owner=("Owner", SpotifyId(ItemType.USER, "owner.name")),
        desc="d",
        current_folder_id=2,
        snapshot_id="snap",
    )


def test_artist_from_api():
    assert Artist.from_api({"name": "x"}) is None
    artist = Artist.from_api({"id": "abc1", "name": "Band"})
    assert artist.name == "Band"
    assert artist.id.uri() == "spotify:artist:abc1"
    assert Artist.from_dict(artist.to_dict()) == artist


def test_album_from_api_type_and_year():
    album = Album.from_api(
        {"id": "al9", "name": "R", "album_type": "SINGLE", "release_date": "1999-05-01",
         "artists": [{"id": "a1", "name": "A"}, {"name": "no id"}]}
    )
    assert album.album_type() == "single"
    assert album.year() == "1999"
    assert [a.name for a in album.artists] == ["A"]
    other = Album.from_api({"id": "al9", "name": "R", "album_type": "weird"})
    assert other.album_type() == ""
    assert other.release_date == ""
    assert Album.from_api({"name": "R"}) is None


def test_album_added_at_conversion():
    when = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    album = Album.from_api({"id": "al9", "name": "R"}, added_at=when)
    assert album.added_at == int(when.timestamp())
    from_str = Album.from_api({"id": "al9", "name": "R"}, added_at="2020-01-02T03:04:05Z")
    assert from_str.added_at == album.added_at


def test_album_round_trip_and_str():
    album = _album()
    assert Album.from_dict(album.to_dict()) == album
    assert str(album) == f"Record • Band ({album.year()})"


def test_track_from_api_playability_and_linking():
    assert Track.from_api({"id": "t1", "name": "x", "is_playable": False}) is None
    assert Track.from_api({"name": "x"}) is None
    track = Track.from_api(
        {"id": "t1", "name": "x", "linked_from": {"id": "orig1"}, "duration_ms": 1500,
         "explicit": True, "album": {"id": "al1", "name": "A"}}
    )
    assert track.id == SpotifyId(ItemType.TRACK, "orig1")
    assert track.duration == timedelta(milliseconds=1500)
    assert track.album_info() == "A"


def test_track_display():
    track = _track(explicit=True, album=_album(), artists=[_artist("A"), _artist("B", "ar2")])
    assert track.display_name() == "Song (E)"
    assert track.artists_info() == "A, B"
    assert str(track) == "Song (E) • A, B ▎ Record"
    assert _track().display_name() == "Song"
    assert _track().album_info() == ""


def test_track_round_trip_drops_added_at():
    track = _track(album=_album(), added_at=42)
    restored = Track.from_dict(track.to_dict())
    assert restored.added_at == 0
    assert restored.album == track.album
    assert restored.duration == track.duration
    assert restored.id == track.id


def test_playlist_from_api_strips_html():
    playlist = Playlist.from_api(
        {"id": "pl1", "name": "Mix", "owner": {"id": "u1", "display_name": None},
         "description": "<b>Chill</b> &amp; relax", "snapshot_id": "s"}
    )
    assert playlist.desc == "Chill & relax"
    assert playlist.owner[0] == ""
    assert str(playlist) == "Mix • "


def test_playlist_and_folder_items_round_trip():
    playlist = _playlist()
    folder = PlaylistFolder("Rock", 0, 1)
    for item in (playlist, folder):
        assert folder_item_from_dict(folder_item_to_dict(item)) == item
    assert str(folder) == "Rock/"
    with pytest.raises(ValueError):
        folder_item_from_dict({"Other": {}})


def test_episode_and_show():
    episode = Episode.from_api(
        {"id": "e1", "name": "Ep", "description": "d", "duration_ms": 60000,
         "show": {"id": "s1", "name": "Pod"}, "release_date": "2020-01-01"}
    )
    assert str(episode) == "Ep • Pod"
    assert Episode.from_dict(episode.to_dict()) == episode
    episode.show = None
    assert str(episode) == "Ep"
    show = Show.from_api({"id": "s1", "name": "Pod"})
    assert Show.from_dict(show.to_dict()) == show


def test_device_from_api():
    assert Device.from_api({"name": "speaker", "id": None}) is None
    assert Device.from_api({"id": "d1", "name": "speaker"}) == Device("d1", "speaker")


def test_track_order():
    a = _track("a", secs=10, ident="t1", added_at=3)
    b = _track("b", secs=5, ident="t2", added_at=1)
    assert TrackOrder.TRACK_NAME.compare(a, b) == -1
    assert TrackOrder.DURATION.compare(a, b) == 1
    assert TrackOrder.ALBUM.compare(a, b) == 0
    ordered = sorted([a, b], key=cmp_to_key(TrackOrder.ADDED_AT.compare))
    assert [t.name for t in ordered] == ["b", "a"]


def test_play_time():
    assert play_time([]) == "0s"
    assert play_time([_track(secs=60), _track(secs=5)]) == "1m 5s"
    assert play_time([_track(secs=3600)]) == "1h 0s"


def test_context_descriptions():
    tracks = [_track(secs=60), _track(secs=5)]
    album = _album()
    assert AlbumContext(album, tracks).description() == (
        f"Record | 2001-02-03 | 2 songs | {play_time(tracks)}"
    )
    assert PlaylistContext(_playlist(), tracks).description() == (
        f"Mix | Owner | 2 songs | {play_time(tracks)}"
    )
    assert ArtistContext(_artist()).description() == "Band"
    assert TracksContext(tracks, USER_TOP_TRACKS_ID.kind).description() == (
        f"Top Tracks | 2 songs | {play_time(tracks)}"
    )
    show = Show(SpotifyId(ItemType.SHOW, "s1"), "Pod")
    assert ShowContext(show, []).description() == "Pod | 0 episodes"


def test_context_playback_uri_offset():
    playback = ContextPlayback(USER_TOP_TRACKS_ID)
    moved = playback.uri_offset("spotify:track:t5", 10)
    assert moved.offset == "spotify:track:t5"
    assert moved.context_id == USER_TOP_TRACKS_ID


def test_uris_playback_window():
    ids = [SpotifyId(ItemType.TRACK, f"t{i}") for i in range(10)]
    playback = UrisPlayback(ids)
    short = playback.uri_offset(ids[5].uri(), 20)
    assert short.ids == tuple(ids)
    windowed = playback.uri_offset(ids[5].uri(), 4)
    assert windowed.ids == tuple(ids[3:7])
    assert windowed.offset == ids[5].uri()
    missing = playback.uri_offset("spotify:track:zzz", 4)
    assert missing.ids == tuple(ids[:4])


def test_lyrics_sorted_and_invalid():
    lyrics = Lyrics.from_lines([("2000", "second"), ("500", "first")])
    assert [words for _, words in lyrics.lines] == ["first", "second"]
    assert lyrics.lines[0][0] == timedelta(milliseconds=500)
    with pytest.raises(ValueError):
        Lyrics.from_lines([("abc", "bad")])


def test_bidi_display_of_plain_text():
    assert bidi_display(_artist("Plain")) == "Plain"
    assert bidi_display(PlaylistFolder("F", 0, 1)) == "F/"