"""Data model of the items the player shows and plays."""

from __future__ import annotations

import enum
import html
import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from operator import itemgetter
from typing import Any, Union

from .ids import ContextId, ItemType, SpotifyId, TracksId
from .ui_utils import to_bidi_string
from .utils import map_join

USER_TOP_TRACKS_ID = TracksId("tracks:user-top-tracks", "Top Tracks")
USER_RECENTLY_PLAYED_TRACKS_ID = TracksId(
    "tracks:user-recently-played-tracks", "Recently Played Tracks"
)
USER_LIKED_TRACKS_ID = TracksId("tracks:user-liked-tracks", "Liked Tracks")

_ALBUM_TYPES = frozenset({"album", "single", "appears_on", "compilation"})
_HTML_TAG = re.compile(r"(<.*?>|</.*?>)")


def _timestamp(value: Any) -> int:
    """Convert an ``added_at`` value to a Unix timestamp; nothing gives 0."""
    if value is None:
        return 0
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


def _ms(duration: timedelta) -> int:
    return round(duration.total_seconds() * 1000)


def _artists_from_api(items: list[dict[str, Any]] | None) -> list[Artist]:
    artists = (Artist.from_api(item) for item in items or ())
    return [artist for artist in artists if artist is not None]


def bidi_display(item: Any) -> str:
    """The display text of ``item`` with right-to-left runs reordered."""
    return to_bidi_string(str(item))


@dataclass
class Artist:
    """A Spotify artist."""

    id: SpotifyId
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Artist | None:
        """Build from an API artist object; ``None`` when it has no id."""
        ident = data.get("id")
        if not ident:
            return None
        return cls(SpotifyId(ItemType.ARTIST, ident), data.get("name", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id.uri(), "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Artist:
        return cls(SpotifyId.from_uri(data["id"]), data["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class Album:
    """A Spotify album."""

    id: SpotifyId
    release_date: str
    name: str
    artists: list[Artist] = field(default_factory=list)
    typ: str | None = None
    added_at: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any], added_at: Any = None) -> Album | None:
        """Build from an API album object; ``None`` when it has no id."""
        ident = data.get("id")
        if not ident:
            return None
        kind = data.get("album_type")
        kind = kind.lower() if isinstance(kind, str) else None
        return cls(
            id=SpotifyId(ItemType.ALBUM, ident),
            release_date=data.get("release_date") or "",
            name=data.get("name", ""),
            artists=_artists_from_api(data.get("artists")),
            typ=kind if kind in _ALBUM_TYPES else None,
            added_at=_timestamp(added_at),
        )

    def year(self) -> str:
        """The release year, the part of the release date before the first dash."""
        return self.release_date.split("-", 1)[0]

    def album_type(self) -> str:
        """The album type, or an empty string when unknown."""
        return self.typ or ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "release_date": self.release_date,
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
            "typ": self.typ,
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Album:
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            release_date=data["release_date"],
            name=data["name"],
            artists=[Artist.from_dict(a) for a in data["artists"]],
            typ=data.get("typ"),
            added_at=data.get("added_at", 0),
        )

    def __str__(self) -> str:
        artists = map_join(self.artists, lambda a: a.name, ", ")
        return f"{self.name} • {artists} ({self.year()})"


@dataclass
class Track:
    """A Spotify track."""

    id: SpotifyId
    name: str
    artists: list[Artist] = field(default_factory=list)
    album: Album | None = None
    duration: timedelta = timedelta()
    explicit: bool = False
    added_at: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any], added_at: Any = None) -> Track | None:
        """Build from an API track object.

        Returns ``None`` for unplayable tracks and tracks without an id.
        A relinked track keeps the id it was linked from.
        """
        if data.get("is_playable") is False:
            return None
        linked = data.get("linked_from")
        ident = linked.get("id") if linked else data.get("id")
        if not ident:
            return None
        album_data = data.get("album")
        return cls(
            id=SpotifyId(ItemType.TRACK, ident),
            name=data.get("name", ""),
            artists=_artists_from_api(data.get("artists")),
            album=Album.from_api(album_data) if album_data else None,
            duration=timedelta(milliseconds=data.get("duration_ms", 0)),
            explicit=bool(data.get("explicit", False)),
            added_at=_timestamp(added_at),
        )

    def artists_info(self) -> str:
        return map_join(self.artists, lambda a: a.name, ", ")

    def album_info(self) -> str:
        return self.album.name if self.album is not None else ""

    def display_name(self) -> str:
        """The track's name, labelled when explicit."""
        return f"{self.name} (E)" if self.explicit else self.name

    def to_dict(self) -> dict[str, Any]:
        """Serialise for the file cache; ``added_at`` is not kept."""
        return {
            "id": self.id.uri(),
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
            "album": self.album.to_dict() if self.album is not None else None,
            "duration_ms": _ms(self.duration),
            "explicit": self.explicit,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Track:
        album = data.get("album")
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            name=data["name"],
            artists=[Artist.from_dict(a) for a in data["artists"]],
            album=Album.from_dict(album) if album is not None else None,
            duration=timedelta(milliseconds=data["duration_ms"]),
            explicit=data["explicit"],
        )

    def __str__(self) -> str:
        return f"{self.display_name()} • {self.artists_info()} ▎ {self.album_info()}"


@dataclass
class Playlist:
    """A Spotify playlist."""

    id: SpotifyId
    collaborative: bool
    name: str
    owner: tuple[str, SpotifyId]
    desc: str = ""
    current_folder_id: int = 0
    snapshot_id: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Playlist:
        """Build from an API playlist object, stripping HTML from its description."""
        owner = data.get("owner") or {}
        desc = _TAG_FREE(data.get("description") or "")
        return cls(
            id=SpotifyId(ItemType.PLAYLIST, data["id"]),
            collaborative=bool(data.get("collaborative", False)),
            name=data.get("name", ""),
            owner=(owner.get("display_name") or "", SpotifyId(ItemType.USER, owner["id"])),
            desc=desc,
            snapshot_id=data.get("snapshot_id", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "collaborative": self.collaborative,
            "name": self.name,
            "owner": [self.owner[0], self.owner[1].uri()],
            "desc": self.desc,
            "current_folder_id": self.current_folder_id,
            "snapshot_id": self.snapshot_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Playlist:
        owner_name, owner_uri = data["owner"]
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            collaborative=data["collaborative"],
            name=data["name"],
            owner=(owner_name, SpotifyId.from_uri(owner_uri)),
            desc=data["desc"],
            current_folder_id=data.get("current_folder_id", 0),
            snapshot_id=data["snapshot_id"],
        )

    def __str__(self) -> str:
        return f"{self.name} • {self.owner[0]}"


def _TAG_FREE(text: str) -> str:
    return html.unescape(_HTML_TAG.sub("", text))


@dataclass
class Show:
    """A Spotify show (podcast)."""

    id: SpotifyId
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Show:
        return cls(SpotifyId(ItemType.SHOW, data["id"]), data.get("name", ""))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id.uri(), "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Show:
        return cls(SpotifyId.from_uri(data["id"]), data["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class Episode:
    """A Spotify podcast episode."""

    id: SpotifyId
    name: str
    description: str
    duration: timedelta
    show: Show | None = None
    release_date: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Episode:
        show = data.get("show")
        return cls(
            id=SpotifyId(ItemType.EPISODE, data["id"]),
            name=data.get("name", ""),
            description=data.get("description", ""),
            duration=timedelta(milliseconds=data.get("duration_ms", 0)),
            show=Show.from_api(show) if show else None,
            release_date=data.get("release_date", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "name": self.name,
            "description": self.description,
            "duration_ms": _ms(self.duration),
            "show": self.show.to_dict() if self.show is not None else None,
            "release_date": self.release_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Episode:
        show = data.get("show")
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            name=data["name"],
            description=data["description"],
            duration=timedelta(milliseconds=data["duration_ms"]),
            show=Show.from_dict(show) if show is not None else None,
            release_date=data["release_date"],
        )

    def __str__(self) -> str:
        if self.show is not None:
            return f"{self.name} • {self.show.name}"
        return self.name


@dataclass
class PlaylistFolder:
    """A playlist folder, or the link back to its parent."""

    name: str
    current_id: int
    target_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "current_id": self.current_id, "target_id": self.target_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaylistFolder:
        return cls(data["name"], data["current_id"], data["target_id"])

    def __str__(self) -> str:
        return f"{self.name}/"


PlaylistFolderItem = Union[Playlist, PlaylistFolder]


def folder_item_to_dict(item: PlaylistFolderItem) -> dict[str, Any]:
    """Serialise a playlist or folder as ``{"Playlist": ...}`` or ``{"Folder": ...}``."""
    if isinstance(item, Playlist):
        return {"Playlist": item.to_dict()}
    if isinstance(item, PlaylistFolder):
        return {"Folder": item.to_dict()}
    raise TypeError(f"not a playlist folder item: {item!r}")


def folder_item_from_dict(data: dict[str, Any]) -> PlaylistFolderItem:
    if "Playlist" in data:
        return Playlist.from_dict(data["Playlist"])
    if "Folder" in data:
        return PlaylistFolder.from_dict(data["Folder"])
    raise ValueError(f"unknown playlist folder item: {data!r}")


@dataclass
class Category:
    """A browse category."""

    id: str
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Device:
    """A Spotify Connect device."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Device | None:
        """Build from an API device object; ``None`` when it has no id."""
        ident = data.get("id")
        if ident is None:
            return None
        return cls(ident, data.get("name", ""))


@dataclass
class PlaybackMetadata:
    """Buffered playback state shown before the server confirms it."""

    device_name: str
    device_id: str | None = None
    volume: int | None = None
    is_playing: bool = False
    repeat_state: str = "off"
    shuffle_state: bool = False
    mute_state: int | None = None
    fake_track_repeat_state: bool = False


@dataclass
class SearchResults:
    """Results of a search query."""

    tracks: list[Track] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    playlists: list[Playlist] = field(default_factory=list)
    shows: list[Show] = field(default_factory=list)
    episodes: list[Episode] = field(default_factory=list)


class TrackOrder(enum.Enum):
    """A field tracks can be sorted by."""

    ADDED_AT = "added_at"
    TRACK_NAME = "track_name"
    ALBUM = "album"
    ARTISTS = "artists"
    DURATION = "duration"

    def _key(self, track: Track) -> Any:
        if self is TrackOrder.ADDED_AT:
            return track.added_at
        if self is TrackOrder.TRACK_NAME:
            return track.name
        if self is TrackOrder.ALBUM:
            return track.album_info()
        if self is TrackOrder.ARTISTS:
            return track.artists_info()
        return track.duration

    def compare(self, x: Track, y: Track) -> int:
        """Return -1, 0 or 1 as ``x`` sorts before, with or after ``y``."""
        a, b = self._key(x), self._key(y)
        return (a > b) - (a < b)


def play_time(tracks: list[Track]) -> str:
    """Total play time of ``tracks`` as ``"{h}h {m}m {s}s"``, omitting zero hours and minutes."""
    total = int(sum((t.duration for t in tracks), timedelta()).total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


@dataclass
class PlaylistContext:
    playlist: Playlist
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return (
            f"{self.playlist.name} | {self.playlist.owner[0]} | "
            f"{len(self.tracks)} songs | {play_time(self.tracks)}"
        )


@dataclass
class AlbumContext:
    album: Album
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return (
            f"{self.album.name} | {self.album.release_date} | "
            f"{len(self.tracks)} songs | {play_time(self.tracks)}"
        )


@dataclass
class ArtistContext:
    artist: Artist
    top_tracks: list[Track] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    related_artists: list[Artist] = field(default_factory=list)

    def description(self) -> str:
        return self.artist.name


@dataclass
class TracksContext:
    tracks: list[Track]
    desc: str

    def description(self) -> str:
        return f"{self.desc} | {len(self.tracks)} songs | {play_time(self.tracks)}"


@dataclass
class ShowContext:
    show: Show
    episodes: list[Episode] = field(default_factory=list)

    def description(self) -> str:
        return f"{self.show.name} | {len(self.episodes)} episodes"


Context = Union[PlaylistContext, AlbumContext, ArtistContext, TracksContext, ShowContext]

# An offset is either the URI of the item to start at or its position.
Offset = Union[str, int]


@dataclass(frozen=True)
class ContextPlayback:
    """Start playing a context, optionally at an offset."""

    context_id: ContextId
    offset: Offset | None = None

    def uri_offset(self, uri: str, limit: int) -> ContextPlayback:
        """The same playback, starting at ``uri``."""
        return replace(self, offset=uri)


@dataclass(frozen=True)
class UrisPlayback:
    """Start playing a list of items, optionally at an offset."""

    ids: tuple[SpotifyId, ...]
    offset: Offset | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(self.ids))

    def uri_offset(self, uri: str, limit: int) -> UrisPlayback:
        """The same playback starting at ``uri``.

        Lists of ``limit`` items or more are cut to a window of at most
        ``limit`` items around ``uri`` to keep the request small.
        """
        ids = self.ids
        if len(ids) >= limit:
            pos = next((i for i, ident in enumerate(ids) if ident.uri() == uri), 0)
            left = max(pos - limit // 2, 0)
            ids = ids[left:min(left + limit, len(ids))]
        return UrisPlayback(ids, uri)


@dataclass
class Lyrics:
    """Timestamped lyric lines, ordered by time."""

    lines: list[tuple[timedelta, str]] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines) -> Lyrics:
        """Build from ``(start_time_ms, words)`` pairs; start times may be strings."""
        parsed = [
            (timedelta(milliseconds=int(start)), to_bidi_string(words))
            for start, words in lines
        ]
        return cls(sorted(parsed, key=itemgetter(0)))