"""User data, file caches and in-memory caches of the application."""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from os import PathLike
from pathlib import Path
from typing import Any

from cachetools import TTLCache

from .ids import ContextId, context_uri
from .models import (
    Album,
    Artist,
    ArtistContext,
    Category,
    Playlist,
    PlaylistFolderItem,
    Show,
    ShowContext,
    Track,
    folder_item_from_dict,
    folder_item_to_dict,
)
from .playlist_folders import PlaylistFolderNode

logger = logging.getLogger(__name__)

TTL_CACHE_DURATION = timedelta(hours=1)
_MEMORY_CACHE_SIZE = 64


class FileCacheKey(enum.Enum):
    """The kinds of data kept in file caches."""

    PLAYLISTS = "Playlists"
    PLAYLIST_FOLDERS = "PlaylistFolders"
    FOLLOWED_ARTISTS = "FollowedArtists"
    SAVED_SHOWS = "SavedShows"
    SAVED_ALBUMS = "SavedAlbums"
    SAVED_TRACKS = "SavedTracks"

    def path(self, cache_folder: str | PathLike[str]) -> Path:
        return Path(cache_folder) / f"{self.value}_cache.json"


def _node_to_dict(node: PlaylistFolderNode) -> dict[str, Any]:
    return {
        "name": node.name,
        "type": node.node_type,
        "uri": node.uri,
        "children": [_node_to_dict(child) for child in node.children],
    }


def _list_codec(to_dict: Callable[[Any], Any], from_dict: Callable[[Any], Any]):
    return (
        lambda items: [to_dict(item) for item in items],
        lambda data: [from_dict(item) for item in data],
    )


_CODECS: dict[FileCacheKey, tuple[Callable[[Any], Any], Callable[[Any], Any]]] = {
    FileCacheKey.PLAYLISTS: _list_codec(folder_item_to_dict, folder_item_from_dict),
    FileCacheKey.PLAYLIST_FOLDERS: (_node_to_dict, PlaylistFolderNode.from_dict),
    FileCacheKey.FOLLOWED_ARTISTS: _list_codec(Artist.to_dict, Artist.from_dict),
    FileCacheKey.SAVED_SHOWS: _list_codec(Show.to_dict, Show.from_dict),
    FileCacheKey.SAVED_ALBUMS: _list_codec(Album.to_dict, Album.from_dict),
    FileCacheKey.SAVED_TRACKS: (
        lambda tracks: {uri: t.to_dict() for uri, t in tracks.items()},
        lambda data: {uri: Track.from_dict(t) for uri, t in data.items()},
    ),
}


def store_data_into_file_cache(
    key: FileCacheKey, cache_folder: str | PathLike[str], data: Any
) -> None:
    """Write ``data`` to the JSON file cache for ``key``."""
    encode, _ = _CODECS[key]
    with key.path(cache_folder).open("w", encoding="utf-8") as f:
        json.dump(encode(data), f)


def load_data_from_file_cache(key: FileCacheKey, cache_folder: str | PathLike[str]) -> Any:
    """Read the file cache for ``key``; ``None`` if it is missing or unreadable."""
    path = key.path(cache_folder)
    if not path.exists():
        return None
    logger.info("Loading %s data from %s...", key.value, path)
    _, decode = _CODECS[key]
    try:
        with path.open(encoding="utf-8") as f:
            data = decode(json.load(f))
    except (ValueError, KeyError, TypeError, AttributeError) as err:
        logger.error("Failed to load %s data: %s", key.value, err)
        return None
    logger.info("Successfully loaded %s data!", key.value)
    return data


def _in_folder(item: PlaylistFolderItem, folder_id: int) -> bool:
    if isinstance(item, Playlist):
        return item.current_folder_id == folder_id
    return item.current_id == folder_id


@dataclass
class UserData:
    """The current user's library. ``user`` is the API user object, if known."""

    user: dict[str, Any] | None = None
    playlists: list[PlaylistFolderItem] = field(default_factory=list)
    playlist_folder_node: PlaylistFolderNode | None = None
    followed_artists: list[Artist] = field(default_factory=list)
    saved_shows: list[Show] = field(default_factory=list)
    saved_albums: list[Album] = field(default_factory=list)
    saved_tracks: dict[str, Track] = field(default_factory=dict)

    @classmethod
    def from_file_caches(cls, cache_folder: str | PathLike[str]) -> UserData:
        """Build from whatever file caches exist in ``cache_folder``."""

        def load(key: FileCacheKey, default: Callable[[], Any]) -> Any:
            data = load_data_from_file_cache(key, cache_folder)
            return default() if data is None else data

        return cls(
            user=None,
            playlists=load(FileCacheKey.PLAYLISTS, list),
            playlist_folder_node=load_data_from_file_cache(
                FileCacheKey.PLAYLIST_FOLDERS, cache_folder
            ),
            followed_artists=load(FileCacheKey.FOLLOWED_ARTISTS, list),
            saved_shows=load(FileCacheKey.SAVED_SHOWS, list),
            saved_albums=load(FileCacheKey.SAVED_ALBUMS, list),
            saved_tracks=load(FileCacheKey.SAVED_TRACKS, dict),
        )

    def modifiable_playlist_items(self, folder_id: int | None = None) -> list[PlaylistFolderItem]:
        """Folders and playlists the user may be able to modify.

        With ``folder_id``, only the items in that folder are returned.
        Without a known user nothing is returned.
        """
        if self.user is None:
            return []
        user_id = self.user.get("id")
        return [
            item
            for item in self.playlists
            if (folder_id is None or _in_folder(item, folder_id))
            and (
                not isinstance(item, Playlist)
                or item.owner[1].id == user_id
                or item.collaborative
            )
        ]

    def folder_playlists_items(self, folder_id: int) -> list[PlaylistFolderItem]:
        """Folders and playlists in the folder ``folder_id``."""
        return [item for item in self.playlists if _in_folder(item, folder_id)]

    def is_liked_track(self, track: Track) -> bool:
        return track.id.uri() in self.saved_tracks

    def is_followed_playlist(self, playlist: Playlist) -> bool:
        return any(
            isinstance(item, Playlist) and item.id == playlist.id for item in self.playlists
        )


def _ttl_cache() -> TTLCache:
    return TTLCache(maxsize=_MEMORY_CACHE_SIZE, ttl=TTL_CACHE_DURATION.total_seconds())


@dataclass
class MemoryCaches:
    """Time-limited caches of contexts, search results and lyrics, keyed by URI or query."""

    context: TTLCache = field(default_factory=_ttl_cache)
    search: TTLCache = field(default_factory=_ttl_cache)
    lyrics: TTLCache = field(default_factory=_ttl_cache)


@dataclass
class BrowseData:
    """Browse categories and the playlists of each category."""

    categories: list[Category] = field(default_factory=list)
    category_playlists: dict[str, list[Playlist]] = field(default_factory=dict)


@dataclass
class AppData:
    """All data the application holds."""

    user_data: UserData = field(default_factory=UserData)
    caches: MemoryCaches = field(default_factory=MemoryCaches)
    browse: BrowseData = field(default_factory=BrowseData)

    @classmethod
    def from_cache_folder(cls, cache_folder: str | PathLike[str]) -> AppData:
        return cls(user_data=UserData.from_file_caches(cache_folder))

    def context_tracks(self, context_id: ContextId) -> list[Track] | None:
        """The cached track list of a context; ``None`` if not cached or a show."""
        context = self.caches.context.get(context_uri(context_id))
        if context is None or isinstance(context, ShowContext):
            return None
        if isinstance(context, ArtistContext):
            return context.top_tracks
        return context.tracks