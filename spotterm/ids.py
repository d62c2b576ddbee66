"""Identifiers of Spotify items and of application-defined track lists."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_PREFIX = "spotify"


class ItemType(enum.Enum):
    """Kind of item a Spotify identifier refers to."""

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    SHOW = "show"
    EPISODE = "episode"
    USER = "user"


@dataclass(frozen=True)
class SpotifyId:
    """A typed Spotify identifier such as ``spotify:track:{id}``."""

    type: ItemType
    id: str

    def __post_init__(self) -> None:
        if not isinstance(self.type, ItemType):
            raise TypeError(f"invalid item type: {self.type!r}")
        if not self.id:
            raise ValueError("empty Spotify id")
        if self.type is not ItemType.USER and not (
            self.id.isascii() and self.id.isalnum()
        ):
            raise ValueError(f"invalid {self.type.value} id: {self.id!r}")

    @classmethod
    def from_uri(cls, uri: str) -> SpotifyId:
        """Parse ``spotify:{type}:{id}`` (or ``spotify/{type}/{id}``)."""
        if not uri.startswith(_PREFIX):
            raise ValueError(f"invalid URI prefix: {uri!r}")
        rest = uri[len(_PREFIX):]
        if not rest or rest[0] not in ":/":
            raise ValueError(f"invalid URI separator: {uri!r}")
        sep, rest = rest[0], rest[1:]
        if sep not in rest:
            raise ValueError(f"invalid URI: {uri!r}")
        kind, ident = rest.rsplit(sep, 1)
        try:
            item_type = ItemType(kind)
        except ValueError:
            raise ValueError(f"invalid item type in URI: {uri!r}") from None
        return cls(item_type, ident)

    def uri(self) -> str:
        """The ``spotify:{type}:{id}`` URI of this identifier."""
        return f"{_PREFIX}:{self.type.value}:{self.id}"

    def __str__(self) -> str:
        return self.uri()


@dataclass(frozen=True)
class TracksId:
    """Identifier of an application-defined list of tracks."""

    uri: str
    kind: str


ContextId = SpotifyId | TracksId


def context_uri(context_id: ContextId) -> str:
    """The URI of a playing context (playlist, album, artist, show or track list)."""
    if isinstance(context_id, TracksId):
        return context_id.uri
    if isinstance(context_id, SpotifyId):
        return context_id.uri()
    raise TypeError(f"not a context id: {context_id!r}")