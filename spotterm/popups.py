"""UI state of the application's popups."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

from .ids import SpotifyId
from .line_input import LineInput
from .models import Album, Artist, Episode, Playlist, Show, Track
from .pages import ListState


class PlaylistCreateCurrentField(enum.Enum):
    """The field being edited in the playlist creation popup."""

    NAME = "name"
    DESC = "desc"


class ArtistPopupAction(enum.Enum):
    """What choosing an artist in an artist popup list does."""

    BROWSE = "browse"
    SHOW_ACTIONS = "show_actions"


@dataclass
class BrowsePlaylists:
    """Browse the user's playlists in a folder."""

    folder_id: int = 0


@dataclass
class AddTrackToPlaylist:
    """Add a track to the chosen playlist."""

    folder_id: int
    track_id: SpotifyId


@dataclass
class AddEpisodeToPlaylist:
    """Add an episode to the chosen playlist."""

    folder_id: int
    episode_id: SpotifyId


PlaylistPopupAction = Union[BrowsePlaylists, AddTrackToPlaylist, AddEpisodeToPlaylist]
ActionTarget = Union[Track, Artist, Album, Playlist, Show, Episode]


def _action_desc(action: Any) -> str:
    return action.name if isinstance(action, enum.Enum) else str(action)


@dataclass
class ActionListItem:
    """An item together with the actions that can be run on it."""

    item: ActionTarget
    actions: list[Any] = field(default_factory=list)

    def n_actions(self) -> int:
        return len(self.actions)

    def name(self) -> str:
        return self.item.name

    def actions_desc(self) -> list[str]:
        """A description of every action, in order."""
        return [_action_desc(action) for action in self.actions]


class Popup:
    """Base of all popup states."""

    def list_state(self) -> ListState | None:
        """The list state of a list popup; ``None`` for other popups."""
        return None

    def list_selected(self) -> int | None:
        state = self.list_state()
        return state.selected() if state is not None else None

    def list_select(self, index: int | None) -> None:
        """Select a position in a list popup; other popups ignore it."""
        state = self.list_state()
        if state is not None:
            state.select(index)


class _ListPopup(Popup):
    state: ListState

    def list_state(self) -> ListState | None:
        return self.state


@dataclass
class SearchPopup(Popup):
    query: str = ""


@dataclass
class PlaylistCreatePopup(Popup):
    name: LineInput = field(default_factory=LineInput)
    desc: LineInput = field(default_factory=LineInput)
    current_field: PlaylistCreateCurrentField = PlaylistCreateCurrentField.NAME


@dataclass
class UserPlaylistListPopup(_ListPopup):
    action: PlaylistPopupAction = field(default_factory=BrowsePlaylists)
    state: ListState = field(default_factory=ListState)


@dataclass
class UserFollowedArtistListPopup(_ListPopup):
    state: ListState = field(default_factory=ListState)


@dataclass
class UserSavedAlbumListPopup(_ListPopup):
    state: ListState = field(default_factory=ListState)


@dataclass
class DeviceListPopup(_ListPopup):
    state: ListState = field(default_factory=ListState)


@dataclass
class ArtistListPopup(_ListPopup):
    action: ArtistPopupAction = ArtistPopupAction.BROWSE
    artists: list[Artist] = field(default_factory=list)
    state: ListState = field(default_factory=ListState)


@dataclass
class ThemeListPopup(_ListPopup):
    themes: list[Any] = field(default_factory=list)
    state: ListState = field(default_factory=ListState)


@dataclass
class ActionListPopup(_ListPopup):
    item: ActionListItem
    state: ListState = field(default_factory=ListState)