"""UI state of the application's pages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .ids import ContextId, ItemType, SpotifyId, TracksId
from .line_input import LineInput
from .models import Category


@dataclass
class ListState:
    """Selection in a list or table window."""

    index: int | None = None

    def select(self, index: int | None) -> None:
        if index is not None and index < 0:
            raise ValueError(f"negative selection: {index}")
        self.index = index

    def selected(self) -> int | None:
        return self.index


TableState = ListState


@dataclass
class ScrollState:
    """Scroll offset of a scrollable window."""

    offset: int = 0

    def select(self, index: int) -> None:
        if index < 0:
            raise ValueError(f"negative scroll offset: {index}")
        self.offset = index

    def selected(self) -> int:
        return self.offset


WindowState = Union[ListState, ScrollState]


def _cycle(member: enum.Enum, step: int):
    """The member ``step`` places after ``member``, wrapping around."""
    members = list(type(member))
    return members[(members.index(member) + step) % len(members)]


class LibraryFocusState(enum.Enum):
    PLAYLISTS = 0
    SAVED_ALBUMS = 1
    FOLLOWED_ARTISTS = 2

    def next(self) -> LibraryFocusState:
        return _cycle(self, 1)

    def previous(self) -> LibraryFocusState:
        return _cycle(self, -1)


class ArtistFocusState(enum.Enum):
    TOP_TRACKS = 0
    ALBUMS = 1
    RELATED_ARTISTS = 2

    def next(self) -> ArtistFocusState:
        return _cycle(self, 1)

    def previous(self) -> ArtistFocusState:
        return _cycle(self, -1)


class SearchFocusState(enum.Enum):
    INPUT = 0
    TRACKS = 1
    ALBUMS = 2
    ARTISTS = 3
    PLAYLISTS = 4
    SHOWS = 5
    EPISODES = 6

    def next(self) -> SearchFocusState:
        return _cycle(self, 1)

    def previous(self) -> SearchFocusState:
        return _cycle(self, -1)


class PageType(enum.Enum):
    LIBRARY = "library"
    CONTEXT = "context"
    SEARCH = "search"
    BROWSE = "browse"
    LYRICS = "lyrics"
    QUEUE = "queue"
    COMMAND_HELP = "command_help"


class ContextKind(enum.Enum):
    PLAYLIST = "playlist"
    ALBUM = "album"
    ARTIST = "artist"
    TRACKS = "tracks"
    SHOW = "show"


@dataclass
class ContextPageUIState:
    """Window states of a context page.

    ``table`` holds the tracks, an artist's top tracks or a show's episodes.
    The album table, related artist list and focus are used by artist pages only.
    """

    kind: ContextKind
    table: ListState = field(default_factory=ListState)
    album_table: ListState = field(default_factory=ListState)
    related_artist_list: ListState = field(default_factory=ListState)
    focus: ArtistFocusState = ArtistFocusState.TOP_TRACKS

    @classmethod
    def new_playlist(cls) -> ContextPageUIState:
        return cls(ContextKind.PLAYLIST)

    @classmethod
    def new_album(cls) -> ContextPageUIState:
        return cls(ContextKind.ALBUM)

    @classmethod
    def new_artist(cls) -> ContextPageUIState:
        return cls(ContextKind.ARTIST)

    @classmethod
    def new_tracks(cls) -> ContextPageUIState:
        return cls(ContextKind.TRACKS)

    @classmethod
    def new_show(cls) -> ContextPageUIState:
        return cls(ContextKind.SHOW)

    def _focus_window(self) -> ListState:
        if self.kind is not ContextKind.ARTIST:
            return self.table
        if self.focus is ArtistFocusState.TOP_TRACKS:
            return self.table
        if self.focus is ArtistFocusState.ALBUMS:
            return self.album_table
        return self.related_artist_list


_CONTEXT_TITLES = {
    ItemType.PLAYLIST: "Playlist",
    ItemType.ALBUM: "Album",
    ItemType.ARTIST: "Artist",
    ItemType.SHOW: "Show",
}


@dataclass(frozen=True)
class ContextPageType:
    """The currently playing context (no id) or a browsed one."""

    context_id: ContextId | None = None

    def title(self) -> str:
        context_id = self.context_id
        if context_id is None:
            return "Current Playing"
        if isinstance(context_id, TracksId):
            return context_id.kind
        if isinstance(context_id, SpotifyId) and context_id.type in _CONTEXT_TITLES:
            return _CONTEXT_TITLES[context_id.type]
        raise ValueError(f"not a context id: {context_id!r}")


class PageState:
    """Base of all page states."""

    _page_type: ClassVar[PageType]

    def page_type(self) -> PageType:
        return self._page_type

    def focus_window_state(self) -> WindowState | None:
        """The state of the page's focused window, if it has one."""
        return None

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the focused window."""
        state = self.focus_window_state()
        if state is not None:
            state.select(index)

    def selected(self) -> int | None:
        state = self.focus_window_state()
        return state.selected() if state is not None else None

    def _advance_focus(self, forward: bool) -> None:
        """Move the focus; pages with a single window keep theirs."""

    def next_focus(self) -> None:
        """Focus the next window and reset its selection."""
        self._advance_focus(True)
        self.select(0)

    def previous_focus(self) -> None:
        """Focus the previous window and reset its selection."""
        self._advance_focus(False)
        self.select(0)


@dataclass
class LibraryPage(PageState):
    _page_type: ClassVar[PageType] = PageType.LIBRARY

    playlist_list: ListState = field(default_factory=ListState)
    saved_album_list: ListState = field(default_factory=ListState)
    followed_artist_list: ListState = field(default_factory=ListState)
    focus: LibraryFocusState = LibraryFocusState.PLAYLISTS
    playlist_folder_id: int = 0

    def focus_window_state(self) -> WindowState | None:
        if self.focus is LibraryFocusState.PLAYLISTS:
            return self.playlist_list
        if self.focus is LibraryFocusState.SAVED_ALBUMS:
            return self.saved_album_list
        return self.followed_artist_list

    def _advance_focus(self, forward: bool) -> None:
        self.focus = self.focus.next() if forward else self.focus.previous()


@dataclass
class ContextPage(PageState):
    _page_type: ClassVar[PageType] = PageType.CONTEXT

    id: ContextId | None = None
    context_page_type: ContextPageType = field(default_factory=ContextPageType)
    state: ContextPageUIState | None = None

    def focus_window_state(self) -> WindowState | None:
        return self.state._focus_window() if self.state is not None else None

    def _advance_focus(self, forward: bool) -> None:
        state = self.state
        if state is not None and state.kind is ContextKind.ARTIST:
            state.focus = state.focus.next() if forward else state.focus.previous()


@dataclass
class SearchPage(PageState):
    _page_type: ClassVar[PageType] = PageType.SEARCH

    line_input: LineInput = field(default_factory=LineInput)
    current_query: str = ""
    track_list: ListState = field(default_factory=ListState)
    album_list: ListState = field(default_factory=ListState)
    artist_list: ListState = field(default_factory=ListState)
    playlist_list: ListState = field(default_factory=ListState)
    show_list: ListState = field(default_factory=ListState)
    episode_list: ListState = field(default_factory=ListState)
    focus: SearchFocusState = SearchFocusState.INPUT

    def focus_window_state(self) -> WindowState | None:
        return {
            SearchFocusState.INPUT: None,
            SearchFocusState.TRACKS: self.track_list,
            SearchFocusState.ALBUMS: self.album_list,
            SearchFocusState.ARTISTS: self.artist_list,
            SearchFocusState.PLAYLISTS: self.playlist_list,
            SearchFocusState.SHOWS: self.show_list,
            SearchFocusState.EPISODES: self.episode_list,
        }[self.focus]

    def _advance_focus(self, forward: bool) -> None:
        self.focus = self.focus.next() if forward else self.focus.previous()


@dataclass
class LyricsPage(PageState):
    _page_type: ClassVar[PageType] = PageType.LYRICS

    track_uri: str
    track: str
    artists: str


@dataclass
class BrowsePage(PageState):
    """The category list, or the playlists of ``category`` when one is set."""

    _page_type: ClassVar[PageType] = PageType.BROWSE

    category: Category | None = None
    list_state: ListState = field(default_factory=ListState)

    def focus_window_state(self) -> WindowState | None:
        return self.list_state


@dataclass
class QueuePage(PageState):
    _page_type: ClassVar[PageType] = PageType.QUEUE

    scroll: ScrollState = field(default_factory=ScrollState)

    def focus_window_state(self) -> WindowState | None:
        return self.scroll


@dataclass
class CommandHelpPage(PageState):
    _page_type: ClassVar[PageType] = PageType.COMMAND_HELP

    scroll: ScrollState = field(default_factory=ScrollState)

    def focus_window_state(self) -> WindowState | None:
        return self.scroll