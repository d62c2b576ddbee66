# spotterm

The state layer of a terminal music player. It holds the data model, the
user's library with its JSON file caches, in-memory caches, the playback
state and the state of the interface's pages and popups. A front end
builds on top of it.

## What it does not do

- It draws nothing. There are no widgets and no rendering, and there is no
  terminal handling. The interface state says what is selected and focused,
  and `LineInput.segments` says how an input line should look. Drawing is
  left to the caller.
- It makes no network requests. Items are built from API-shaped
  dictionaries with the `from_api` class methods. Fetching those
  dictionaries is up to the caller.
- It plays no audio and has no command to start. There is no
  configuration, no theme or key map handling and no media-key support.

## Modules

- `spotterm.utils`
  - `format_duration` renders seconds or a `timedelta` as `m:ss`.
  - `map_join` joins a text taken from each item.
  - `parse_uri` turns `spotify:user:{user}:{type}:{id}` into `spotify:{type}:{id}`. Other URIs are returned unchanged.
- `spotterm.ids`
  - `ItemType` and `SpotifyId`. `SpotifyId.from_uri` parses a URI and `SpotifyId.uri` builds one.
  - `TracksId` names an application-defined track list.
  - `context_uri` gives the URI of either kind of id.
- `spotterm.models`
  - Items: `Track`, `Album`, `Artist`, `Playlist`, `Show` and `Episode`. Each has `from_api`. Each except `Track` has `to_dict` and `from_dict` for round trips. `Track` also has both, but `Track.to_dict` does not store `added_at`.
  - `Playlist.from_api` strips HTML tags from the description and unescapes entities.
  - Folders: `PlaylistFolder`, with `folder_item_to_dict` and `folder_item_from_dict` for the mixed playlist/folder list.
  - Contexts: `PlaylistContext`, `AlbumContext`, `ArtistContext`, `TracksContext` and `ShowContext`. Each has a `description()`, and `play_time` sums track durations as `1h 2m 3s`.
  - Playback requests: `ContextPlayback` and `UrisPlayback`. `uri_offset` starts the request at a URI. On a long URI list it also cuts the list to a window of at most `limit` items around that URI.
  - Also `TrackOrder.compare`, `Lyrics.from_lines`, `Category`, `Device`, `PlaybackMetadata` and `SearchResults`.
  - Predefined track lists: `USER_TOP_TRACKS_ID`, `USER_RECENTLY_PLAYED_TRACKS_ID` and `USER_LIKED_TRACKS_ID`.
  - `bidi_display` gives the display text of an item, with right-to-left runs reordered.
- `spotterm.playlist_folders`
  - `structurize` places playlists into the folder tree described by `PlaylistFolderNode` values. Each folder gives a folder entry and a `← name` entry that links back to its parent. Playlists that no node references go to the root folder.
- `spotterm.data`
  - `UserData`, `MemoryCaches` (one-hour `cachetools.TTLCache`s of 64 entries), `BrowseData` and `AppData`.
  - `store_data_into_file_cache` and `load_data_from_file_cache` write and read `{Key}_cache.json` files for each `FileCacheKey`. A file that is missing or unreadable loads as `None`.
- `spotterm.player`
  - `PlayerState` holds the devices, the `CurrentPlayback` and the queue.
  - It estimates the progress of what is playing from a monotonic clock.
  - It applies the buffered `PlaybackMetadata` over the reported playback.
  - It finds the id of the playing playlist, album, artist or show.
- `spotterm.line_input`
  - `LineInput` is a one-line editor.
  - Single characters are inserted at the cursor. `EditKey.BACKSPACE`, `LEFT` and `RIGHT` edit or move the cursor.
  - Each key returns an `InputEffect`, or `None` when the key is not handled.
- `spotterm.pages`
  - Page states: `LibraryPage`, `ContextPage`, `SearchPage`, `LyricsPage`, `BrowsePage`, `QueuePage` and `CommandHelpPage`.
  - Window states: `ListState` and `ScrollState`.
  - Focus enums cycle with `next` and `previous`.
  - `PageState.next_focus` and `previous_focus` move the focus and reset the selection.
- `spotterm.popups`
  - Popup states: `SearchPopup`, `PlaylistCreatePopup` and the list popups.
  - `ActionListItem` describes the actions available on an item.
- `spotterm.ui_state`
  - `UIState` keeps the page history, the open popup and the orientation.
  - `search_filtered_items` keeps the items whose text contains every word of the search query, ignoring case.
- `spotterm.ui_utils`
  - `to_bidi_string` reorders right-to-left text for display.
  - `adjust_selection` clamps a selection to a list length.
  - `Orientation.from_size` picks a layout from the terminal size.

## Example

```python
from pathlib import Path

from spotterm.data import AppData
from spotterm.utils import format_duration

data = AppData.from_cache_folder(Path("~/.cache/spotterm").expanduser())
for album in data.user_data.saved_albums:
    print(album, album.year())

print(format_duration(185))  # "3:05"
```

## Installing

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Running the tests

```
pytest
```