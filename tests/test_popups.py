import enum
from datetime import timedelta

import pytest

from spotterm.ids import ItemType, SpotifyId
from spotterm.line_input import LineInput
from spotterm.models import Artist, Episode, Track
from spotterm.popups import (
    ActionListItem,
    ActionListPopup,
    AddTrackToPlaylist,
    ArtistListPopup,
    ArtistPopupAction,
    BrowsePlaylists,
    DeviceListPopup,
    PlaylistCreateCurrentField,
    PlaylistCreatePopup,
    SearchPopup,
    ThemeListPopup,
    UserFollowedArtistListPopup,
    UserPlaylistListPopup,
    UserSavedAlbumListPopup,
)


class Action(enum.Enum):
    PlayContext = 1
    AddToQueue = 2
    CopyLink = 3


def _track():
    return Track(SpotifyId(ItemType.TRACK, "abc123"), "Song")


def test_action_list_item_track():
    item = ActionListItem(_track(), [Action.PlayContext, Action.AddToQueue])
    assert item.n_actions() == 2
    assert item.name() == "Song"
    assert item.actions_desc() == ["PlayContext", "AddToQueue"]


def test_action_list_item_episode_without_actions():
    episode = Episode(SpotifyId(ItemType.EPISODE, "ep1"), "Episode", "d", timedelta(0))
    item = ActionListItem(episode)
    assert item.n_actions() == 0
    assert item.actions_desc() == []
    assert item.name() == "Episode"


def test_action_list_item_plain_actions_use_str():
    item = ActionListItem(Artist(SpotifyId(ItemType.ARTIST, "a1"), "Band"), ["Follow"])
    assert item.actions_desc() == ["Follow"]


@pytest.mark.parametrize(
    "popup",
    [
        UserPlaylistListPopup(),
        UserFollowedArtistListPopup(),
        UserSavedAlbumListPopup(),
        DeviceListPopup(),
        ArtistListPopup(ArtistPopupAction.SHOW_ACTIONS, []),
        ThemeListPopup(["dark"]),
        ActionListPopup(ActionListItem(_track(), [Action.CopyLink])),
    ],
)
def test_list_popups_select(popup):
    assert popup.list_selected() is None
    popup.list_select(2)
    assert popup.list_selected() == 2
    assert popup.list_state() is popup.state
    popup.list_select(None)
    assert popup.list_selected() is None


@pytest.mark.parametrize("popup", [SearchPopup("x"), PlaylistCreatePopup()])
def test_non_list_popups(popup):
    popup.list_select(3)
    assert popup.list_state() is None
    assert popup.list_selected() is None


def test_negative_selection_rejected():
    popup = DeviceListPopup()
    with pytest.raises(ValueError):
        popup.list_select(-1)


def test_playlist_popup_actions():
    track_id = SpotifyId(ItemType.TRACK, "abc123")
    popup = UserPlaylistListPopup(AddTrackToPlaylist(4, track_id))
    assert popup.action.folder_id == 4
    assert popup.action.track_id == track_id
    assert UserPlaylistListPopup().action == BrowsePlaylists(0)


def test_playlist_create_defaults():
    popup = PlaylistCreatePopup(name=LineInput("mix"))
    assert popup.current_field is PlaylistCreateCurrentField.NAME
    assert popup.name.text() == "mix"
    assert popup.desc.is_empty()