import pytest

from spotterm.ids import ItemType, SpotifyId
from spotterm.models import Artist
from spotterm.pages import LibraryPage, PageType, QueuePage
from spotterm.popups import DeviceListPopup, SearchPopup
from spotterm.ui_state import UIState
from spotterm.ui_utils import Orientation


def _artists(*names):
    return [Artist(SpotifyId(ItemType.ARTIST, f"a{i}"), n) for i, n in enumerate(names)]


def test_defaults():
    ui = UIState(orientation=Orientation.VERTICAL)
    assert ui.is_running is True
    assert ui.current_page().page_type() is PageType.LIBRARY
    assert ui.popup is None
    assert ui.has_focused_popup() is False


def test_new_page_closes_popup():
    ui = UIState()
    ui.popup = DeviceListPopup()
    page = QueuePage()
    ui.new_page(page)
    assert ui.current_page() is page
    assert ui.popup is None
    assert len(ui.history) == 2


def test_new_radio_page():
    ui = UIState()
    uri = "spotify:track:abc123"
    ui.new_radio_page(uri)
    page = ui.current_page()
    assert page.page_type() is PageType.CONTEXT
    assert page.id is None
    assert page.context_page_type.context_id.uri == f"radio:{uri}"
    assert page.context_page_type.title() == "Recommendations"


def test_new_search_popup_selects_first():
    ui = UIState()
    ui.current_page().select(5)
    ui.new_search_popup()
    assert ui.current_page().selected() == 0
    assert ui.popup == SearchPopup("")
    assert ui.has_focused_popup() is False


def test_has_focused_popup_for_list_popup():
    ui = UIState(popup=DeviceListPopup())
    assert ui.has_focused_popup() is True


def test_search_filtered_items_without_popup():
    items = _artists("Daft Punk", "Jazz")
    assert UIState().search_filtered_items(items) == items


def test_search_filtered_items_empty_query():
    items = _artists("Daft Punk", "Jazz")
    ui = UIState(popup=SearchPopup("  "))
    assert ui.search_filtered_items(items) == items


def test_search_filtered_items_matches_all_words():
    items = _artists("Daft Punk", "Punk Rock Band", "Jazz")
    ui = UIState(popup=SearchPopup("PUNK"))
    assert ui.search_filtered_items(items) == items[:2]
    ui.popup = SearchPopup("punk  daft")
    assert ui.search_filtered_items(items) == items[:1]


def test_empty_history_raises():
    ui = UIState(history=[])
    with pytest.raises(LookupError):
        ui.current_page()


def test_history_independent_between_instances():
    a, b = UIState(), UIState()
    a.new_page(QueuePage())
    assert isinstance(b.current_page(), LibraryPage)
    assert len(b.history) == 1