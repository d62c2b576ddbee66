"""Application-wide UI state: page history, popup and display settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .ids import TracksId
from .pages import ContextPage, ContextPageType, LibraryPage, PageState
from .popups import Popup, SearchPopup
from .ui_utils import Orientation

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _detect_orientation() -> Orientation:
    try:
        size = os.get_terminal_size()
    except OSError as err:
        logger.warning("Unable to get terminal size, error: %s", err)
        return Orientation.HORIZONTAL
    return Orientation.from_size(size.columns, size.lines)


@dataclass
class UIState:
    """The state of the user interface.

    ``theme`` and ``input_key_sequence`` are held as given; the playback
    progress bar rectangle is ``(x, y, width, height)``.
    """

    is_running: bool = True
    theme: Any = None
    input_key_sequence: list[Any] = field(default_factory=list)
    orientation: Orientation = field(default_factory=_detect_orientation)
    history: list[PageState] = field(default_factory=lambda: [LibraryPage()])
    popup: Popup | None = None
    playback_progress_bar_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    count_prefix: int | None = None

    def current_page(self) -> PageState:
        """The page on top of the history."""
        if not self.history:
            raise LookupError("empty page history")
        return self.history[-1]

    def new_search_popup(self) -> None:
        """Open an empty search popup, selecting the first item of the page."""
        self.current_page().select(0)
        self.popup = SearchPopup("")

    def new_page(self, page: PageState) -> None:
        """Show ``page``, closing any popup."""
        self.history.append(page)
        self.popup = None

    def new_radio_page(self, uri: str) -> None:
        """Show recommendations based on the item ``uri``."""
        self.new_page(
            ContextPage(
                id=None,
                context_page_type=ContextPageType(
                    TracksId(f"radio:{uri}", "Recommendations")
                ),
                state=None,
            )
        )

    def has_focused_popup(self) -> bool:
        """Whether a popup holds the focus; an open search popup does not."""
        return self.popup is not None and not isinstance(self.popup, SearchPopup)

    def search_filtered_items(self, items: Iterable[T]) -> list[T]:
        """The items matching the search popup's query, or all of them.

        An item matches when its display text contains every word of the
        query, ignoring case.
        """
        if not isinstance(self.popup, SearchPopup):
            return list(items)
        words = [w for w in self.popup.query.lower().split(" ") if w]
        if not words:
            return list(items)
        return [item for item in items if all(w in str(item).lower() for w in words)]