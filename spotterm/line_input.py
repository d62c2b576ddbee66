"""A single-line text input with a movable cursor."""

from __future__ import annotations

import enum


class EditKey(enum.Enum):
    """Non-character keys that may reach a line input."""

    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"


class InputEffect(enum.Enum):
    """What handling a key did to the input."""

    TEXT_CHANGED = "text_changed"
    CURSOR_MOVED = "cursor_moved"
    # The key was consumed without any visible effect,
    # such as backspace on an empty line.
    ACK = "ack"


class LineInput:
    """Editable text with a cursor that starts at the beginning of the line."""

    def __init__(self, text: str = "") -> None:
        self._line: list[str] = list(text)
        self._cursor = 0

    def __repr__(self) -> str:
        return f"LineInput({self.text()!r}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        """Position of the cursor, in characters."""
        return self._cursor

    def input(self, key: str | EditKey) -> InputEffect | None:
        """Apply a key press.

        A single character is inserted at the cursor. Returns ``None`` for
        keys the input does not handle.
        """
        if isinstance(key, str):
            if len(key) != 1:
                return None
            self._line.insert(self._cursor, key)
            self._cursor += 1
            return InputEffect.TEXT_CHANGED
        if key is EditKey.BACKSPACE:
            if not self._line or self._cursor == 0:
                return InputEffect.ACK
            self._cursor -= 1
            del self._line[self._cursor]
            return InputEffect.TEXT_CHANGED
        if key is EditKey.LEFT:
            if self._cursor == 0:
                return InputEffect.ACK
            self._cursor -= 1
            return InputEffect.CURSOR_MOVED
        if key is EditKey.RIGHT:
            if self._cursor == len(self._line):
                return InputEffect.ACK
            self._cursor += 1
            return InputEffect.CURSOR_MOVED
        return None

    def is_empty(self) -> bool:
        return not self._line

    def text(self) -> str:
        return "".join(self._line)

    def segments(self, is_active: bool) -> list[tuple[str, bool]]:
        """Text pieces to draw, each paired with whether it is shown reversed.

        An inactive input is a single plain piece. An active one is split
        into the text before the cursor, the cursor cell (a space at the end
        of the line) and the text after it.
        """
        if not is_active:
            return [(self.text(), False)]
        before = "".join(self._line[: self._cursor])
        if self._cursor == len(self._line):
            return [(before, False), (" ", True), ("", False)]
        cursor = self._line[self._cursor]
        after = "".join(self._line[self._cursor + 1 :])
        return [(before, False), (cursor, True), (after, False)]