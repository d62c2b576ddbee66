"""Text and layout helpers for the terminal interface."""

from __future__ import annotations

import enum
import unicodedata
from itertools import groupby

_REMOVED = frozenset({"LRE", "RLE", "LRO", "RLO", "PDF", "BN"})
_NEUTRAL = frozenset({"B", "S", "WS", "ON", "LRI", "RLI", "FSI", "PDI"})
_ISOLATES = frozenset({"LRI", "RLI", "FSI", "PDI"})
_TRAILING = frozenset({"WS", "LRI", "RLI", "FSI", "PDI"}) | _REMOVED


def _bidi_class(ch: str) -> str:
    return unicodedata.bidirectional(ch) or "L"


def _runs(types: list[str], members: frozenset[str]):
    """Yield (start, end) of maximal runs whose types are in ``members``."""
    pos = 0
    for inside, group in groupby(types, key=lambda t: t in members):
        length = sum(1 for _ in group)
        if inside:
            yield pos, pos + length
        pos += length


def _paragraph_level(classes: list[str]) -> int:
    for cls in classes:
        if cls == "L":
            return 0
        if cls in ("R", "AL"):
            return 1
    return 0


def _paragraph_levels(classes: list[str]) -> list[int]:
    base = _paragraph_level(classes)
    edge = "R" if base % 2 else "L"
    kept = [i for i, cls in enumerate(classes) if cls not in _REMOVED]
    types = [classes[i] for i in kept]

    # W1: non-spacing marks take the type of what precedes them.
    prev = edge
    for k, t in enumerate(types):
        if t == "NSM":
            types[k] = "ON" if prev in _ISOLATES else prev
        prev = types[k]

    # W2: European numbers after Arabic letters become Arabic numbers.
    last_strong = edge
    for k, t in enumerate(types):
        if t in ("L", "R", "AL"):
            last_strong = t
        elif t == "EN" and last_strong == "AL":
            types[k] = "AN"

    # W3
    types = ["R" if t == "AL" else t for t in types]

    # W4: single separators between numbers.
    for k in range(1, len(types) - 1):
        before, cur, after = types[k - 1], types[k], types[k + 1]
        if cur == "ES" and before == after == "EN":
            types[k] = "EN"
        elif cur == "CS" and before == after and before in ("EN", "AN"):
            types[k] = before

    # W5: terminators adjacent to European numbers.
    for start, end in list(_runs(types, frozenset({"ET"}))):
        before = types[start - 1] if start > 0 else None
        after = types[end] if end < len(types) else None
        if "EN" in (before, after):
            types[start:end] = ["EN"] * (end - start)

    # W6
    types = ["ON" if t in ("ES", "ET", "CS") else t for t in types]

    # W7: European numbers in a left-to-right context become L.
    last_strong = edge
    for k, t in enumerate(types):
        if t in ("L", "R"):
            last_strong = t
        elif t == "EN" and last_strong == "L":
            types[k] = "L"

    # N1/N2: neutrals take the surrounding direction or the embedding one.
    for start, end in list(_runs(types, _NEUTRAL)):
        if start > 0:
            before = "L" if types[start - 1] == "L" else "R"
        else:
            before = edge
        if end < len(types):
            after = "L" if types[end] == "L" else "R"
        else:
            after = edge
        types[start:end] = [before if before == after else edge] * (end - start)

    # I1/I2: implicit levels.
    def implicit(t: str) -> int:
        if base % 2 == 0:
            return base + {"R": 1, "AN": 2, "EN": 2}.get(t, 0)
        return base + (1 if t in ("L", "EN", "AN") else 0)

    levels = [base] * len(classes)
    for index, t in zip(kept, types):
        levels[index] = implicit(t)
    for index, cls in enumerate(classes):
        if cls in _REMOVED:
            levels[index] = levels[index - 1] if index > 0 else base

    # L1: separators and trailing whitespace go back to the paragraph level.
    reset = True
    for index in reversed(range(len(classes))):
        cls = classes[index]
        if cls in ("S", "B"):
            levels[index] = base
            reset = True
        elif cls in _TRAILING:
            if reset:
                levels[index] = base
        else:
            reset = False
    return levels


def _split_paragraphs(text: str, classes: list[str]):
    start = 0
    for index, cls in enumerate(classes):
        if cls == "B":
            yield classes[start:index + 1]
            start = index + 1
    if start < len(text):
        yield classes[start:]


def to_bidi_string(text: str) -> str:
    """Reorder ``text`` for display so right-to-left runs read correctly."""
    classes = [_bidi_class(ch) for ch in text]
    levels = [
        level
        for paragraph in _split_paragraphs(text, classes)
        for level in _paragraph_levels(paragraph)
    ]
    odd = [level for level in levels if level % 2]
    if not odd:
        return text

    items = list(zip(text, levels))
    for level in range(max(levels), min(odd) - 1, -1):
        items = [
            item
            for high, group in groupby(items, key=lambda p: p[1] >= level)
            for item in (reversed(list(group)) if high else group)
        ]
    return "".join(ch for ch, _ in items)


def adjust_selection(selected: int | None, length: int) -> int | None:
    """Clamp a list selection to a list of ``length`` items.

    Nothing selected in a non-empty list selects the first item.
    """
    if selected is not None:
        if selected >= length:
            return length - 1 if length > 0 else 0
        return selected
    if length > 0:
        return 0
    return None


class Orientation(enum.Enum):
    """Screen orientation; horizontal is the default."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def from_size(cls, columns: int, rows: int) -> Orientation:
        """Pick an orientation from the terminal size.

        Terminal cells are not square, hence the wide threshold.
        """
        if rows == 0:
            return cls.HORIZONTAL if columns > 0 else cls.VERTICAL
        return cls.HORIZONTAL if columns / rows > 2.3 else cls.VERTICAL