"""Small formatting helpers shared across the application."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import TypeVar

T = TypeVar("T")


def format_duration(seconds: float | timedelta) -> str:
    """Format a duration as ``"{minutes}:{seconds:02}"``.

    Fractional seconds are truncated toward zero, as are the minutes.
    """
    if isinstance(seconds, timedelta):
        seconds = seconds.total_seconds()
    total = int(seconds)
    minutes, rest = divmod(abs(total), 60)
    if total < 0:
        minutes, rest = -minutes, -rest
    return f"{minutes}:{rest:02d}"


def map_join(items: Iterable[T], key: Callable[[T], str], sep: str) -> str:
    """Join ``key(item)`` for every item with ``sep``.

    A separator is only inserted once some non-empty text has been collected.
    """
    result = ""
    for item in items:
        text = key(item)
        result = result + sep + text if result else result + text
    return result


def parse_uri(uri: str) -> str:
    """Normalise a ``spotify:user:{user}:{type}:{id}`` URI to ``spotify:{type}:{id}``.

    URIs of any other shape are returned unchanged.
    """
    parts = uri.split(":")
    if len(parts) == 5:
        return ":".join((parts[0], parts[3], parts[4]))
    return uri