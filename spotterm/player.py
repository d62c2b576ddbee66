"""State of the playback and of the available devices."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import timedelta

from .ids import ContextId, ItemType, SpotifyId
from .models import Device, Episode, PlaybackMetadata, Track
from .utils import parse_uri

_CONTEXT_TYPES = {
    "playlist": ItemType.PLAYLIST,
    "album": ItemType.ALBUM,
    "artist": ItemType.ARTIST,
    "show": ItemType.SHOW,
}


@dataclass
class CurrentPlayback:
    """The playback as last reported by the server."""

    device_name: str
    device_id: str | None = None
    volume_percent: int | None = None
    is_playing: bool = False
    repeat_state: str = "off"
    shuffle_state: bool = False
    progress: timedelta | None = None
    item: Track | Episode | None = None
    context_type: str | None = None
    context_uri: str | None = None


@dataclass
class PlayerState:
    """Devices, playback and queue; ``clock`` gives monotonic seconds."""

    devices: list[Device] = field(default_factory=list)
    playback: CurrentPlayback | None = None
    playback_last_updated_time: float | None = None
    buffered_playback: PlaybackMetadata | None = None
    queue: list[Track | Episode] | None = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def _elapsed(self) -> timedelta:
        if self.playback_last_updated_time is None:
            return timedelta()
        return timedelta(seconds=max(self.clock() - self.playback_last_updated_time, 0.0))

    def current_playback(self) -> CurrentPlayback | None:
        """An estimate of the playback now.

        The progress is advanced by the time since the last update while
        playing, and the buffered metadata overrides the reported one.
        """
        if self.playback is None:
            return None
        playback = replace(self.playback)
        if playback.progress is not None and playback.is_playing:
            playback.progress = playback.progress + self._elapsed()

        buffered = self.buffered_playback
        if buffered is not None:
            playback.device_name = buffered.device_name
            playback.device_id = buffered.device_id
            playback.is_playing = buffered.is_playing
            playback.volume_percent = buffered.volume
            playback.repeat_state = buffered.repeat_state
            playback.shuffle_state = buffered.shuffle_state
        return playback

    def currently_playing(self) -> Track | Episode | None:
        return self.playback.item if self.playback is not None else None

    def playback_progress(self) -> timedelta | None:
        """The estimated progress of the playing item."""
        playback = self.playback
        if playback is None or playback.progress is None:
            return None
        if playback.is_playing:
            return playback.progress + self._elapsed()
        return playback.progress

    def playing_context_id(self) -> ContextId | None:
        """The id of the playing playlist, album, artist or show, if any."""
        playback = self.playback
        if playback is None or playback.context_uri is None:
            return None
        expected = _CONTEXT_TYPES.get(playback.context_type or "")
        if expected is None:
            return None
        try:
            ident = SpotifyId.from_uri(parse_uri(playback.context_uri))
        except ValueError:
            return None
        return ident if ident.type is expected else None