"""Data model, caches, playback state and UI state for a terminal music player."""

__version__ = "0.20.7"