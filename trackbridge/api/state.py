"""Shared application state (injected into routes)."""
import threading
from typing import Optional

from trackbridge.models.track import TrackDescriptor


class AppState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[TrackDescriptor] = None

    def get_current(self) -> Optional[TrackDescriptor]:
        with self._lock:
            return self._current

    def set_current(self, track: TrackDescriptor) -> None:
        with self._lock:
            self._current = track

    def clear_current(self) -> bool:
        """Drop the current track. Returns True if one was loaded."""
        with self._lock:
            had_track = self._current is not None
            self._current = None
            return had_track


_state = AppState()


def get_state() -> AppState:
    return _state
