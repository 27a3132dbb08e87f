"""In-memory store of per-client request allowances."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .errors import ReadWriteError

__all__ = ["MemoryStore"]

log = logging.getLogger(__name__)


class MemoryStore:
    """Maps client keys to a remaining count that expires after a set time.

    Entries vanish once their expiry time has passed.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        log.debug("Creating new MemoryStore")
        self._clock = clock
        self._entries: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()

    def _live(self, key: str, now: float) -> Optional[tuple[int, float]]:
        entry = self._entries.get(key)
        if entry is not None and entry[1] <= now:
            log.debug("Removing key: %s", key)
            del self._entries[key]
            return None
        return entry

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            for key in [k for k, (_, exp) in self._entries.items() if exp <= now]:
                del self._entries[key]
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        with self._lock:
            return self._live(key, self._clock()) is not None

    def get(self, key: str) -> Optional[int]:
        """Return the remaining count for ``key``, or None if it has no entry."""
        with self._lock:
            entry = self._live(key, self._clock())
            return None if entry is None else entry[0]

    def set(self, key: str, value: int, expiry: float) -> None:
        """Store ``value`` for ``key``, valid for ``expiry`` seconds."""
        if value < 0:
            raise ValueError("value must not be negative")
        if expiry < 0:
            raise ValueError("expiry must not be negative")
        log.debug("Inserting key %s with expiry %s", key, int(expiry))
        with self._lock:
            self._entries[key] = (value, self._clock() + expiry)

    def update(self, key: str, value: int) -> int:
        """Lower the count for ``key`` by ``value``, not below zero; return the new count."""
        with self._lock:
            entry = self._live(key, self._clock())
            if entry is None:
                raise ReadWriteError("memory store: read failed!")
            count, expires = entry
            count = count - value if count > value else 0
            self._entries[key] = (count, expires)
            return count

    def expire(self, key: str) -> float:
        """Return the seconds left before the entry for ``key`` expires."""
        with self._lock:
            now = self._clock()
            entry = self._live(key, now)
            if entry is None:
                raise ReadWriteError("memory store: read failed!")
            return max(entry[1] - now, 0.0)

    def remove(self, key: str) -> int:
        """Delete the entry for ``key`` and return its count."""
        log.debug("Removing key: %s", key)
        with self._lock:
            entry = self._live(key, self._clock())
            if entry is None:
                raise ReadWriteError("memory store: remove failed!")
            del self._entries[key]
            return entry[0]