"""In-process implementation of Cache with sliding expiration.

Each key has its own lock, so readers and writers of unrelated keys
never contend.  Expired entries are evicted lazily on access; call
``purge_expired()`` to sweep explicitly.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from logitrack.domain.cache import Cache

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    value: Any
    ttl: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class MemoryCache(Cache):

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._locks: dict[str, threading.Lock] = {}

    # --- Cache interface ------------------------------------------------------

    def get(self, key: str) -> Any | None:
        with self._lock_for(key):
            entry = self._entries.get(key)
            if entry is None:
                return None
            now = self._clock()
            if entry.is_expired(now):
                del self._entries[key]
                logger.debug("Cache entry '%s' expired", key)
                return None
            # Sliding window: every hit renews the full ttl.
            entry.expires_at = now + entry.ttl
            return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        with self._lock_for(key):
            self._entries[key] = _Entry(value, ttl, self._clock() + ttl)

    def remove(self, key: str) -> None:
        with self._lock_for(key):
            self._entries.pop(key, None)

    # --- Maintenance ----------------------------------------------------------

    def purge_expired(self) -> int:
        """Evict every expired entry and return how many were dropped.

        Locks of keys left without an entry (evicted here, removed, or
        only ever missed) are released as well.
        """
        purged = 0
        for key in list(self._locks):
            with self._lock_for(key):
                entry = self._entries.get(key)
                if entry is not None and entry.is_expired(self._clock()):
                    del self._entries[key]
                    purged += 1
                    entry = None
                if entry is None:
                    self._locks.pop(key, None)
        return purged

    def __contains__(self, key: str) -> bool:
        """Peek without renewing the sliding window."""
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self._clock())

    def __len__(self) -> int:
        return len(self._entries)

    # --- Internal helpers -----------------------------------------------------

    def _lock_for(self, key: str) -> threading.Lock:
        # dict.setdefault is atomic, so two threads always agree on the lock.
        return self._locks.setdefault(key, threading.Lock())
