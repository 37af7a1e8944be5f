"""Abstract process-local cache.

Services receive a Cache instance from the composition root instead of
reaching for a global, so tests can hand each case a fresh one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Cache(ABC):

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the live value for *key*, or None on a miss."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store *value* with a sliding expiration of *ttl* seconds."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Drop *key*; a no-op if it is absent."""
