"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from logitrack.application.inventory_service import InventoryService
from logitrack.application.order_service import OrderService
from logitrack.infrastructure.cache.memory_cache import MemoryCache
from logitrack.infrastructure.config import load_settings
from logitrack.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from logitrack.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from logitrack.infrastructure.persistence.json_store import JsonStore

# One cache for the life of the process, shared by every service.
_inventory_cache = MemoryCache()


@lru_cache(maxsize=None)
def _store_for(path: Path) -> JsonStore:
    # One store (and therefore one lock) per file.
    return JsonStore(path)


def store() -> JsonStore:
    return _store_for(load_settings().store_path)


def inventory_cache() -> MemoryCache:
    return _inventory_cache


def inventory_service() -> InventoryService:
    return InventoryService(
        inventory_repo=JsonInventoryRepository(store()),
        cache=_inventory_cache,
        ttl=load_settings().inventory_cache_ttl,
    )


def order_service() -> OrderService:
    shared = store()
    return OrderService(
        order_repo=JsonOrderRepository(shared),
        inventory_repo=JsonInventoryRepository(shared),
    )
