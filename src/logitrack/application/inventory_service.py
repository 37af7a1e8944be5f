"""Application service: inventory use cases.

Reads go through the cache (cache-aside); every committed mutation is
followed, within the same call, by invalidation of the cached list so
the next read goes back to the store.
"""

from __future__ import annotations

import logging

from logitrack.domain.cache import Cache
from logitrack.domain.exceptions import EntityNotFoundError
from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

INVENTORY_LIST_KEY = "inventoryList"
DEFAULT_TTL_SECONDS = 30.0


class InventoryService:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        cache: Cache,
        ttl: float = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._cache = cache
        self._ttl = ttl

    # --- Queries --------------------------------------------------------------

    def list_inventory(self) -> list[InventoryItem]:
        """Return every inventory item, served from cache when warm.

        The cache holds an immutable snapshot and every call gets its own
        list, so callers may reorder or trim the result freely.  The items
        themselves are shared with the cache and must be treated as
        read-only.

        Concurrent misses may each hit the store and each populate the
        cache; the snapshots are equivalent, so the last write wins.
        """
        cached = self._cache.get(INVENTORY_LIST_KEY)
        if cached is not None:
            logger.debug("Inventory list served from cache")
            return list(cached)

        logger.debug("Inventory cache miss, reading store")
        items = self._inventory_repo.list_all()
        self._cache.set(INVENTORY_LIST_KEY, tuple(items), self._ttl)
        return items

    def get_item(self, item_id: int) -> InventoryItem:
        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(
                f"Inventory item #{item_id} not found",
                entity="InventoryItem",
                entity_id=item_id,
            )
        return item

    # --- Commands -------------------------------------------------------------

    def add_item(
        self,
        name: str,
        quantity: int = 0,
        location: str | None = None,
    ) -> InventoryItem:
        """Persist a new item and invalidate the cached list."""
        item = InventoryItem.create(name=name, quantity=quantity, location=location)
        self._inventory_repo.add(item)
        self._invalidate()
        logger.info("Added inventory item #%d '%s'", item.id, item.name)
        return item

    def delete_item(self, item_id: int) -> bool:
        """Delete an item and invalidate the cached list.

        Raises EntityNotFoundError (without touching the cache) if the
        item does not exist.
        """
        if not self._inventory_repo.delete(item_id):
            raise EntityNotFoundError(
                f"Inventory item #{item_id} not found",
                entity="InventoryItem",
                entity_id=item_id,
            )
        self._invalidate()
        logger.info("Deleted inventory item #%d", item_id)
        return True

    # --- Internal helpers -----------------------------------------------------

    def _invalidate(self) -> None:
        self._cache.remove(INVENTORY_LIST_KEY)
        logger.debug("Invalidated cache key '%s'", INVENTORY_LIST_KEY)
