"""JSON-store-backed implementation of InventoryRepository."""

from __future__ import annotations

import logging

from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.repository.inventory_repository import InventoryRepository
from logitrack.infrastructure.persistence.json_store import (
    INVENTORY_ITEMS,
    ORDER_ITEMS,
    JsonStore,
)

logger = logging.getLogger(__name__)


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    # --- InventoryRepository interface ----------------------------------------

    def get_by_id(self, item_id: int) -> InventoryItem | None:
        for raw in self._store.snapshot()[INVENTORY_ITEMS]:
            if raw["id"] == item_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryItem]:
        return [self._to_domain(raw) for raw in self._store.snapshot()[INVENTORY_ITEMS]]

    def add(self, item: InventoryItem) -> InventoryItem:
        with self._store.transaction() as data:
            item.id = JsonStore.allocate_id(data, INVENTORY_ITEMS)
            data[INVENTORY_ITEMS].append(self._to_raw(item))
        return item

    def delete(self, item_id: int) -> bool:
        with self._store.transaction() as data:
            records = data[INVENTORY_ITEMS]
            remaining = [raw for raw in records if raw["id"] != item_id]
            if len(remaining) == len(records):
                return False
            data[INVENTORY_ITEMS] = remaining
            # Orders that referenced the item simply stop listing it.
            links = data[ORDER_ITEMS]
            data[ORDER_ITEMS] = [link for link in links if link["item_id"] != item_id]
            dropped = len(links) - len(data[ORDER_ITEMS])
            if dropped:
                logger.info(
                    "Detached inventory item %d from %d order(s)", item_id, dropped
                )
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
            "location": item.location,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=raw["id"],
            name=raw["name"],
            quantity=raw.get("quantity", 0),
            location=raw.get("location"),
        )
