"""JSON-store-backed implementation of OrderRepository.

The association between orders and inventory items is kept in its own
``order_items`` table and joined back in on every read, so callers
always receive orders with their items already loaded.
"""

from __future__ import annotations

from datetime import datetime

from logitrack.domain.exceptions import ValidationError
from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.model.order import Order
from logitrack.domain.repository.order_repository import OrderRepository
from logitrack.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from logitrack.infrastructure.persistence.json_store import (
    INVENTORY_ITEMS,
    ORDER_ITEMS,
    ORDERS,
    JsonStore,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        data = self._store.snapshot()
        for raw in data[ORDERS]:
            if raw["id"] == order_id:
                return self._to_domain(raw, data)
        return None

    def list_all(self) -> list[Order]:
        data = self._store.snapshot()
        return [self._to_domain(raw, data) for raw in data[ORDERS]]

    def add(self, order: Order) -> Order:
        item_ids = self._ordered_ids(order)
        with self._store.transaction() as data:
            # Items may have been deleted since the caller resolved them.
            existing = {raw["id"] for raw in data[INVENTORY_ITEMS]}
            for item_id in item_ids:
                if item_id not in existing:
                    raise ValidationError(
                        f"Inventory item with ID {item_id} not found.",
                        field="item_ids",
                        value=item_id,
                    )
            order_id = JsonStore.allocate_id(data, ORDERS)
            data[ORDERS].append(self._to_raw(order, order_id))
            data[ORDER_ITEMS].extend(
                {"order_id": order_id, "item_id": item_id} for item_id in item_ids
            )
        order.id = order_id
        return order

    def delete(self, order_id: int) -> bool:
        with self._store.transaction() as data:
            orders = data[ORDERS]
            remaining = [raw for raw in orders if raw["id"] != order_id]
            if len(remaining) == len(orders):
                return False
            data[ORDERS] = remaining
            data[ORDER_ITEMS] = [
                link for link in data[ORDER_ITEMS] if link["order_id"] != order_id
            ]
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _ordered_ids(order: Order) -> list[int]:
        ids: list[int] = []
        for item in order.items:
            if item.id is None:
                raise ValueError(f"Cannot link unsaved item '{item.name}' to an order")
            ids.append(item.id)
        return ids

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        return {
            "id": order_id,
            "customer_name": order.customer_name,
            "order_date": order.order_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict, data: dict) -> Order:
        items_by_id: dict[int, InventoryItem] = {
            item["id"]: JsonInventoryRepository._to_domain(item)
            for item in data[INVENTORY_ITEMS]
        }
        order = Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            order_date=datetime.fromisoformat(raw["order_date"]),
        )
        for link in data[ORDER_ITEMS]:
            if link["order_id"] == raw["id"] and link["item_id"] in items_by_id:
                order.add_item(items_by_id[link["item_id"]])
        return order
