"""Application service: order use cases.

Order creation is the only place that coordinates two aggregates: it
resolves every referenced inventory item before anything is written,
so an order either commits with all of its items or not at all.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from logitrack.domain.exceptions import EntityNotFoundError, ValidationError
from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.model.order import Order, utc_now
from logitrack.domain.repository.inventory_repository import InventoryRepository
from logitrack.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        inventory_repo: InventoryRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._inventory_repo = inventory_repo
        self._clock = clock

    # --- Queries --------------------------------------------------------------

    def list_orders(self) -> list[Order]:
        return self._order_repo.list_all()

    def get_order(self, order_id: int) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def show_order(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(
                f"Order #{order_id} not found", entity="Order", entity_id=order_id
            )
        return order

    # --- Commands -------------------------------------------------------------

    def create_order(self, customer_name: str, item_ids: list[int]) -> Order:
        """Create an order referencing existing inventory items.

        Steps:
        1. Resolve every item ID against the store, failing on the first
           unknown one.  Nothing has been written at this point.
        2. Build the order from the resolved items, stamped with the
           service clock (callers cannot choose the order date).
        3. Persist order and associations in one store call.

        Repeated IDs collapse into a single association.
        """
        if not customer_name or not customer_name.strip():
            raise ValidationError(
                "Customer name is required", field="customer_name", value=customer_name
            )

        resolved: list[InventoryItem] = []
        for item_id in item_ids:
            item = self._inventory_repo.get_by_id(item_id)
            if item is None:
                logger.warning("Rejected order for %r: unknown item %s", customer_name, item_id)
                raise ValidationError(
                    f"Inventory item with ID {item_id} not found.",
                    field="item_ids",
                    value=item_id,
                )
            resolved.append(item)

        order = Order.create(
            customer_name=customer_name,
            items=resolved,
            order_date=self._clock(),
        )
        self._order_repo.add(order)
        logger.info(
            "Created order #%d for '%s' with %d item(s)",
            order.id,
            order.customer_name,
            len(order.items),
        )
        return order

    def delete_order(self, order_id: int) -> bool:
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError(
                f"Order #{order_id} not found", entity="Order", entity_id=order_id
            )
        logger.info("Deleted order #%d", order_id)
        return True
