"""Order aggregate.

An Order references existing InventoryItems through a many-to-many
association.  Membership is set-like: each item appears at most once,
and attach/detach are explicit, idempotent calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from logitrack.domain.exceptions import ValidationError
from logitrack.domain.model.inventory import InventoryItem


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    customer_name: str
    order_date: datetime = field(default_factory=utc_now)
    items: list[InventoryItem] = field(default_factory=list)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        items: list[InventoryItem],
        order_date: datetime | None = None,
    ) -> Order:
        """Create a new order stamped with ``order_date`` (defaults to now)."""
        if not customer_name or not customer_name.strip():
            raise ValidationError(
                "Customer name is required", field="customer_name", value=customer_name
            )

        order = Order(
            id=None,
            customer_name=customer_name.strip(),
            order_date=order_date or utc_now(),
        )
        for item in items:
            order.add_item(item)
        return order

    # --- Membership -----------------------------------------------------------

    def add_item(self, item: InventoryItem) -> None:
        """Attach *item*; a no-op if it is already attached."""
        if not self._contains(item):
            self.items.append(item)

    def remove_item(self, item: InventoryItem) -> None:
        """Detach *item*; a no-op if it is not attached."""
        self.items = [
            existing for existing in self.items if not self._same(existing, item)
        ]

    @property
    def item_ids(self) -> frozenset[int]:
        return frozenset(item.id for item in self.items if item.id is not None)

    # --- Internal helpers -----------------------------------------------------

    def _contains(self, item: InventoryItem) -> bool:
        return any(self._same(existing, item) for existing in self.items)

    @staticmethod
    def _same(a: InventoryItem, b: InventoryItem) -> bool:
        # Unsaved items have no identity yet, so fall back to object identity.
        if a.id is None or b.id is None:
            return a is b
        return a.id == b.id
