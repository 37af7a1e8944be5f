"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from logitrack.domain.model.inventory import InventoryItem
from logitrack.domain.model.order import Order


@dataclass(frozen=True)
class InventoryItemDTO:
    """Output: a single inventory record as displayed to the user."""

    id: int
    name: str
    quantity: int
    location: str  # "-" when unset


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    order_date: str
    items: list[InventoryItemDTO]


def item_to_dto(item: InventoryItem) -> InventoryItemDTO:
    return InventoryItemDTO(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        quantity=item.quantity,
        location=item.location or "-",
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
        items=[item_to_dto(item) for item in order.items],
    )
