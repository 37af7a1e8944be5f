"""InventoryItem entity — a stocked item at a warehouse location.

Items live independently of orders: they are added and removed
explicitly, and orders only hold references to them.
"""

from __future__ import annotations

from dataclasses import dataclass

from logitrack.domain.exceptions import ValidationError


@dataclass
class InventoryItem:
    """A single inventory record.

    ``id`` is ``None`` until the store assigns one and never changes
    afterwards.  ``quantity`` is passed through as given; no stock
    rules are enforced here.
    """

    id: int | None
    name: str
    quantity: int = 0
    location: str | None = None

    @staticmethod
    def create(
        name: str,
        quantity: int = 0,
        location: str | None = None,
    ) -> InventoryItem:
        """Build a new, not-yet-persisted item."""
        if not name or not name.strip():
            raise ValidationError("Item name is required", field="name", value=name)
        return InventoryItem(
            id=None,
            name=name.strip(),
            quantity=quantity,
            location=location,
        )
