"""Abstract repository for InventoryItem entities.

Defined in the domain layer so the domain never depends on
infrastructure.  Every method is one atomic call against the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from logitrack.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: int) -> InventoryItem | None:
        """Return an inventory item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return a detached snapshot of every inventory item."""

    @abstractmethod
    def add(self, item: InventoryItem) -> InventoryItem:
        """Persist a new item, assigning its ID."""

    @abstractmethod
    def delete(self, item_id: int) -> bool:
        """Delete an item and its order associations.

        Returns False if no such item exists.
        """
