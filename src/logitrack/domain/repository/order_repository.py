"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from logitrack.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items loaded, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order with its items loaded."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order and its item associations atomically.

        Raises ValidationError, writing nothing, if any linked item no
        longer exists.
        """

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and its associations atomically.

        Returns False if no such order exists.
        """
