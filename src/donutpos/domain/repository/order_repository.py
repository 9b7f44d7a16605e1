"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from donutpos.domain.model.order import Order, OrderHeader, OrderLine


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> None:
        """Atomically insert or fully replace an order and its lines."""

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Atomically remove an order and its lines; idempotent."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[OrderHeader]:
        """Return order headers, most recent first."""

    @abstractmethod
    def load_lines(self, order_id: int) -> list[OrderLine]:
        """Return the lines of an order, empty when there are none."""

    @abstractmethod
    def count_transaction_ids(self, prefix: str) -> int:
        """Count orders whose transaction id starts with ``prefix``."""
