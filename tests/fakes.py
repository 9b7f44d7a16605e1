"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in dicts. No database, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from donutpos.domain.exceptions import ConstraintError
from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.order import Order, OrderHeader, OrderLine
from donutpos.domain.repository.menu_item_repository import MenuItemRepository
from donutpos.domain.repository.order_repository import OrderRepository


class FakeMenuItemRepository(MenuItemRepository):

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self._store: dict[int, MenuItem] = {}
        self._next_id = 1
        for item in items or []:
            self.insert(item)

    def insert(self, item: MenuItem) -> int:
        item.validate()
        item.id = self._next_id
        self._next_id += 1
        self._store[item.id] = replace(item)
        return item.id

    def update(self, item: MenuItem) -> None:
        item.validate()
        if item.id in self._store:
            self._store[item.id] = replace(item)

    def delete(self, item_id: int) -> None:
        self._store.pop(item_id, None)

    def get_by_id(self, item_id: int) -> MenuItem | None:
        item = self._store.get(item_id)
        return replace(item) if item is not None else None

    def list_all(self) -> list[MenuItem]:
        return [replace(item) for item in self._store.values()]


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._headers: dict[int, OrderHeader] = {}
        self._lines: dict[int, list[OrderLine]] = {}
        self._next_id = 1
        self.save_calls = 0

    def save(self, order: Order) -> None:
        order.ensure_saveable()
        self.save_calls += 1
        for header in self._headers.values():
            if header.transaction_id == order.transaction_id and header.id != order.id:
                raise ConstraintError("save order", "duplicate transaction id", order.id)

        order_id = order.id or self._next_id
        if not order.id:
            self._next_id += 1
        self._headers[order_id] = OrderHeader(
            id=order_id,
            transaction_id=order.transaction_id,
            ordered_at=order.ordered_at,
            total=order.total,
        )
        self._lines[order_id] = [replace(line, order_id=order_id) for line in order.lines]
        order.id = order_id

    def delete(self, order_id: int) -> None:
        self._headers.pop(order_id, None)
        self._lines.pop(order_id, None)

    def get_by_id(self, order_id: int) -> Order | None:
        header = self._headers.get(order_id)
        if header is None:
            return None
        return Order(
            id=header.id,
            transaction_id=header.transaction_id,
            ordered_at=header.ordered_at,
            lines=self.load_lines(order_id),
        )

    def list_all(self) -> list[OrderHeader]:
        return sorted(self._headers.values(), key=lambda h: h.ordered_at, reverse=True)

    def load_lines(self, order_id: int) -> list[OrderLine]:
        return [replace(line) for line in self._lines.get(order_id, [])]

    def count_transaction_ids(self, prefix: str) -> int:
        return sum(
            1 for h in self._headers.values() if h.transaction_id.startswith(prefix)
        )
