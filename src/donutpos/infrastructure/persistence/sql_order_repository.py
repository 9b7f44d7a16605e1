"""SQL-backed implementation of OrderRepository.

An order is stored across two tables: one ``orders`` row and one
``order_items`` row per line. ``save`` and ``delete`` touch both inside
a single transaction, so a failure never leaves an order without its
lines or lines without their order.

Updating an order replaces its line rows wholesale (delete, then insert
the in-memory set) rather than diffing them. That costs one write per
old and new line, which is fine at counter-order sizes.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Row

from donutpos.domain.exceptions import EntityNotFoundError
from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.order import Order, OrderHeader, OrderLine
from donutpos.domain.model.value_objects import Money, Quantity
from donutpos.domain.repository.order_repository import OrderRepository
from donutpos.infrastructure.persistence.database import Database
from donutpos.infrastructure.persistence.schema import menu_items, order_items, orders

logger = logging.getLogger(__name__)


class SqlOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order) -> None:
        order.ensure_saveable()

        creating = not order.is_persisted
        operation = "create order" if creating else "update order"
        with self._db.transaction(operation, order.id or None) as conn:
            if creating:
                order_id = self._insert_header(conn, order)
            else:
                order_id = order.id
                self._update_header(conn, order)
                conn.execute(
                    delete(order_items).where(order_items.c.order_id == order_id)
                )
            line_ids = [self._insert_line(conn, order_id, line) for line in order.lines]

        # Written back only after commit so a failed save leaves the order as it was
        order.id = order_id
        for line, line_id in zip(order.lines, line_ids):
            line.id = line_id
            line.order_id = order_id
        logger.debug(
            "Saved order %s (%s) with %d lines, total %s",
            order.id, order.transaction_id, len(order.lines), order.total,
        )

    def delete(self, order_id: int) -> None:
        with self._db.transaction("delete order", order_id) as conn:
            conn.execute(delete(order_items).where(order_items.c.order_id == order_id))
            conn.execute(delete(orders).where(orders.c.order_id == order_id))

    def get_by_id(self, order_id: int) -> Order | None:
        with self._db.reading("get order", order_id) as conn:
            row = conn.execute(
                select(orders).where(orders.c.order_id == order_id)
            ).first()
        if row is None:
            return None
        header = self._to_header(row)
        return Order(
            id=header.id,
            transaction_id=header.transaction_id,
            ordered_at=header.ordered_at,
            lines=self.load_lines(header.id),
        )

    def list_all(self) -> list[OrderHeader]:
        with self._db.reading("list orders") as conn:
            rows = conn.execute(
                select(orders).order_by(orders.c.order_date.desc())
            ).all()
        return [self._to_header(row) for row in rows]

    def load_lines(self, order_id: int) -> list[OrderLine]:
        # Joined against the current catalog row, not a snapshot of it
        stmt = (
            select(
                order_items.c.order_item_id,
                order_items.c.order_id,
                order_items.c.quantity,
                menu_items.c.item_id,
                menu_items.c.name,
                menu_items.c.price,
                menu_items.c.description,
            )
            .join(menu_items, order_items.c.item_id == menu_items.c.item_id)
            .where(order_items.c.order_id == order_id)
            .order_by(order_items.c.order_item_id)
        )
        with self._db.reading("load order lines", order_id) as conn:
            rows = conn.execute(stmt).all()
        return [self._to_line(row) for row in rows]

    def count_transaction_ids(self, prefix: str) -> int:
        stmt = select(func.count()).select_from(orders).where(
            orders.c.transaction_id.like(f"{prefix}%")
        )
        with self._db.reading("count transaction ids") as conn:
            return conn.execute(stmt).scalar_one()

    # --- Statements -----------------------------------------------------------

    @staticmethod
    def _insert_header(conn: Connection, order: Order) -> int:
        result = conn.execute(
            insert(orders).values(
                transaction_id=order.transaction_id,
                order_date=order.ordered_at,
                total=order.total.amount,
            )
        )
        return result.inserted_primary_key[0]

    @staticmethod
    def _update_header(conn: Connection, order: Order) -> None:
        result = conn.execute(
            update(orders)
            .where(orders.c.order_id == order.id)
            .values(
                transaction_id=order.transaction_id,
                order_date=order.ordered_at,
                total=order.total.amount,
            )
        )
        if result.rowcount == 0:
            raise EntityNotFoundError(f"Order #{order.id} not found")

    @staticmethod
    def _insert_line(conn: Connection, order_id: int, line: OrderLine) -> int:
        result = conn.execute(
            insert(order_items).values(
                order_id=order_id,
                item_id=line.menu_item.id,
                quantity=line.quantity.value,
                line_price=line.line_total.amount,
            )
        )
        return result.inserted_primary_key[0]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_header(row: Row) -> OrderHeader:
        return OrderHeader(
            id=row.order_id,
            transaction_id=row.transaction_id,
            ordered_at=row.order_date,
            total=Money.of(row.total),
        )

    @staticmethod
    def _to_line(row: Row) -> OrderLine:
        return OrderLine(
            id=row.order_item_id,
            order_id=row.order_id,
            menu_item=MenuItem(
                id=row.item_id,
                name=row.name,
                price=Money.of(row.price),
                description=row.description or "",
            ),
            quantity=Quantity(row.quantity),
        )
