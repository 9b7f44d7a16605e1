"""SQL-backed implementation of MenuItemRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row

from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.value_objects import Money
from donutpos.domain.repository.menu_item_repository import MenuItemRepository
from donutpos.infrastructure.persistence.database import Database
from donutpos.infrastructure.persistence.schema import menu_items

logger = logging.getLogger(__name__)

SAMPLE_ITEMS = (
    ("Glazed Donut", "1.50", "Classic glazed donut"),
    ("Chocolate Frosted", "1.75", "Chocolate icing"),
    ("Sprinkles", "1.85", "Fun colorful sprinkles"),
)


class SqlMenuItemRepository(MenuItemRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- MenuItemRepository interface -----------------------------------------

    def insert(self, item: MenuItem) -> int:
        item.validate()
        with self._db.transaction("insert menu item") as conn:
            result = conn.execute(insert(menu_items).values(**self._to_row(item)))
            new_id = result.inserted_primary_key[0]
        item.id = new_id
        return new_id

    def update(self, item: MenuItem) -> None:
        item.validate()
        with self._db.transaction("update menu item", item.id) as conn:
            result = conn.execute(
                update(menu_items)
                .where(menu_items.c.item_id == item.id)
                .values(**self._to_row(item))
            )
        if result.rowcount == 0:
            logger.warning("Update of menu item %s matched no row", item.id)

    def delete(self, item_id: int) -> None:
        with self._db.transaction("delete menu item", item_id) as conn:
            conn.execute(delete(menu_items).where(menu_items.c.item_id == item_id))

    def get_by_id(self, item_id: int) -> MenuItem | None:
        with self._db.reading("get menu item", item_id) as conn:
            row = conn.execute(
                select(menu_items).where(menu_items.c.item_id == item_id)
            ).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[MenuItem]:
        # A missing table means "nothing stored yet", not a fault
        if not self._db.has_table(menu_items.name):
            logger.warning("Table %s does not exist; returning no items", menu_items.name)
            return []
        with self._db.reading("list menu items") as conn:
            rows = conn.execute(select(menu_items)).all()
        return [self._to_domain(row) for row in rows]

    # --- Bootstrap ------------------------------------------------------------

    def seed_defaults(self) -> list[MenuItem]:
        """Insert the sample items when the catalog is empty."""
        if self.list_all():
            return []
        seeded = [
            MenuItem(name=name, price=Money.of(price), description=description)
            for name, price, description in SAMPLE_ITEMS
        ]
        for item in seeded:
            self.insert(item)
        logger.info("Seeded %d sample menu items", len(seeded))
        return seeded

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(item: MenuItem) -> dict:
        return {
            "name": item.name.strip(),
            "price": item.price.amount,
            "description": item.description,
        }

    @staticmethod
    def _to_domain(row: Row) -> MenuItem:
        return MenuItem(
            id=row.item_id,
            name=row.name,
            price=Money.of(row.price),
            description=row.description or "",
        )
