"""Relational schema for the catalog and the order aggregate."""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

metadata = MetaData()

# AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again.
menu_items = Table(
    "menu_items",
    metadata,
    Column("item_id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("price", Numeric(6, 2), nullable=False),
    Column("description", String(255)),
    sqlite_autoincrement=True,
)

orders = Table(
    "orders",
    metadata,
    Column("order_id", Integer, primary_key=True, autoincrement=True),
    Column("transaction_id", String(50), nullable=False, unique=True),
    Column("order_date", DateTime, nullable=False),
    Column("total", Numeric(8, 2), nullable=False),
    sqlite_autoincrement=True,
)

# No ON DELETE rule on either key: lines are removed explicitly by the
# order store, and a referenced menu item cannot be deleted.
order_items = Table(
    "order_items",
    metadata,
    Column("order_item_id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("orders.order_id"), nullable=False, index=True),
    Column("item_id", Integer, ForeignKey("menu_items.item_id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("line_price", Numeric(8, 2), nullable=False),
    sqlite_autoincrement=True,
)
