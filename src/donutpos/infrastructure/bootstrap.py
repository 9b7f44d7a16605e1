"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It also decides where the storage lives: the ``DONUTPOS_DB`` environment
variable (a SQLAlchemy URL or a plain file path) wins, otherwise
``data/donutpos.db`` under the project root is used and created on
first run.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from donutpos.domain.service.transaction_id_generator import TransactionIdGenerator
from donutpos.infrastructure.persistence.database import Database
from donutpos.infrastructure.persistence.schema import menu_items
from donutpos.infrastructure.persistence.sql_menu_item_repository import (
    SqlMenuItemRepository,
)
from donutpos.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)

logger = logging.getLogger(__name__)

DB_ENV_VAR = "DONUTPOS_DB"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def database_url() -> str:
    configured = os.environ.get(DB_ENV_VAR, "").strip()
    if "://" in configured:
        return configured
    path = Path(configured) if configured else _DATA_DIR / "donutpos.db"
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{path}"


def open_database(url: str | None = None) -> Database:
    """Open the storage and create missing tables.

    The sample menu is only added on first run, when this call created the
    catalog table. A catalog emptied later by the user stays empty.
    """
    database = Database(url or database_url()).open()
    try:
        first_run = not database.has_table(menu_items.name)
        database.create_schema()
        if first_run:
            logger.info("First run at %s, adding the sample menu", database.url)
            menu_item_repository(database).seed_defaults()
    except Exception:
        database.close()
        raise
    return database


def menu_item_repository(database: Database) -> SqlMenuItemRepository:
    return SqlMenuItemRepository(database)


def order_repository(database: Database) -> SqlOrderRepository:
    return SqlOrderRepository(database)


def transaction_id_generator(database: Database) -> TransactionIdGenerator:
    return TransactionIdGenerator(order_repository(database))
