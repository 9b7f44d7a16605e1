"""Shared fixtures: an isolated in-memory database per test."""

from __future__ import annotations

import pytest

from donutpos.infrastructure.persistence.database import Database
from donutpos.infrastructure.persistence.sql_menu_item_repository import (
    SqlMenuItemRepository,
)
from donutpos.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)


@pytest.fixture
def database():
    db = Database("sqlite://").open()
    db.create_schema()
    yield db
    db.close()


@pytest.fixture
def menu_repo(database) -> SqlMenuItemRepository:
    return SqlMenuItemRepository(database)


@pytest.fixture
def order_repo(database) -> SqlOrderRepository:
    return SqlOrderRepository(database)
