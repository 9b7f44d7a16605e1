"""Abstract repository for the menu item catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The SQL implementation lives in the infrastructure
layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from donutpos.domain.model.menu_item import MenuItem


class MenuItemRepository(ABC):

    @abstractmethod
    def insert(self, item: MenuItem) -> int:
        """Persist a new item and write the assigned id back into it."""

    @abstractmethod
    def update(self, item: MenuItem) -> None:
        """Overwrite name, price and description of ``item.id``."""

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an item; succeeds when the id does not exist."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> MenuItem | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every item in the catalog, empty when there is none."""
