"""Application service: Add Menu Item use case."""

from __future__ import annotations

from donutpos.application.dto import MenuItemDTO
from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.value_objects import Money
from donutpos.domain.repository.menu_item_repository import MenuItemRepository


class AddMenuItemHandler:

    def __init__(self, menu_repo: MenuItemRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, name: str, price: str, description: str = "") -> MenuItemDTO:
        """Add a new item to the catalog; the store assigns its id."""
        item = MenuItem(
            name=(name or "").strip(),
            price=Money.of(price),
            description=(description or "").strip(),
        )
        self._menu_repo.insert(item)
        return MenuItemDTO.from_item(item)
