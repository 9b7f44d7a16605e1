"""Application service: Update Menu Item use case."""

from __future__ import annotations

from donutpos.application.dto import MenuItemDTO
from donutpos.domain.exceptions import EntityNotFoundError
from donutpos.domain.model.value_objects import Money
from donutpos.domain.repository.menu_item_repository import MenuItemRepository


class UpdateMenuItemHandler:

    def __init__(self, menu_repo: MenuItemRepository) -> None:
        self._menu_repo = menu_repo

    def handle(
        self,
        item_id: int,
        name: str | None = None,
        price: str | None = None,
        description: str | None = None,
    ) -> MenuItemDTO:
        """Edit the given fields of an existing item.

        The lookup happens here because the store's own ``update`` quietly
        ignores unknown ids. Lines of orders that were already saved keep
        their stored line price, but will display the new catalog price
        when loaded.
        """
        item = self._menu_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Menu item #{item_id} not found")

        item.update(
            name=name,
            price=Money.of(price) if price is not None else None,
            description=description,
        )
        self._menu_repo.update(item)
        return MenuItemDTO.from_item(item)
