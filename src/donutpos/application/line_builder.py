"""Resolve user-supplied (menu item id, quantity) pairs into order lines."""

from __future__ import annotations

from donutpos.application.dto import OrderItemSpec
from donutpos.domain.exceptions import EntityNotFoundError
from donutpos.domain.model.order import OrderLine
from donutpos.domain.repository.menu_item_repository import MenuItemRepository


def build_lines(
    menu_repo: MenuItemRepository,
    item_specs: list[OrderItemSpec],
) -> list[OrderLine]:
    lines: list[OrderLine] = []
    for spec in item_specs:
        item = menu_repo.get_by_id(spec.menu_item_id)
        if item is None:
            raise EntityNotFoundError(f"Menu item #{spec.menu_item_id} not found")
        lines.append(OrderLine.of(item, spec.quantity))
    return lines
