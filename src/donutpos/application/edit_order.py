"""Application service: Edit Order use case.

Replaces the full line set of a saved order and re-saves it. The
transaction id assigned on the first save is kept; the timestamp moves
to the time of the edit.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from donutpos.application.dto import OrderDTO, OrderItemSpec
from donutpos.application.line_builder import build_lines
from donutpos.domain.exceptions import EntityNotFoundError
from donutpos.domain.repository.menu_item_repository import MenuItemRepository
from donutpos.domain.repository.order_repository import OrderRepository


class EditOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuItemRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo
        self._clock = clock

    def handle(self, order_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.replace_lines(build_lines(self._menu_repo, item_specs))
        order.ordered_at = self._clock()
        self._order_repo.save(order)
        return OrderDTO.from_order(order)
