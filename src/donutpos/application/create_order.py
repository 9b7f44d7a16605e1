"""Application service: Create Order use case.

Orchestrates the catalog lookup, transaction id assignment and the
atomic save of the new order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from donutpos.application.dto import OrderDTO, OrderItemSpec
from donutpos.application.line_builder import build_lines
from donutpos.domain.exceptions import ValidationError
from donutpos.domain.model.order import Order
from donutpos.domain.repository.menu_item_repository import MenuItemRepository
from donutpos.domain.repository.order_repository import OrderRepository
from donutpos.domain.service.transaction_id_generator import TransactionIdGenerator


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuItemRepository,
        id_generator: TransactionIdGenerator,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo
        self._id_generator = id_generator
        self._clock = clock

    def handle(self, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create and save a new order.

        Steps:
        1. Resolve each menu item id (fail if not found).
        2. Build lines from a snapshot of the current catalog rows.
        3. Stamp the order with the next transaction id and "now".
        4. Persist atomically and return a DTO.
        """
        order = Order(lines=build_lines(self._menu_repo, item_specs))
        # Checked before asking storage for a transaction id
        if not order.lines:
            raise ValidationError("No items in order")

        order.transaction_id = self._id_generator.next_transaction_id()
        order.ordered_at = self._clock()
        self._order_repo.save(order)
        return OrderDTO.from_order(order)
