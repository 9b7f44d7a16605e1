"""Application service: List Orders use case (query)."""

from __future__ import annotations

from donutpos.application.dto import OrderHeaderDTO
from donutpos.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderHeaderDTO]:
        """Most recent first; totals are the amounts stored at save time."""
        return [OrderHeaderDTO.from_header(h) for h in self._order_repo.list_all()]
