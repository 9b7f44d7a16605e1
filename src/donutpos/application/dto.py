"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts and timestamps
are preformatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.order import Order, OrderHeader

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which menu item and how many of it."""

    menu_item_id: int
    quantity: int


@dataclass(frozen=True)
class MenuItemDTO:

    id: int
    name: str
    price: str  # formatted, e.g. "$1.50"
    description: str

    @staticmethod
    def from_item(item: MenuItem) -> MenuItemDTO:
        return MenuItemDTO(
            id=item.id,
            name=item.name,
            price=str(item.price),
            description=item.description,
        )


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line as displayed to the user."""

    menu_item_id: int
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    transaction_id: str
    ordered_at: str
    lines: list[OrderLineDTO]
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            transaction_id=order.transaction_id or "",
            ordered_at=(
                order.ordered_at.strftime(TIMESTAMP_FORMAT) if order.ordered_at else ""
            ),
            lines=[
                OrderLineDTO(
                    menu_item_id=line.menu_item.id,
                    name=line.menu_item.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.menu_item.price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
            total=str(order.total),
        )


@dataclass(frozen=True)
class OrderHeaderDTO:

    id: int
    transaction_id: str
    ordered_at: str
    total: str

    @staticmethod
    def from_header(header: OrderHeader) -> OrderHeaderDTO:
        return OrderHeaderDTO(
            id=header.id,
            transaction_id=header.transaction_id,
            ordered_at=header.ordered_at.strftime(TIMESTAMP_FORMAT),
            total=str(header.total),
        )
