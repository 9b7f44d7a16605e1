"""Order aggregate.

The Order owns its lines. Its total is never stored on the object: it
is computed from the lines every time it is read, so it cannot drift
from them no matter how the lines are edited.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from donutpos.domain.exceptions import ValidationError
from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.value_objects import Money, Quantity

TRANSACTION_PREFIX = "OD"


@dataclass
class OrderLine:
    """One (menu item, quantity) entry of an order.

    ``menu_item`` is a snapshot of the catalog row taken when the line
    was built; later catalog edits do not reach it.
    """

    menu_item: MenuItem
    quantity: Quantity
    id: int = 0
    order_id: int = 0

    @staticmethod
    def of(item: MenuItem, quantity: int) -> OrderLine:
        if not item.is_persisted:
            raise ValidationError(f"Menu item '{item.name}' has not been saved")
        return OrderLine(menu_item=item.snapshot(), quantity=Quantity(quantity))

    @property
    def line_total(self) -> Money:
        return self.menu_item.price * self.quantity.value

    def change_quantity(self, quantity: int) -> None:
        self.quantity = Quantity(quantity)


@dataclass
class Order:
    """Aggregate root for a customer order.

    ``id`` is 0 and ``transaction_id`` is None until the first save.
    The repository reconstitutes persisted orders through ``__init__``
    without re-validating.
    """

    id: int = 0
    transaction_id: str | None = None
    ordered_at: datetime | None = None
    lines: list[OrderLine] = field(default_factory=list)

    # --- Line editing ---------------------------------------------------------

    def add_line(self, item: MenuItem, quantity: int) -> OrderLine:
        line = OrderLine.of(item, quantity)
        self.lines.append(line)
        return line

    def remove_line(self, line: OrderLine) -> None:
        for index, existing in enumerate(self.lines):
            if existing is line:
                del self.lines[index]
                return
        raise ValidationError("Line is not part of this order")

    def replace_lines(self, lines: list[OrderLine]) -> None:
        self.lines = list(lines)

    # --- Persistence helpers --------------------------------------------------

    @property
    def is_persisted(self) -> bool:
        return self.id != 0

    def ensure_saveable(self) -> None:
        if not self.lines:
            raise ValidationError("No items in order")
        if not self.transaction_id:
            raise ValidationError("Order has no transaction id")
        if self.ordered_at is None:
            raise ValidationError("Order has no timestamp")

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result


@dataclass(frozen=True)
class OrderHeader:
    """Summary row of a persisted order; ``total`` is the stored value."""

    id: int
    transaction_id: str
    ordered_at: datetime
    total: Money
