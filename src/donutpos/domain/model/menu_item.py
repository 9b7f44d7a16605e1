"""Menu item aggregate.

Menu items live independently of orders. Order lines reference them by
id but carry their own copy of the item as it was when the line was
created.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from donutpos.domain.exceptions import ValidationError
from donutpos.domain.model.value_objects import Money


@dataclass
class MenuItem:
    """A sellable item in the catalog.

    ``id`` is 0 until the catalog store inserts the row; the store writes
    the assigned id back into the instance.
    """

    name: str
    price: Money
    description: str = ""
    id: int = 0

    @property
    def is_persisted(self) -> bool:
        return self.id != 0

    def validate(self) -> None:
        """Raise ValidationError unless the item can be stored."""
        if not self.name or not self.name.strip():
            raise ValidationError("Menu item name is required")
        if not isinstance(self.price, Money):
            raise ValidationError("Menu item price must be Money")

    def update(
        self,
        name: str | None = None,
        price: Money | None = None,
        description: str | None = None,
    ) -> None:
        """Change any of the editable fields; the id stays fixed."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Menu item name is required")
            self.name = name.strip()
        if price is not None:
            self.price = price
        if description is not None:
            self.description = description

    def snapshot(self) -> MenuItem:
        """Detached copy used by order lines."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
