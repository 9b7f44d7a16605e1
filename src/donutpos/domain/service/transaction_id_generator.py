"""Domain service: transaction identifier generation.

Identifiers look like ``OD-20251112-0001``. The sequence part is the
number of orders already carrying today's prefix plus one, so it is
recomputed from storage on every call instead of being kept in a
counter. Two writers asking at the same moment get the same id; the
unique constraint on ``orders.transaction_id`` turns that into a
ConstraintError on save.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from donutpos.domain.model.order import TRANSACTION_PREFIX
from donutpos.domain.repository.order_repository import OrderRepository


def day_prefix(day: date) -> str:
    return f"{TRANSACTION_PREFIX}-{day:%Y%m%d}"


def format_transaction_id(day: date, sequence: int) -> str:
    """Zero-pad to four digits; wider sequences are not truncated."""
    return f"{day_prefix(day)}-{sequence:04d}"


class TransactionIdGenerator:

    def __init__(
        self,
        order_repo: OrderRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._order_repo = order_repo
        self._today = today

    def next_transaction_id(self) -> str:
        day = self._today()
        existing = self._order_repo.count_transaction_ids(day_prefix(day))
        return format_transaction_id(day, existing + 1)
