"""Unit tests for the transaction identifier generator."""

from datetime import date, datetime

from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.order import Order
from donutpos.domain.model.value_objects import Money
from donutpos.domain.service.transaction_id_generator import (
    TransactionIdGenerator,
    day_prefix,
    format_transaction_id,
)
from tests.fakes import FakeOrderRepository

TODAY = date(2025, 11, 12)
GLAZED = MenuItem(id=1, name="Glazed Donut", price=Money.of("1.50"))


def _save(repo: FakeOrderRepository, transaction_id: str) -> None:
    order = Order(transaction_id=transaction_id, ordered_at=datetime(2025, 11, 12, 9, 0))
    order.add_line(GLAZED, 1)
    repo.save(order)


class TestFormatting:

    def test_day_prefix(self):
        assert day_prefix(TODAY) == "OD-20251112"

    def test_sequence_is_zero_padded(self):
        assert format_transaction_id(TODAY, 7) == "OD-20251112-0007"

    def test_sequence_widens_past_9999(self):
        assert format_transaction_id(TODAY, 10000) == "OD-20251112-10000"


class TestNextTransactionId:

    def test_first_order_of_the_day(self):
        generator = TransactionIdGenerator(FakeOrderRepository(), today=lambda: TODAY)
        assert generator.next_transaction_id() == "OD-20251112-0001"

    def test_sequence_follows_saved_orders(self):
        repo = FakeOrderRepository()
        generator = TransactionIdGenerator(repo, today=lambda: TODAY)
        _save(repo, generator.next_transaction_id())
        assert generator.next_transaction_id() == "OD-20251112-0002"

    def test_other_days_are_not_counted(self):
        repo = FakeOrderRepository()
        _save(repo, "OD-20251111-0001")
        _save(repo, "OD-20251111-0002")
        generator = TransactionIdGenerator(repo, today=lambda: TODAY)
        assert generator.next_transaction_id() == "OD-20251112-0001"

    def test_deleted_orders_free_their_sequence(self):
        repo = FakeOrderRepository()
        generator = TransactionIdGenerator(repo, today=lambda: TODAY)
        _save(repo, generator.next_transaction_id())
        repo.delete(1)
        assert generator.next_transaction_id() == "OD-20251112-0001"


class TestNextTransactionIdWithSqlStore:

    def test_sequence_follows_stored_orders(self, menu_repo, order_repo):
        glazed = MenuItem(name="Glazed Donut", price=Money.of("1.50"))
        menu_repo.insert(glazed)
        generator = TransactionIdGenerator(order_repo, today=lambda: TODAY)

        first_id = generator.next_transaction_id()
        assert first_id == "OD-20251112-0001"

        order = Order(transaction_id=first_id, ordered_at=datetime(2025, 11, 12, 9, 0))
        order.add_line(glazed, 1)
        order_repo.save(order)

        assert generator.next_transaction_id() == "OD-20251112-0002"
