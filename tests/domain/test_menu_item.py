"""Unit tests for the MenuItem aggregate."""

import pytest

from donutpos.domain.exceptions import ValidationError
from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.value_objects import Money


def _glazed() -> MenuItem:
    return MenuItem(name="Glazed Donut", price=Money.of("1.50"), description="Classic")


class TestMenuItem:

    def test_new_item_is_not_persisted(self):
        item = _glazed()
        assert item.id == 0
        assert not item.is_persisted

    def test_validate_accepts_valid_item(self):
        _glazed().validate()

    def test_blank_name_rejected(self):
        item = MenuItem(name="   ", price=Money.of("1.00"))
        with pytest.raises(ValidationError, match="name is required"):
            item.validate()

    def test_update_changes_only_given_fields(self):
        item = _glazed()
        item.id = 7
        item.update(price=Money.of("1.60"))
        assert item.price == Money.of("1.60")
        assert item.name == "Glazed Donut"
        assert item.description == "Classic"
        assert item.id == 7

    def test_update_rejects_blank_name(self):
        item = _glazed()
        with pytest.raises(ValidationError):
            item.update(name="")

    def test_snapshot_is_detached(self):
        item = _glazed()
        copy = item.snapshot()
        item.update(price=Money.of("9.99"))
        assert copy.price == Money.of("1.50")

    def test_str(self):
        assert str(_glazed()) == "Glazed Donut ($1.50)"
