"""Unit tests for the transient Cart."""

import pytest

from posledger.domain.exceptions import NotFoundError, ValidationError
from posledger.domain.model.cart import Cart
from posledger.domain.model.value_objects import Money
from tests.builders import make_product


def _coffee():
    return make_product("1", "Coffee", cost="0.50", price="2.50")


def _tea():
    return make_product("3", "Tea", cost="0.30", price="2.00")


class TestCart:

    def test_adding_same_product_merges_lines(self):
        cart = Cart()
        cart.add(_coffee())
        cart.add(_coffee(), 2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 3

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        cart.add(_tea())
        cart.add(_coffee())
        assert [i.product.id for i in cart.items] == ["3", "1"]

    def test_total_and_profit(self):
        cart = Cart()
        cart.add(_coffee(), 2)
        cart.add(_tea(), 1)
        assert cart.total == Money.of("7.00")
        assert cart.profit == Money.of("5.70")

    def test_zero_quantity_on_add_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(_coffee(), 0)

    def test_set_quantity(self):
        cart = Cart()
        cart.add(_coffee())
        cart.set_quantity("1", 4)
        assert cart.items[0].quantity.value == 4

    def test_set_quantity_zero_removes_line(self):
        cart = Cart()
        cart.add(_coffee())
        cart.set_quantity("1", 0)
        assert cart.is_empty

    def test_remove_unknown_line(self):
        with pytest.raises(NotFoundError):
            Cart().remove("42")

    def test_line_items_snapshot_product(self):
        cart = Cart()
        coffee = _coffee()
        cart.add(coffee, 2)
        lines = cart.to_line_items()
        coffee.price = Money.of("99")
        assert lines[0].product.price == Money.of("2.50")
        assert lines[0].line_total == Money.of("5.00")
