"""Unit tests for the Product aggregate."""

import pytest

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.product import AdjustmentDirection, Product
from posledger.domain.model.value_objects import Money
from tests.builders import make_product


class TestProductCreate:

    def test_valid_product(self):
        p = Product.create(id=" 7 ", name=" Latte ", cost="1.20", price="3.80", inventory=4)
        assert p.id == "7"
        assert p.name == "Latte"
        assert p.cost == Money.of("1.20")
        assert p.price == Money.of("3.80")
        assert p.inventory == 4
        assert p.created_at <= p.updated_at

    def test_blank_optional_fields_become_none(self):
        p = make_product(category="  ", barcode="")
        assert p.category is None
        assert p.barcode is None

    def test_id_required(self):
        with pytest.raises(ValidationError, match="id is required"):
            Product.create(id="  ", name="Latte", cost="1", price="2")

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(id="1", name="", cost="1", price="2")

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError, match="cost cannot be negative"):
            Product.create(id="1", name="Latte", cost="-1", price="2")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="price cannot be negative"):
            Product.create(id="1", name="Latte", cost="1", price="-2")

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Product.create(id="1", name="Latte", cost="1", price="two")

    def test_negative_inventory_rejected(self):
        with pytest.raises(ValidationError, match="Inventory cannot be negative"):
            Product.create(id="1", name="Latte", cost="1", price="2", inventory=-1)

    def test_zero_cost_and_price_allowed(self):
        p = Product.create(id="1", name="Free sample", cost="0", price="0")
        assert p.price == Money.of("0")


class TestProductInventory:

    def test_add(self):
        p = make_product(inventory=5)
        assert p.adjust_inventory(10, AdjustmentDirection.ADD) == 15

    def test_subtract(self):
        p = make_product(inventory=5)
        assert p.adjust_inventory(3, AdjustmentDirection.SUBTRACT) == 2

    def test_subtract_floors_at_zero(self):
        p = make_product(inventory=5)
        assert p.adjust_inventory(10, AdjustmentDirection.SUBTRACT) == 0

    @pytest.mark.parametrize("delta", [0, -1])
    def test_non_positive_delta_rejected(self, delta):
        p = make_product(inventory=5)
        with pytest.raises(ValidationError, match="must be positive"):
            p.adjust_inventory(delta, AdjustmentDirection.ADD)
        assert p.inventory == 5

    @pytest.mark.parametrize("delta", [2.5, "3", True])
    def test_non_integer_delta_rejected(self, delta):
        p = make_product(inventory=5)
        with pytest.raises(ValidationError, match="must be an integer"):
            p.adjust_inventory(delta, AdjustmentDirection.ADD)

    @pytest.mark.parametrize("initial", [0, 1, 9, 10, 50])
    @pytest.mark.parametrize("delta", [1, 5, 10, 100])
    def test_result_is_never_negative(self, initial, delta):
        up = make_product(inventory=initial)
        down = make_product(inventory=initial)
        assert up.adjust_inventory(delta, AdjustmentDirection.ADD) == initial + delta
        assert down.adjust_inventory(delta, AdjustmentDirection.SUBTRACT) == max(0, initial - delta)

    def test_low_stock_threshold(self):
        assert make_product(inventory=9).is_low_stock()
        assert not make_product(inventory=10).is_low_stock()
        assert not make_product(inventory=9).is_low_stock(threshold=5)

    def test_inventory_value(self):
        assert make_product(cost="0.50", inventory=50).inventory_value == Money.of("25")


class TestAdjustmentDirection:

    def test_parse_strings(self):
        assert AdjustmentDirection.parse("add") is AdjustmentDirection.ADD
        assert AdjustmentDirection.parse(" Subtract ") is AdjustmentDirection.SUBTRACT

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="'add' or 'subtract'"):
            AdjustmentDirection.parse("remove")


class TestProductSnapshot:

    def test_snapshot_is_independent_of_later_edits(self):
        p = make_product(price="2.50")
        snap = p.snapshot()
        p.price = Money.of("9.99")
        assert snap.price == Money.of("2.50")
        assert snap.unit_profit == Money.of("2.00")
