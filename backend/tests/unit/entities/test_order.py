"""Unit tests for the Order aggregate and OrderItem"""

import pytest

from domain.checkout.factory import OrderValidatorFactory
from domain.checkout.models import Order, OrderItem
from domain.checkout.rules import check_item_quantities
from domain.shared.models import NotificationError
from domain.shared.port import ValidatorPort


def make_item(id="i1", price=100, quantity=2, name="Item 1", product_id="p1"):
    return OrderItem(id, name, price, product_id, quantity)


class CrashingValidator(ValidatorPort):
    """Runs the default order rules but crashes on an item with id boom"""

    def validate(self, order):
        if any(item.id == "boom" for item in order.items):
            raise RuntimeError("validator crashed")
        return OrderValidatorFactory.create().validate(order)


class TestOrderConstruction:

    def test_valid_order_computes_total(self):
        items = [make_item("i1", price=100), make_item("i2", price=200)]

        order = Order("o1", "c1", items)

        assert order.id == "o1"
        assert order.customer_id == "c1"
        assert order.items == items
        assert order.total == 300
        assert order.notification.has_errors() is False

    def test_should_throw_error_when_id_is_empty(self):
        with pytest.raises(NotificationError) as exc_info:
            Order("", "c1", [make_item()])

        assert str(exc_info.value) == "order: Id is required"

    def test_should_throw_error_when_customer_id_is_empty(self):
        with pytest.raises(NotificationError) as exc_info:
            Order("o1", "", [make_item()])

        assert str(exc_info.value) == "order: CustomerId is required"

    def test_should_throw_error_when_items_are_empty(self):
        with pytest.raises(NotificationError) as exc_info:
            Order("o1", "c1", [])

        assert str(exc_info.value) == "order: Items are required"

    def test_none_items_count_as_missing(self):
        with pytest.raises(NotificationError, match="order: Items are required"):
            Order("o1", "c1", None)

    def test_all_field_errors_are_reported_in_declaration_order(self):
        with pytest.raises(NotificationError) as exc_info:
            Order("", "", [])

        assert str(exc_info.value) == (
            "order: Id is required,order: CustomerId is required,order: Items are required"
        )

    def test_zero_quantity_fails_even_when_fields_are_valid(self):
        with pytest.raises(NotificationError) as exc_info:
            Order("o1", "c1", [make_item(quantity=0)])

        assert str(exc_info.value) == "order: Quantity must be greater than 0"

    def test_quantity_check_runs_after_field_errors(self):
        """Both failure sources show up in one raise"""
        with pytest.raises(NotificationError) as exc_info:
            Order("", "c1", [make_item("i1", quantity=1), make_item("i2", quantity=-3)])

        assert str(exc_info.value) == "order: Id is required,order: Quantity must be greater than 0"

    def test_items_property_is_read_only(self):
        order = Order("o1", "c1", [make_item()])

        order.items.append(make_item("i2"))

        assert len(order.items) == 1
        assert order.total == 100

    def test_validate_again_is_idempotent(self):
        order = Order("o1", "c1", [make_item()])

        order.validate()

        assert order.notification.has_errors() is False

    def test_orders_with_same_id_are_equal(self):
        assert Order("o1", "c1", [make_item()]) == Order("o1", "c2", [make_item("i9")])

    def test_whitespace_id_is_present(self):
        """Required strings only reject the empty string"""
        order = Order("  ", "c1", [make_item()])

        assert order.id == "  "

    @pytest.mark.parametrize("quantity", [None, "2", 0, -1])
    def test_non_positive_or_non_numeric_quantity_is_a_violation(self, quantity):
        with pytest.raises(NotificationError) as exc_info:
            Order("o1", "c1", [make_item(quantity=quantity)])

        assert str(exc_info.value) == "order: Quantity must be greater than 0"


class TestOrderMutation:

    def test_add_item_recomputes_total(self):
        order = Order("o1", "c1", [make_item("i1", price=100)])

        order.add_item(make_item("i2", price=50))

        assert order.total == 150
        assert [item.id for item in order.items] == ["i1", "i2"]

    def test_change_items_recomputes_total(self):
        order = Order("o1", "c1", [make_item("i1", price=100)])

        order.change_items([make_item("i2", price=10), make_item("i3", price=15)])

        assert order.total == 25

    def test_rejected_change_keeps_previous_items_and_total(self):
        order = Order("o1", "c1", [make_item("i1", price=100)])

        with pytest.raises(NotificationError, match="order: Items are required"):
            order.change_items([])

        assert [item.id for item in order.items] == ["i1"]
        assert order.total == 100

    def test_adding_zero_quantity_item_is_rejected(self):
        order = Order("o1", "c1", [make_item("i1", price=100)])

        with pytest.raises(NotificationError, match="Quantity must be greater than 0"):
            order.add_item(make_item("i2", price=5, quantity=0))

        assert order.total == 100
        assert order.notification.has_errors() is False


    def test_non_numeric_quantity_change_is_rejected_and_rolled_back(self):
        order = Order("o1", "c1", [make_item("i1", price=100)])

        with pytest.raises(NotificationError, match="order: Quantity must be greater than 0"):
            order.change_items([make_item("i2", price=99, quantity=None)])

        assert [item.id for item in order.items] == ["i1"]
        assert order.total == 100

    def test_raising_validator_rolls_back_the_change(self):
        """A validator that crashes leaves the previous state in place"""
        order = Order("o1", "c1", [make_item("i1", price=100)], validator=CrashingValidator())

        with pytest.raises(RuntimeError, match="validator crashed"):
            order.change_items([make_item("boom", price=99)])

        assert [item.id for item in order.items] == ["i1"]
        assert order.total == 100


class TestOrderItem:

    def test_valid_item(self):
        item = make_item("i1", price=12.5, quantity=3)

        assert item.name == "Item 1"
        assert item.price == 12.5
        assert item.product_id == "p1"
        assert item.quantity == 3

    def test_item_accepts_zero_quantity(self):
        """Quantity is an order-level rule"""
        assert make_item(quantity=0).quantity == 0

    def test_item_reports_all_errors(self):
        with pytest.raises(NotificationError) as exc_info:
            OrderItem("", "", -1, "", 1)

        assert str(exc_info.value) == (
            "order_item: Id is required,order_item: Name is required,"
            "order_item: ProductId is required,"
            "order_item: Price must be greater than or equal to zero"
        )


class TestCheckItemQuantities:

    def test_empty_items_are_left_to_the_items_rule(self):
        order = type("Stub", (), {"items": []})()

        assert check_item_quantities(order) is None
