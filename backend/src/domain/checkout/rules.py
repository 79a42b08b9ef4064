"""Checkout validation rules.

Order rules run in field-declaration order (id, customer_id, items) and the
item quantity check runs afterwards, even when a field rule already failed.
"""

from typing import Any, Optional

from domain.shared.engine import FieldRule, is_present, is_positive


ORDER_CONTEXT = "order"
ORDER_ITEM_CONTEXT = "order_item"


ORDER_RULES = [
    FieldRule("id", "Id is required", lambda order: is_present(order.id)),
    FieldRule("customer_id", "CustomerId is required", lambda order: is_present(order.customer_id)),
    FieldRule("items", "Items are required", lambda order: len(order.items) >= 1),
]


def check_item_quantities(order: Any) -> Optional[str]:
    """Every item of a non-empty order must have a positive numeric quantity."""
    if order.items and any(not is_positive(item.quantity) for item in order.items):
        return "Quantity must be greater than 0"
    return None


def _is_non_negative_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


# Quantity is left to the order-level check above
ORDER_ITEM_RULES = [
    FieldRule("id", "Id is required", lambda item: is_present(item.id)),
    FieldRule("name", "Name is required", lambda item: is_present(item.name)),
    FieldRule("product_id", "ProductId is required", lambda item: is_present(item.product_id)),
    FieldRule("price", "Price must be greater than or equal to zero", lambda item: _is_non_negative_number(item.price)),
]
