"""Checkout context: orders and order items"""

from .models import Order, OrderItem
from .factory import OrderValidatorFactory, OrderItemValidatorFactory
from .rules import ORDER_RULES, ORDER_ITEM_RULES, check_item_quantities

__all__ = [
    "Order",
    "OrderItem",
    "OrderValidatorFactory",
    "OrderItemValidatorFactory",
    "ORDER_RULES",
    "ORDER_ITEM_RULES",
    "check_item_quantities",
]
