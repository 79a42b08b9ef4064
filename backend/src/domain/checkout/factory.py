"""Validator factories for the checkout context"""

from domain.shared.engine import RuleSetValidator
from domain.shared.port import ValidatorPort

from .rules import (
    ORDER_CONTEXT,
    ORDER_ITEM_CONTEXT,
    ORDER_RULES,
    ORDER_ITEM_RULES,
    check_item_quantities,
)


class OrderValidatorFactory:
    """Builds the validator used by Order when none is injected."""

    @staticmethod
    def create() -> ValidatorPort:
        return RuleSetValidator(
            context=ORDER_CONTEXT,
            rules=ORDER_RULES,
            post_checks=[check_item_quantities]
        )


class OrderItemValidatorFactory:
    """Builds the validator used by OrderItem when none is injected."""

    @staticmethod
    def create() -> ValidatorPort:
        return RuleSetValidator(context=ORDER_ITEM_CONTEXT, rules=ORDER_ITEM_RULES)
