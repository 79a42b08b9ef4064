"""Validator factories for the customer context"""

from domain.shared.engine import RuleSetValidator
from domain.shared.port import ValidatorPort

from .rules import ADDRESS_CONTEXT, CUSTOMER_CONTEXT, ADDRESS_RULES, CUSTOMER_RULES


class AddressValidatorFactory:

    @staticmethod
    def create() -> ValidatorPort:
        return RuleSetValidator(context=ADDRESS_CONTEXT, rules=ADDRESS_RULES)


class CustomerValidatorFactory:

    @staticmethod
    def create() -> ValidatorPort:
        return RuleSetValidator(context=CUSTOMER_CONTEXT, rules=CUSTOMER_RULES)
