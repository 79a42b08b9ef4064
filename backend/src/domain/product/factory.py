"""Product factories: the validator factory and the entity factory"""

from uuid import uuid4

from domain.shared.engine import RuleSetValidator
from domain.shared.port import ValidatorPort

from .rules import PRODUCT_CONTEXT, PRODUCT_RULES


class ProductValidatorFactory:

    @staticmethod
    def create() -> ValidatorPort:
        return RuleSetValidator(context=PRODUCT_CONTEXT, rules=PRODUCT_RULES)


class ProductFactory:
    """Creates new Product entities with generated ids."""

    @staticmethod
    def create(name: str, price: float):
        # Imported here: models imports this module for the validator factory
        from .models import Product

        return Product(str(uuid4()), name, price)
