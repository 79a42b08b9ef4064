"""Product context: catalog products and their persistence port"""

from .models import Product
from .factory import ProductFactory, ProductValidatorFactory
from .ports import ProductRepositoryPort
from .rules import PRODUCT_RULES

__all__ = [
    "Product",
    "ProductFactory",
    "ProductValidatorFactory",
    "ProductRepositoryPort",
    "PRODUCT_RULES",
]
