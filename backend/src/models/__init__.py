"""SQLAlchemy models"""

from .base import Base
from .product import ProductModel

__all__ = [
    "Base",
    "ProductModel",
]
