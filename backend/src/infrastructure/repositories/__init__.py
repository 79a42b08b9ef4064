"""Repository implementations of the domain persistence ports"""

from .product_repository import SqlAlchemyProductRepository

__all__ = ["SqlAlchemyProductRepository"]
