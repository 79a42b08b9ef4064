"""Product repository for database operations"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.product.models import Product
from domain.product.ports import ProductRepositoryPort
from domain.shared.models import ProductNotFoundError
from models.product import ProductModel


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepositoryPort):
    """SQLAlchemy implementation of ProductRepositoryPort.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create(self, product: Product) -> None:
        row = ProductModel(
            id=product.id,
            name=product.name,
            price=product.price
        )
        self.db.add(row)
        self.db.flush()

        logger.debug(f"Inserted product {product.id}")

    def update(self, product: Product) -> None:
        row = self.db.get(ProductModel, product.id)
        if row is None:
            raise ProductNotFoundError("Product not found")

        row.name = product.name
        row.price = product.price
        self.db.flush()

        logger.debug(f"Updated product {product.id}")

    def find(self, id: str) -> Product:
        row = self.db.get(ProductModel, id)
        if row is None:
            raise ProductNotFoundError("Product not found")

        return self._to_entity(row)

    def find_all(self) -> list[Product]:
        query = select(ProductModel).order_by(ProductModel.name, ProductModel.id)
        rows = self.db.execute(query).scalars().all()
        return [self._to_entity(row) for row in rows]

    @staticmethod
    def _to_entity(row: ProductModel) -> Product:
        return Product(row.id, row.name, row.price)
