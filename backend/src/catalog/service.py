"""Product use cases: create, find, list and update"""

import logging

from domain.product.factory import ProductFactory
from domain.product.ports import ProductRepositoryPort

from .schemas import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
)


logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product use cases over a ProductRepositoryPort.

    Domain rules are enforced by the Product entity; failures surface as
    NotificationError and unknown ids as ProductNotFoundError.
    """

    def __init__(self, repository: ProductRepositoryPort):
        self.repository = repository

    def create(self, data: ProductCreate) -> ProductResponse:
        """Create and persist a product with a generated id.

        Raises:
            NotificationError: If name or price break a product rule
        """
        product = ProductFactory.create(data.name, data.price)
        self.repository.create(product)

        logger.info(f"Created product {product.id}", extra={"product_id": product.id})

        return ProductResponse.model_validate(product)

    def find(self, product_id: str) -> ProductResponse:
        """Raises ProductNotFoundError for an unknown id."""
        product = self.repository.find(product_id)
        return ProductResponse.model_validate(product)

    def list(self) -> ProductListResponse:
        products = self.repository.find_all()
        return ProductListResponse(
            products=[ProductResponse.model_validate(product) for product in products]
        )

    def update(self, data: ProductUpdate) -> ProductResponse:
        """Apply new name and price to an existing product.

        Args:
            data: Product id plus the new name and price

        Returns:
            The updated product as {id, name, price}

        Raises:
            ProductNotFoundError: If the product does not exist
            NotificationError: If the new name or price is invalid
        """
        product = self.repository.find(data.id)
        product.change_name(data.name)
        product.change_price(data.price)
        self.repository.update(product)

        logger.info(f"Updated product {product.id}", extra={"product_id": product.id})

        return ProductResponse.model_validate(product)
