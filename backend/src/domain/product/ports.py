"""ProductRepositoryPort interface (persistence port for products)"""

from abc import ABC, abstractmethod

from .models import Product


class ProductRepositoryPort(ABC):
    """Port interface for product persistence.

    Implementations store and load Product entities. Loaded products are
    rebuilt through the Product constructor, so they are validated again.
    """

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persist a new product."""
        pass

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist the current state of an existing product.

        Raises:
            ProductNotFoundError: If the product was never created
        """
        pass

    @abstractmethod
    def find(self, id: str) -> Product:
        """Load a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Load all products."""
        pass
