"""Product entity"""

from typing import Optional

from domain.shared.entity import Entity
from domain.shared.port import ValidatorPort

from .factory import ProductValidatorFactory


class Product(Entity):
    """Catalog product with a name and a strictly positive price."""

    def __init__(
        self,
        id: str,
        name: str,
        price: float,
        validator: Optional[ValidatorPort] = None
    ):
        super().__init__(id, validator)
        self._name = name
        self._price = price
        self._ensure_valid()

    def _default_validator(self) -> ValidatorPort:
        return ProductValidatorFactory.create()

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    def change_name(self, name: str) -> None:
        """Rename the product.

        Raises:
            NotificationError: If the name is empty; the old name is kept
        """
        self._apply_changes(_name=name)

    def change_price(self, price: float) -> None:
        """Reprice the product.

        Raises:
            NotificationError: If the price is not greater than zero
        """
        self._apply_changes(_price=price)

    def __repr__(self) -> str:
        return f"Product(id={self._id!r}, name={self._name!r}, price={self._price!r})"
