"""Order aggregate: Order and the OrderItem lines it owns"""

from typing import Iterable, Optional

from domain.shared.entity import Entity
from domain.shared.port import ValidatorPort

from .factory import OrderValidatorFactory, OrderItemValidatorFactory


class OrderItem(Entity):
    """A single order line.

    Quantity is not checked here; an order containing a non-positive
    quantity is rejected by the Order rules.
    """

    def __init__(
        self,
        id: str,
        name: str,
        price: float,
        product_id: str,
        quantity: int,
        validator: Optional[ValidatorPort] = None
    ):
        super().__init__(id, validator)
        self._name = name
        self._price = price
        self._product_id = product_id
        self._quantity = quantity
        self._ensure_valid()

    def _default_validator(self) -> ValidatorPort:
        return OrderItemValidatorFactory.create()

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def quantity(self) -> int:
        return self._quantity

    def __repr__(self) -> str:
        return (
            f"OrderItem(id={self._id!r}, name={self._name!r}, price={self._price!r}, "
            f"product_id={self._product_id!r}, quantity={self._quantity!r})"
        )


class Order(Entity):
    """Order aggregate root.

    Owns its items exclusively. ``total`` is the sum of the item prices and
    is recomputed every time the items change.
    """

    def __init__(
        self,
        id: str,
        customer_id: str,
        items: Optional[Iterable[OrderItem]],
        validator: Optional[ValidatorPort] = None
    ):
        super().__init__(id, validator)
        self._customer_id = customer_id
        self._items = list(items) if items is not None else []
        self._total = self._compute_total()
        self._ensure_valid()

    def _default_validator(self) -> ValidatorPort:
        return OrderValidatorFactory.create()

    def _compute_total(self) -> float:
        return sum((item.price for item in self._items), 0)

    def _after_change(self) -> None:
        self._total = self._compute_total()

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> list[OrderItem]:
        """Copy of the order lines; mutate through change_items/add_item."""
        return list(self._items)

    @property
    def total(self) -> float:
        return self._total

    def change_items(self, items: Iterable[OrderItem]) -> None:
        """Replace all items, recomputing the total and re-validating.

        Raises:
            NotificationError: If the new items break an order rule; the
                previous items and total are kept
        """
        self._apply_changes(_items=list(items))

    def add_item(self, item: OrderItem) -> None:
        """Append one item, recomputing the total and re-validating."""
        self._apply_changes(_items=self._items + [item])

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"items={len(self._items)}, total={self._total!r})"
        )
