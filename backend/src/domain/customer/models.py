"""Customer context: the Address value object and the Customer entity"""

import logging
from typing import Optional

from domain.shared.entity import Entity, Validatable
from domain.shared.models import DomainError
from domain.shared.port import ValidatorPort

from .factory import AddressValidatorFactory, CustomerValidatorFactory


logger = logging.getLogger(__name__)


class Address(Validatable):
    """Postal address value object.

    Immutable once constructed; two addresses with the same fields are equal.
    """

    def __init__(
        self,
        street: str,
        number: int,
        zip: str,
        city: str,
        validator: Optional[ValidatorPort] = None
    ):
        super().__init__(validator)
        self._street = street
        self._number = number
        self._zip = zip
        self._city = city
        self._ensure_valid()

    def _default_validator(self) -> ValidatorPort:
        return AddressValidatorFactory.create()

    @property
    def street(self) -> str:
        return self._street

    @property
    def number(self) -> int:
        return self._number

    @property
    def zip(self) -> str:
        return self._zip

    @property
    def city(self) -> str:
        return self._city

    def _key(self) -> tuple:
        return (self._street, self._number, self._zip, self._city)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self._street}, {self._number}, {self._zip} {self._city}"

    def __repr__(self) -> str:
        return f"Address({self._street!r}, {self._number!r}, {self._zip!r}, {self._city!r})"


class Customer(Entity):
    """Customer entity.

    A customer starts inactive with zero reward points and can only be
    activated once it has an address.
    """

    def __init__(
        self,
        id: str,
        name: str,
        address: Optional[Address] = None,
        validator: Optional[ValidatorPort] = None
    ):
        super().__init__(id, validator)
        self._name = name
        self._address = address
        self._active = False
        self._reward_points = 0
        self._ensure_valid()

    def _default_validator(self) -> ValidatorPort:
        return CustomerValidatorFactory.create()

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @property
    def reward_points(self) -> int:
        return self._reward_points

    def is_active(self) -> bool:
        return self._active

    def change_name(self, name: str) -> None:
        self._apply_changes(_name=name)

    def change_address(self, address: Address) -> None:
        """Replace the address.

        Raises:
            DomainError: If address is None
        """
        if address is None:
            raise DomainError("Address is mandatory for a customer")
        self._apply_changes(_address=address)

    def activate(self) -> None:
        """Mark the customer active.

        Raises:
            DomainError: If the customer has no address
        """
        if self._address is None:
            raise DomainError("Address is mandatory to activate a customer")
        self._active = True
        logger.info(f"Customer {self._id} activated", extra={"entity": "Customer"})

    def deactivate(self) -> None:
        self._active = False

    def add_reward_points(self, points: int) -> None:
        self._reward_points += points

    def __repr__(self) -> str:
        return f"Customer(id={self._id!r}, name={self._name!r}, active={self._active!r})"
