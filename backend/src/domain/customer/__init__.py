"""Customer context: customers and their addresses"""

from .models import Address, Customer
from .factory import AddressValidatorFactory, CustomerValidatorFactory
from .rules import ADDRESS_RULES, CUSTOMER_RULES

__all__ = [
    "Address",
    "Customer",
    "AddressValidatorFactory",
    "CustomerValidatorFactory",
    "ADDRESS_RULES",
    "CUSTOMER_RULES",
]
