"""Customer context validation rules"""

from domain.shared.engine import FieldRule, is_present, is_positive


ADDRESS_CONTEXT = "address"
CUSTOMER_CONTEXT = "customer"


# All four address rules are evaluated independently
ADDRESS_RULES = [
    FieldRule("street", "Street is required", lambda address: is_present(address.street)),
    FieldRule("number", "Number is required", lambda address: is_positive(address.number)),
    FieldRule("zip", "Zip is required", lambda address: is_present(address.zip)),
    FieldRule("city", "City is required", lambda address: is_present(address.city)),
]

CUSTOMER_RULES = [
    FieldRule("id", "Id is required", lambda customer: is_present(customer.id)),
    FieldRule("name", "Name is required", lambda customer: is_present(customer.name)),
]
