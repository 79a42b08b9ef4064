"""Product validation rules"""

from domain.shared.engine import FieldRule, is_present, is_positive


PRODUCT_CONTEXT = "product"


PRODUCT_RULES = [
    FieldRule("id", "Id is required", lambda product: is_present(product.id)),
    FieldRule("name", "Name is required", lambda product: is_present(product.name)),
    FieldRule("price", "Price must be greater than zero", lambda product: is_positive(product.price)),
]
