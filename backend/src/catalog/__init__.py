"""Catalog module: product use cases and HTTP endpoints"""

from .service import ProductService
from .schemas import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
)

__all__ = [
    "ProductService",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductListResponse",
]
