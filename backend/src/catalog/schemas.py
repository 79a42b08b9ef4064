"""Pydantic schemas for catalog use cases (products)

Input schemas only describe shape; the Product entity decides whether the
values are valid, so an empty name or a negative price reaches the domain.
"""

from pydantic import BaseModel, ConfigDict


class ProductFields(BaseModel):
    """Editable product fields"""
    name: str
    price: float


class ProductCreate(ProductFields):
    """Schema for creating a new Product"""
    pass


class ProductUpdate(ProductFields):
    """Schema for updating an existing Product"""
    id: str


class ProductResponse(BaseModel):
    """Schema for Product response"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: float


class ProductListResponse(BaseModel):
    """Schema for listing products"""
    products: list[ProductResponse]
