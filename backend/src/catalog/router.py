"""Product catalog API endpoints"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from infrastructure.repositories.product_repository import SqlAlchemyProductRepository

from .schemas import (
    ProductFields,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
)
from .service import ProductService


router = APIRouter(prefix="/products", tags=["products"])


def build_product_service(db: Session) -> ProductService:
    """Build a ProductService bound to the given session."""
    return ProductService(SqlAlchemyProductRepository(db))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(product_data: ProductCreate, db: Session = Depends(get_db)):
    """
    Create a new product.

    Raises:
        NotificationError: Mapped to HTTP 400 with the aggregated message
    """
    product = build_product_service(db).create(product_data)
    db.commit()
    return product


@router.get("", response_model=ProductListResponse)
async def list_products(db: Session = Depends(get_db)):
    """List all products ordered by name."""
    return build_product_service(db).list()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, db: Session = Depends(get_db)):
    """
    Get a product by id.

    Raises:
        ProductNotFoundError: Mapped to HTTP 404
    """
    return build_product_service(db).find(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    product_data: ProductFields,
    db: Session = Depends(get_db)
):
    """
    Update a product's name and price.

    Raises:
        ProductNotFoundError: Mapped to HTTP 404
        NotificationError: Mapped to HTTP 400 with the aggregated message
    """
    service = build_product_service(db)
    product = service.update(ProductUpdate(id=product_id, **product_data.model_dump()))
    db.commit()
    return product
