"""Product SQLAlchemy model"""

from sqlalchemy import Column, Text, Float

from .base import Base


class ProductModel(Base):
    """Persistence row for a Product entity.

    Holds the entity's fields only; validation stays in domain.product.
    """
    __tablename__ = "products"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
