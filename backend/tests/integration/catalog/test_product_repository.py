"""Integration tests for SqlAlchemyProductRepository on SQLite"""

import pytest

from domain.product.models import Product
from domain.shared.models import ProductNotFoundError
from models.product import ProductModel


class TestProductRepository:

    def test_create_and_find_product(self, product_repository, db_session):
        product_repository.create(Product("123", "Product 1", 100))

        row = db_session.get(ProductModel, "123")
        assert (row.id, row.name, row.price) == ("123", "Product 1", 100)

        found = product_repository.find("123")
        assert isinstance(found, Product)
        assert (found.id, found.name, found.price) == ("123", "Product 1", 100)

    def test_update_product(self, product_repository):
        product = Product("123", "Product 1", 100)
        product_repository.create(product)

        product.change_name("Product 1 Updated")
        product.change_price(200)
        product_repository.update(product)

        found = product_repository.find("123")
        assert found.name == "Product 1 Updated"
        assert found.price == 200

    def test_find_all_orders_by_name(self, product_repository):
        product_repository.create(Product("2", "Bravo", 20))
        product_repository.create(Product("1", "Alpha", 10))

        products = product_repository.find_all()

        assert [product.name for product in products] == ["Alpha", "Bravo"]

    def test_find_all_empty(self, product_repository):
        assert product_repository.find_all() == []

    def test_find_unknown_product_raises(self, product_repository):
        with pytest.raises(ProductNotFoundError, match="Product not found"):
            product_repository.find("missing")

    def test_update_unknown_product_raises(self, product_repository):
        with pytest.raises(ProductNotFoundError):
            product_repository.update(Product("missing", "Ghost", 1))
