"""Unit tests for ProductService (repository mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(CreateProductDTO(description="Headset"))

        assert product.description == "Headset"
        mock_repo.save.assert_called_once()


class TestListProducts:
    def test_delegates_to_repository(self, service, mock_repo):
        products = [Product(id=1, description="A")]
        mock_repo.list.return_value = products
        assert service.list_products() == products


class TestGetProduct:
    def test_found(self, service, mock_repo):
        product = Product(id=1, description="A")
        mock_repo.get_by_id.return_value = product
        assert service.get_product(1) is product

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound, match="Product not found"):
            service.get_product(1)
