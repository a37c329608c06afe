import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer():
    """A persisted Customer instance."""
    return Customer.objects.create(name="Ana Souza")


@pytest.fixture()
def product_a():
    return Product.objects.create(description="Mechanical keyboard")


@pytest.fixture()
def product_b():
    return Product.objects.create(description="Gaming mouse")
