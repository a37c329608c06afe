"""Unit tests for OrderService.

Repositories are ``MagicMock`` doubles so the resolution order and the
absence of writes on rejected requests can be asserted directly.

Covers:
- Customer resolution precedes product resolution and persistence.
- Unknown customer: InvalidCustomerReference, nothing written.
- Product ids: bulk lookup, unknown ids dropped, no lookup when absent.
- get_order / list_orders.
"""

from __future__ import annotations

from unittest.mock import MagicMock, call

import pytest

from modules.customers.models import Customer
from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import InvalidCustomerReference, OrderNotFound
from modules.orders.models import Order
from modules.orders.repositories import IOrderRepository
from modules.orders.services import OrderService
from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def order_repo():
    repo = MagicMock(spec=IOrderRepository)
    repo.create.side_effect = lambda data: Order(
        id=10, description=data["description"], customer=data["customer"]
    )
    repo.get_by_id.side_effect = lambda id: Order(id=id, description="re-fetched")
    return repo


@pytest.fixture()
def customer_repo():
    repo = MagicMock()
    repo.get_by_id.return_value = Customer(id=1, name="Ana")
    return repo


@pytest.fixture()
def product_repo():
    return MagicMock()


@pytest.fixture()
def service(order_repo, customer_repo, product_repo):
    return OrderService(
        order_repository=order_repo,
        customer_repository=customer_repo,
        product_repository=product_repo,
    )


# ===========================================================================
# create_order
# ===========================================================================


class TestCreateOrder:
    def test_success_returns_refetched_order(self, service, order_repo, customer_repo):
        order = service.create_order(CreateOrderDTO(description="Desk", customer_id=1))

        customer_repo.get_by_id.assert_called_once_with(1)
        order_repo.get_by_id.assert_called_once_with(10)
        assert order.description == "re-fetched"

    def test_passes_resolved_entities_to_repository(
        self, service, order_repo, customer_repo, product_repo
    ):
        keyboard = Product(id=1, description="Keyboard")
        product_repo.get_by_ids.return_value = [keyboard]

        service.create_order(CreateOrderDTO(description="Desk", customer_id=1, product_ids=[1]))

        data = order_repo.create.call_args.args[0]
        assert data["description"] == "Desk"
        assert data["customer"] is customer_repo.get_by_id.return_value
        assert data["products"] == [keyboard]

    def test_unknown_customer_writes_nothing(
        self, service, order_repo, customer_repo, product_repo
    ):
        customer_repo.get_by_id.return_value = None

        with pytest.raises(InvalidCustomerReference) as exc_info:
            service.create_order(
                CreateOrderDTO(description="Desk", customer_id=99, product_ids=[1])
            )

        assert exc_info.value.status == 400
        assert exc_info.value.message == "Invalid customer ID"
        product_repo.get_by_ids.assert_not_called()
        order_repo.create.assert_not_called()

    def test_unknown_product_ids_are_dropped(self, service, order_repo, product_repo):
        existing = Product(id=1, description="Keyboard")
        product_repo.get_by_ids.return_value = [existing]

        service.create_order(
            CreateOrderDTO(description="Desk", customer_id=1, product_ids=[1, 999])
        )

        product_repo.get_by_ids.assert_called_once_with([1, 999])
        assert order_repo.create.call_args.args[0]["products"] == [existing]

    def test_all_product_ids_unknown_yields_no_products(self, service, order_repo, product_repo):
        product_repo.get_by_ids.return_value = []

        service.create_order(CreateOrderDTO(description="Desk", customer_id=1, product_ids=[998]))

        assert order_repo.create.call_args.args[0]["products"] == []

    @pytest.mark.parametrize("product_ids", [None, []])
    def test_absent_product_ids_skip_lookup(self, service, order_repo, product_repo, product_ids):
        service.create_order(
            CreateOrderDTO(description="Desk", customer_id=1, product_ids=product_ids)
        )

        product_repo.get_by_ids.assert_not_called()
        assert order_repo.create.call_args.args[0]["products"] == []

    def test_customer_resolved_before_products(
        self, service, customer_repo, product_repo
    ):
        tracker = MagicMock()
        tracker.attach_mock(customer_repo.get_by_id, "customer_lookup")
        tracker.attach_mock(product_repo.get_by_ids, "product_lookup")
        product_repo.get_by_ids.return_value = []

        service.create_order(CreateOrderDTO(description="Desk", customer_id=1, product_ids=[5]))

        assert tracker.mock_calls == [call.customer_lookup(1), call.product_lookup([5])]


# ===========================================================================
# Queries
# ===========================================================================


class TestGetOrder:
    def test_found(self, service, order_repo):
        order = service.get_order(4)
        assert order.id == 4

    def test_not_found(self, service, order_repo):
        order_repo.get_by_id.side_effect = None
        order_repo.get_by_id.return_value = None
        with pytest.raises(OrderNotFound, match="Order not found"):
            service.get_order(4)


class TestListOrders:
    def test_delegates_to_repository(self, service, order_repo):
        order_repo.list.return_value = []
        assert service.list_orders() == []
        order_repo.list.assert_called_once_with()
