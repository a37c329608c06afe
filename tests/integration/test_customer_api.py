"""Integration tests for the customer endpoints.

Covers:
- /customer/create: success, blank/missing name, duplicates.
- /customer/list, /customer/find/{id}, /customer/search.
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer
from modules.orders.models import Order

pytestmark = pytest.mark.integration


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_returns_201(self, api_client):
        response = api_client.post("/customer/create", {"name": "Ana"}, format="json")
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ana"
        assert data["orders"] == []
        assert Customer.objects.filter(id=data["id"]).exists()

    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "   "}, {"name": None}])
    def test_blank_name_returns_400(self, api_client, payload):
        response = api_client.post("/customer/create", payload, format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Validation failed"
        assert data["errors"] == ["name: Customer name is required"]
        assert data["path"] == "/customer/create"
        assert Customer.objects.count() == 0

    def test_duplicate_names_get_distinct_ids(self, api_client):
        first = api_client.post("/customer/create", {"name": "Same"}, format="json").json()
        second = api_client.post("/customer/create", {"name": "Same"}, format="json").json()
        assert first["id"] != second["id"]

    def test_orders_in_payload_are_ignored(self, api_client):
        response = api_client.post(
            "/customer/create",
            {"name": "Ana", "orders": [{"id": 1, "description": "x"}]},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["orders"] == []


# ===========================================================================
# LIST / FIND
# ===========================================================================


class TestCustomerList:
    def test_empty_list(self, api_client):
        response = api_client.get("/customer/list")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_customers_with_their_orders(self, api_client, customer):
        order = Order.objects.create(description="Desk", customer=customer)
        response = api_client.get("/customer/list")
        assert response.json() == [
            {
                "id": customer.id,
                "name": "Ana Souza",
                "orders": [{"id": order.id, "description": "Desk"}],
            }
        ]


class TestCustomerFind:
    def test_found(self, api_client, customer):
        response = api_client.get(f"/customer/find/{customer.id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Ana Souza"

    def test_not_found(self, api_client):
        response = api_client.get("/customer/find/999")
        assert response.status_code == 404
        assert response.json() == {
            "status": 404,
            "message": "Customer not found",
            "path": "/customer/find/999",
        }

    def test_non_numeric_id(self, api_client):
        response = api_client.get("/customer/find/abc")
        assert response.status_code == 400
        assert response.json()["message"] == (
            "Invalid value 'abc' for parameter 'id'. Expected type: int"
        )


# ===========================================================================
# SEARCH
# ===========================================================================


class TestCustomerSearch:
    @pytest.fixture(autouse=True)
    def _customers(self):
        Customer.objects.create(name="Alice")
        Customer.objects.create(name="Bob")

    def test_case_insensitive_match(self, api_client):
        response = api_client.get("/customer/search", {"query": "ALI"})
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Alice"]

    def test_no_match_returns_empty_list(self, api_client):
        response = api_client.get("/customer/search", {"query": "zzz"})
        assert response.status_code == 200
        assert response.json() == []

    def test_missing_query_is_constraint_violation(self, api_client):
        response = api_client.get("/customer/search")
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Constraint violation"
        assert data["errors"][0].startswith("query: ")
