"""Unit tests for Order DTOs.

Covers:
- CreateOrderDTO: required fields reported together, camelCase aliases,
  optional product ids, strict 64-bit integer ids.
- OrderOutputDTO: from_entity with embedded customer and products.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CreateOrderDTO, OrderOutputDTO
from modules.orders.models import Order

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateOrderDTO
# ===========================================================================


class TestCreateOrderDTO:
    def test_camel_case_payload(self):
        dto = CreateOrderDTO.model_validate(
            {"description": "Order 1", "customerId": 1, "productIds": [1, 2]}
        )
        assert dto.description == "Order 1"
        assert dto.customer_id == 1
        assert dto.product_ids == [1, 2]

    def test_snake_case_names_also_accepted(self):
        dto = CreateOrderDTO(description="Order 1", customer_id=1)
        assert dto.customer_id == 1

    def test_product_ids_optional(self):
        dto = CreateOrderDTO.model_validate({"description": "x", "customerId": 1})
        assert dto.product_ids is None

    def test_all_violations_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO.model_validate({"description": " "})
        messages = {err["loc"]: err["msg"] for err in exc_info.value.errors()}
        assert messages == {
            ("description",): "Order description is required",
            ("customerId",): "Customer ID is required",
        }

    def test_explicit_null_customer_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO.model_validate({"description": "x", "customerId": None})
        assert exc_info.value.errors()[0]["msg"] == "Customer ID is required"

    def test_non_integer_product_id_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO.model_validate(
                {"description": "x", "customerId": 1, "productIds": ["abc"]}
            )
        assert exc_info.value.errors()[0]["loc"] == ("productIds", 0)

    @pytest.mark.parametrize("value", [True, "1", 1.0])
    def test_customer_id_must_be_a_json_integer(self, value):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO.model_validate({"description": "x", "customerId": value})
        assert [err["loc"] for err in exc_info.value.errors()] == [("customerId",)]

    def test_product_id_beyond_64_bits_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateOrderDTO.model_validate(
                {"description": "x", "customerId": 1, "productIds": [1, 10**25]}
            )
        assert [err["loc"] for err in exc_info.value.errors()] == [("productIds", 1)]

    def test_negative_ids_pass_validation(self):
        dto = CreateOrderDTO.model_validate(
            {"description": "x", "customerId": -1, "productIds": [0]}
        )
        assert dto.customer_id == -1
        assert dto.product_ids == [0]


# ===========================================================================
# OrderOutputDTO
# ===========================================================================


class TestOrderOutputDTO:
    def test_from_entity(self, customer, product_a, product_b):
        order = Order.objects.create(description="Desk setup", customer=customer)
        order.products.set([product_a, product_b])

        dto = OrderOutputDTO.from_entity(order)

        assert dto.model_dump(by_alias=True) == {
            "id": order.id,
            "description": "Desk setup",
            "customer": {"id": customer.id, "name": "Ana Souza"},
            "products": [
                {"id": product_a.id, "description": "Mechanical keyboard"},
                {"id": product_b.id, "description": "Gaming mouse"},
            ],
        }

    def test_from_entity_without_products(self, customer):
        order = Order.objects.create(description="Empty", customer=customer)
        assert OrderOutputDTO.from_entity(order).products == []
