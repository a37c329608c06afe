"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.

- ``CreateOrderDTO``: input for order creation.
- ``OrderCustomerDTO``: the owning customer, without its order list.
- ``OrderOutputDTO``: output with customer and products embedded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from modules.core.dtos import CAMEL_CONFIG, EntityId, require_text
from modules.products.dtos import ProductOutputDTO

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Wire shape::

        {"description": "...", "customerId": 1, "productIds": [1, 2]}

    Ids must be JSON integers in the signed 64-bit range; booleans and
    numeric strings are rejected.  ``productIds`` is optional, and ids
    that do not resolve are dropped by the service instead of failing
    the request.
    """

    model_config = CAMEL_CONFIG

    description: Optional[str] = Field(default=None, validate_default=True)
    customer_id: Optional[EntityId] = Field(default=None, validate_default=True)
    product_ids: Optional[List[EntityId]] = None

    @field_validator("description")
    @classmethod
    def description_must_not_be_blank(cls, v: Optional[str]) -> str:
        return require_text(v, "Order description is required")

    @field_validator("customer_id")
    @classmethod
    def customer_id_is_required(cls, v: Optional[int]) -> int:
        if v is None:
            raise PydanticCustomError("missing", "Customer ID is required")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderCustomerDTO(BaseModel):
    model_config = CAMEL_CONFIG

    id: int
    name: str

    @classmethod
    def from_entity(cls, customer: Customer) -> OrderCustomerDTO:
        return cls(id=customer.id, name=customer.name)


class OrderOutputDTO(BaseModel):
    """Immutable DTO for order API responses."""

    model_config = CAMEL_CONFIG

    id: int
    description: str
    customer: OrderCustomerDTO
    products: List[ProductOutputDTO] = []

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        """Build an output DTO from an Order model instance.

        Expects ``customer`` and ``products`` to be loaded by the
        repository (``select_related`` / ``prefetch_related``).
        """
        return cls(
            id=order.id,
            description=order.description,
            customer=OrderCustomerDTO.from_entity(order.customer),
            products=[ProductOutputDTO.from_entity(p) for p in order.products.all()],
        )
