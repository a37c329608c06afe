"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and use camelCase
on the wire.

- ``CreateCustomerDTO``: input for customer creation.
- ``CustomerSearchDTO``: query parameters for name search.
- ``CustomerOutputDTO``: output with the customer's orders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, Field, field_validator

from modules.core.dtos import CAMEL_CONFIG, require_text

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    ``name`` is required and must not be blank.  Any ``orders`` sent by
    the client are ignored: the back-reference is read-only.
    """

    model_config = CAMEL_CONFIG

    name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: Optional[str]) -> str:
        return require_text(v, "Customer name is required")


class CustomerSearchDTO(BaseModel):
    """Immutable DTO for ``GET /customer/search`` parameters."""

    model_config = CAMEL_CONFIG

    query: str


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class CustomerOrderDTO(BaseModel):
    """An order as listed under its customer (no customer back-link)."""

    model_config = CAMEL_CONFIG

    id: int
    description: str

    @classmethod
    def from_entity(cls, order: Order) -> CustomerOrderDTO:
        return cls(id=order.id, description=order.description)


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer API responses."""

    model_config = CAMEL_CONFIG

    id: int
    name: str
    orders: List[CustomerOrderDTO] = []

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer model instance.

        Uses ``customer.orders.all()`` so a ``prefetch_related("orders")``
        done by the repository is honoured.
        """
        return cls(
            id=customer.id,
            name=customer.name,
            orders=[CustomerOrderDTO.from_entity(o) for o in customer.orders.all()],
        )
