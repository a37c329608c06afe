"""Product DTOs for the Service Layer.

- ``CreateProductDTO``: input for product creation.
- ``ProductOutputDTO``: output, also embedded in order responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, field_validator

from modules.core.dtos import CAMEL_CONFIG, require_text

if TYPE_CHECKING:
    from modules.products.models import Product


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = CAMEL_CONFIG

    description: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("description")
    @classmethod
    def description_must_not_be_blank(cls, v: Optional[str]) -> str:
        return require_text(v, "Product description is required")


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = CAMEL_CONFIG

    id: int
    description: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        return cls(id=product.id, description=product.description)
