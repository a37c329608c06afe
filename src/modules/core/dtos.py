"""Shared DTOs for the Service Layer.

- ``CAMEL_CONFIG``: model config used by every wire-facing DTO
  (immutable, camelCase aliases, snake_case attribute names).
- ``EntityId``: a strict signed 64-bit id as accepted in request bodies.
- ``require_text``: shared non-blank check for required text fields.
- ``PageRequestDTO``: zero-based paging parameters.
- ``PageOutputDTO``: page wrapper returned by paged listings.
"""

from __future__ import annotations

from typing import Annotated, Callable, Generic, List, Optional, TypeVar

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from modules.core.pagination import PageResult

CAMEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

# Range of the BIGINT primary key columns
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1

# Booleans and numeric strings are rejected rather than coerced.
EntityId = Annotated[StrictInt, Field(ge=BIGINT_MIN, le=BIGINT_MAX)]

T = TypeVar("T")


def require_text(value: Optional[str], message: str) -> str:
    """Reject ``None`` and strings that are empty once trimmed."""
    if value is None or not value.strip():
        raise PydanticCustomError("blank", message)
    return value


class PageRequestDTO(BaseModel):
    """Immutable paging request.

    ``page`` is zero-based; ``size`` defaults to ``DEFAULT_PAGE_SIZE``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE, ge=1)


class PageOutputDTO(BaseModel, Generic[T]):
    """Immutable page wrapper for API responses."""

    model_config = CAMEL_CONFIG

    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def from_page(cls, result: PageResult, mapper: Callable[..., T]) -> PageOutputDTO[T]:
        """Build a page DTO, converting each row with ``mapper``."""
        return cls(
            content=[mapper(item) for item in result.items],
            page=result.page,
            size=result.size,
            total_elements=result.total_elements,
            total_pages=result.total_pages,
        )
