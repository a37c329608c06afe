"""Zero-based page slicing over Django querysets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, TypeVar

from django.core.paginator import Paginator
from django.db import models

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One slice of a listing plus the totals needed to walk the rest."""

    items: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int


def paginate(queryset: models.QuerySet, page: int, size: int) -> PageResult:
    """Return page ``page`` (zero-based) of ``queryset`` with ``size`` rows.

    Pages past the end are empty rather than an error, and an empty
    queryset reports zero pages.
    """
    paginator = Paginator(queryset, size)
    total_elements = paginator.count
    total_pages = paginator.num_pages if total_elements else 0

    if page < total_pages:
        items = list(paginator.page(page + 1).object_list)
    else:
        items = []

    return PageResult(
        items=items,
        page=page,
        size=size,
        total_elements=total_elements,
        total_pages=total_pages,
    )
