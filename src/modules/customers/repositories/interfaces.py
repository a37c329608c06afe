"""Customer repository interface.

Extends ``IRepository[Customer]`` with the name search and the paged
listing used by the customer read endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.pagination import PageResult
from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def search_by_name(self, query: str) -> List[Customer]:
        """Customers whose name contains ``query``, ignoring case."""

    @abstractmethod
    def list_paged(self, page: int, size: int) -> PageResult:
        """Zero-based page of customers in id order."""
