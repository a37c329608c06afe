"""Customer service layer (Use Cases).

Orchestrates the customer use-cases, delegating persistence to the
injected ``ICustomerRepository``.  Request validation already happened
in ``CreateCustomerDTO``; a DTO reaching this layer is well-formed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.pagination import PageResult
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.core.dtos import PageRequestDTO
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer.  Duplicate names are allowed."""
        customer = self._repo.save(Customer(name=dto.name))
        logger.info("customer.created", customer_id=customer.id)
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        """Return every customer in id order."""
        return self._repo.list()

    def list_customers_paged(self, params: PageRequestDTO) -> PageResult:
        """Return one zero-based page of customers."""
        result = self._repo.list_paged(params.page, params.size)
        logger.info(
            "customer.page_listed",
            page=params.page,
            size=params.size,
            total_elements=result.total_elements,
        )
        return result

    def search_customers(self, query: str) -> List[Customer]:
        """Case-insensitive substring search on the customer name."""
        customers = self._repo.search_by_name(query)
        if not customers:
            logger.warning("customer.search_empty", query=query)
        return customers

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if customer is None:
            logger.warning("customer.not_found", customer_id=id)
            raise CustomerNotFound()
        return customer
