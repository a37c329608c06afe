"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Misses are reported as ``None`` (or an empty list); the Service Layer
decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import models, transaction

from modules.core.pagination import PageResult, paginate
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    @staticmethod
    def _queryset() -> models.QuerySet[Customer]:
        # The output DTO lists each customer's orders.
        return Customer.objects.prefetch_related("orders")

    def get_by_id(self, id: int) -> Optional[Customer]:
        return self._queryset().filter(id=id).first()

    def list(self) -> List[Customer]:
        return list(self._queryset())

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    def search_by_name(self, query: str) -> List[Customer]:
        return list(self._queryset().filter(name__icontains=query))

    def list_paged(self, page: int, size: int) -> PageResult:
        return paginate(self._queryset(), page, size)
