"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Reads load
the customer with ``select_related`` and the products with
``prefetch_related`` so mapping an order never issues extra queries.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import models, transaction

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @staticmethod
    def _queryset() -> models.QuerySet[Order]:
        return Order.objects.select_related("customer").prefetch_related("products")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Insert the order row, then link its products."""
        order = Order(description=data["description"], customer=data["customer"])
        order.save()

        products = data.get("products") or []
        if products:
            order.products.set(products)

        logger.info("order.persisted", order_id=order.id, product_count=len(products))
        return order

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Order]:
        return self._queryset().filter(id=id).first()

    def list(self) -> List[Order]:
        return list(self._queryset())
