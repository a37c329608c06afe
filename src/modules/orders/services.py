"""Order service layer (Use Cases).

Orchestrates order creation and lookup.  Creation resolves references
in a fixed order, and each step may stop the request before anything
is written:

1. The customer must exist (``InvalidCustomerReference`` otherwise).
2. Products are resolved in one bulk lookup; unknown ids are dropped.
3. The order and its product links are persisted atomically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.orders.exceptions import InvalidCustomerReference, OrderNotFound

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order for an existing customer.

        Raises:
            InvalidCustomerReference: ``dto.customer_id`` does not resolve.
        """
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started")

        customer = self._customer_repo.get_by_id(dto.customer_id)
        if customer is None:
            log.warning("order.invalid_customer")
            raise InvalidCustomerReference()

        products = []
        if dto.product_ids:
            products = self._product_repo.get_by_ids(dto.product_ids)
            dropped = set(dto.product_ids) - {p.id for p in products}
            if dropped:
                log.info("order.products_dropped", product_ids=sorted(dropped))

        order = self._order_repo.create(
            {
                "description": dto.description,
                "customer": customer,
                "products": products,
            }
        )
        log.info("order.created", order_id=order.id, product_count=len(products))

        # Re-fetch with relations loaded for output
        return self._order_repo.get_by_id(order.id) or order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> List[Order]:
        """Return every order in id order."""
        return self._order_repo.list()

    def get_order(self, id: int) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(id)
        if order is None:
            logger.warning("order.not_found", order_id=id)
            raise OrderNotFound()
        return order
