"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.  Failures
propagate to ``modules.core.error_handling.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.parsing import parse_body, parse_int
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateOrderDTO, OrderOutputDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


def _to_representation(order) -> dict:
    return OrderOutputDTO.from_entity(order).model_dump(mode="json", by_alias=True)


class OrderViewSet(ViewSet):
    """ViewSet for the order endpoints (list, find, create)."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    @extend_schema(responses=OrderOutputDTO)
    def list(self, request: Request) -> Response:
        """GET /order/list"""
        return Response([_to_representation(o) for o in self._service.list_orders()])

    @extend_schema(responses=OrderOutputDTO)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /order/find/{id}"""
        order = self._service.get_order(parse_int(pk, "id"))
        return Response(_to_representation(order))

    @extend_schema(request=CreateOrderDTO, responses={201: OrderOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /order/create"""
        dto = parse_body(CreateOrderDTO, request.data)
        order = self._service.create_order(dto)
        return Response(_to_representation(order), status=status.HTTP_201_CREATED)
