"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Views only parse input and shape output; every failure propagates to
``modules.core.error_handling.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.dtos import PageOutputDTO, PageRequestDTO
from modules.core.parsing import parse_body, parse_int, parse_params
from modules.customers.dtos import CreateCustomerDTO, CustomerOutputDTO, CustomerSearchDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService


def _dump(dto) -> dict:
    return dto.model_dump(mode="json", by_alias=True)


class CustomerViewSet(ViewSet):
    """ViewSet for the customer endpoints.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @extend_schema(responses=CustomerOutputDTO)
    def list(self, request: Request) -> Response:
        """GET /customer/list"""
        customers = self._service.list_customers()
        return Response([_dump(CustomerOutputDTO.from_entity(c)) for c in customers])

    @extend_schema(
        parameters=[
            OpenApiParameter("page", int, description="Zero-based page index."),
            OpenApiParameter("size", int, description="Rows per page."),
        ],
    )
    def paged(self, request: Request) -> Response:
        """GET /customer/list/paged?page=&size="""
        raw = {}
        page = parse_int(request.query_params.get("page"), "page")
        size = parse_int(request.query_params.get("size"), "size")
        if page is not None:
            raw["page"] = page
        if size is not None:
            raw["size"] = size
        params = parse_params(PageRequestDTO, raw)

        result = self._service.list_customers_paged(params)
        page_dto = PageOutputDTO[CustomerOutputDTO].from_page(
            result, CustomerOutputDTO.from_entity
        )
        return Response(_dump(page_dto))

    @extend_schema(
        parameters=[OpenApiParameter("query", str, required=True)],
        responses=CustomerOutputDTO,
    )
    def search(self, request: Request) -> Response:
        """GET /customer/search?query="""
        params = parse_params(CustomerSearchDTO, request.query_params.dict())
        customers = self._service.search_customers(params.query)
        return Response([_dump(CustomerOutputDTO.from_entity(c)) for c in customers])

    @extend_schema(responses=CustomerOutputDTO)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /customer/find/{id}"""
        customer = self._service.get_customer(parse_int(pk, "id"))
        return Response(_dump(CustomerOutputDTO.from_entity(customer)))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @extend_schema(request=CreateCustomerDTO, responses={201: CustomerOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /customer/create"""
        dto = parse_body(CreateCustomerDTO, request.data)
        customer = self._service.create_customer(dto)
        return Response(
            _dump(CustomerOutputDTO.from_entity(customer)),
            status=status.HTTP_201_CREATED,
        )
