"""Product API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.parsing import parse_body, parse_int
from modules.products.dtos import CreateProductDTO, ProductOutputDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for the product endpoints (list, find, create)."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @extend_schema(responses=ProductOutputDTO)
    def list(self, request: Request) -> Response:
        """GET /products/list"""
        products = self._service.list_products()
        return Response(
            [ProductOutputDTO.from_entity(p).model_dump(mode="json", by_alias=True) for p in products]
        )

    @extend_schema(responses=ProductOutputDTO)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /products/find/{id}"""
        product = self._service.get_product(parse_int(pk, "id"))
        return Response(ProductOutputDTO.from_entity(product).model_dump(mode="json", by_alias=True))

    @extend_schema(request=CreateProductDTO, responses={201: ProductOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /products/create"""
        dto = parse_body(CreateProductDTO, request.data)
        product = self._service.create_product(dto)
        return Response(
            ProductOutputDTO.from_entity(product).model_dump(mode="json", by_alias=True),
            status=status.HTTP_201_CREATED,
        )
