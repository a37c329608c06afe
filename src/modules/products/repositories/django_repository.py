"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(id=id).first()

    def get_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Fetch the products in ``ids`` with a single ``IN`` query.

        Unknown ids are simply absent from the result.
        """
        return list(Product.objects.filter(id__in=set(ids)))

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        is_new = entity._state.adding
        entity.save()
        logger.info("product.saved", product_id=entity.id, is_new=is_new)
        return entity
