"""Product repository interface.

Products are resolved in bulk when an order references them, so the
contract is ``IBulkLookupRepository[Product]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IBulkLookupRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IBulkLookupRepository["Product"]):
    """Repository contract for the Product aggregate."""
