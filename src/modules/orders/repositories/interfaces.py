"""Order repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IReadRepository["Order"]):
    """Repository contract for the Order aggregate.

    Orders are only ever written through ``create``, which persists the
    product links in the same transaction.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Persist a new order together with its product links.

        ``data`` keys: ``description``, ``customer`` and ``products``
        (already-resolved model instances).
        """
