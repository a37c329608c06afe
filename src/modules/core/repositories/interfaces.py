"""Generic repository interfaces (Dependency Inversion Principle).

Provides ``IReadRepository[T]`` and ``IRepository[T]``, the base
abstract classes that all domain-specific repository interfaces extend.
Service-layer code depends on these abstractions, never on Django ORM
directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class IReadRepository(ABC, Generic[T]):
    """Base generic read contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Order``).
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity in store order."""


class IRepository(IReadRepository[T]):
    """Read contract plus single-entity persistence."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""


class IBulkLookupRepository(IRepository[T]):
    """Repository that can resolve a set of ids in one round-trip."""

    @abstractmethod
    def get_by_ids(self, ids: Iterable[int]) -> List[T]:
        """Return the entities whose id is in ``ids``; misses are skipped."""
