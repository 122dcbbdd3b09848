"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``Order``).
    """

    @abstractmethod
    def get_by_id(self, id: int | str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity."""

    @abstractmethod
    def exists(self, id: int | str) -> bool:
        """Return ``True`` when an entity with this primary key exists."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: int | str) -> bool:
        """Remove an entity by ID."""
