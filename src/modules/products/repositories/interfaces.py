"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by the
order-creation workflow (locked stock reads) and by product deletion
(reference check).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_many_for_update(self, ids: Iterable[int]) -> Dict[int, "Product"]:
        """Retrieve products with a row-level lock (SELECT FOR UPDATE).

        Returns a mapping ``{id: product}``; missing ids are simply
        absent.  Must be called inside a transaction.
        """

    @abstractmethod
    def save_stock(self, product: "Product") -> "Product":
        """Persist only the ``stock`` column of *product*."""

    @abstractmethod
    def is_referenced(self, id: int | str) -> bool:
        """Return ``True`` if any order item references the product."""
