"""Order and OrderItem repository interfaces.

The Service Layer depends exclusively on these contracts (DIP).
The Order aggregate includes its OrderItem children: replacing the
item collection and deleting the order must be atomic.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def get_by_id(self, id: int | str) -> Optional[Order]:
        """Retrieve an order with its items prefetched."""

    @abstractmethod
    def replace_items(self, order: Order, items: Sequence[OrderItem]) -> List[OrderItem]:
        """Make *items* the order's complete item collection.

        Unsaved items are inserted; stored items missing from *items*
        are deleted (orphan removal).
        """

    @abstractmethod
    def delete(self, id: int | str) -> bool:
        """Delete the order and, explicitly, every one of its items."""


class IOrderItemRepository(IRepository["OrderItem"]):
    """Repository contract for standalone OrderItem access."""
