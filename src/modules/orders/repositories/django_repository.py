"""Django ORM implementations of the Order and OrderItem repositories.

All write operations are wrapped in ``transaction.atomic()`` so the
Order aggregate (Order + OrderItems) is persisted atomically.  Missing
or malformed IDs yield ``None`` / ``False`` rather than exceptions.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderItemRepository, IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int | str) -> Optional[Order]:
        """Retrieve an order with eager-loaded items (prevents N+1)."""
        try:
            return Order.objects.prefetch_related("order_items").filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self) -> List[Order]:
        return list(Order.objects.prefetch_related("order_items"))

    def exists(self, id: int | str) -> bool:
        try:
            return Order.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) the order header."""
        entity.save()
        return entity

    @transaction.atomic
    def replace_items(self, order: Order, items: Sequence[OrderItem]) -> List[OrderItem]:
        kept_ids = []
        for item in items:
            item.order = order
            item.save()
            kept_ids.append(item.id)

        orphans = OrderItem.objects.filter(order=order).exclude(id__in=kept_ids)
        removed, _ = orphans.delete()

        # Drop any stale prefetch cache so the collection reflects the store.
        if hasattr(order, "_prefetched_objects_cache"):
            order._prefetched_objects_cache.pop("order_items", None)

        logger.info(
            "order.items_replaced",
            order_id=order.id,
            item_count=len(kept_ids),
            orphans_removed=removed,
        )
        return list(items)

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Delete an order and its items.

        Returns ``False`` if no order exists with the given ID.
        """
        order = self.get_by_id(id)
        if not order:
            return False
        OrderItem.objects.filter(order=order).delete()
        order.delete()
        return True


class OrderItemDjangoRepository(IOrderItemRepository):
    """Concrete OrderItem repository backed by Django ORM."""

    def get_by_id(self, id: int | str) -> Optional[OrderItem]:
        try:
            return OrderItem.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self) -> List[OrderItem]:
        return list(OrderItem.objects.all())

    def exists(self, id: int | str) -> bool:
        try:
            return OrderItem.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: OrderItem) -> OrderItem:
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        item = self.get_by_id(id)
        if not item:
            return False
        item.delete()
        return True
