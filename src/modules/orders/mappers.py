"""Order / OrderItem <-> DTO mapping.

Pure functions with no I/O beyond reading already-loaded relations.
Every mapper is null-safe: ``None`` in, ``None`` out.  Mapping a DTO to
a new entity never copies its ``id``; the store assigns one on save.

References from an item to its Order and Product are non-owning: when
the caller supplies the resolved instance it is bound, otherwise only
the id is recorded and the row is looked up on demand.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Union

from modules.orders.dtos import (
    CreateOrderDTO,
    CreateOrderItemDTO,
    OrderItemOutputDTO,
    OrderOutputDTO,
    UpdateOrderDTO,
    UpdateOrderItemDTO,
)
from modules.orders.models import Order, OrderItem
from modules.products.models import Product

OrderInput = Union[CreateOrderDTO, OrderOutputDTO]
OrderItemInput = Union[CreateOrderItemDTO, OrderItemOutputDTO]

ORDER_MERGEABLE_FIELDS = (
    "customer_name",
    "customer_email",
    "shipping_address",
    "total_amount",
    "status",
)
ORDER_ITEM_MERGEABLE_FIELDS = ("quantity", "unit_price", "subtotal")


# ---------------------------------------------------------------------------
# OrderItem
# ---------------------------------------------------------------------------


def order_item_to_dto(item: Optional[OrderItem]) -> Optional[OrderItemOutputDTO]:
    if item is None:
        return None
    return OrderItemOutputDTO(
        id=item.id,
        order_id=item.order_id,
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        subtotal=item.subtotal,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def order_item_to_entity(
    dto: Optional[OrderItemInput],
    order: Optional[Order] = None,
    product: Optional[Product] = None,
) -> Optional[OrderItem]:
    if dto is None:
        return None
    item = OrderItem(
        quantity=dto.quantity,
        unit_price=dto.unit_price,
        subtotal=dto.subtotal,
    )
    if order is not None:
        item.order = order
    elif dto.order_id is not None:
        item.order_id = dto.order_id
    if product is not None:
        item.product = product
    else:
        item.product_id = dto.product_id
    return item


def update_order_item_entity(
    dto: Optional[UpdateOrderItemDTO],
    item: Optional[OrderItem],
    order: Optional[Order] = None,
    product: Optional[Product] = None,
) -> None:
    """Merge non-null fields of *dto* (and any resolved references) into *item*."""
    if dto is None or item is None:
        return
    if order is not None:
        item.order = order
    if product is not None:
        item.product = product
    for field in ORDER_ITEM_MERGEABLE_FIELDS:
        value = getattr(dto, field)
        if value is not None:
            setattr(item, field, value)


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------


def order_to_dto(order: Optional[Order]) -> Optional[OrderOutputDTO]:
    """Map a persisted order, including its items in insertion order."""
    if order is None:
        return None
    return OrderOutputDTO(
        id=order.id,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        shipping_address=order.shipping_address,
        total_amount=order.total_amount,
        status=order.status,
        order_items=[order_item_to_dto(item) for item in order.order_items.all()],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def order_to_entity(dto: Optional[OrderInput]) -> Optional[Order]:
    """Build the unsaved order header; items are mapped by ``order_items_to_entities``."""
    if dto is None:
        return None
    return Order(
        customer_name=dto.customer_name,
        customer_email=dto.customer_email,
        shipping_address=dto.shipping_address,
        total_amount=dto.total_amount,
        status=dto.status,
    )


def order_items_to_entities(
    dto: Optional[OrderInput],
    order: Optional[Order] = None,
    products: Optional[Mapping[int, Product]] = None,
) -> List[OrderItem]:
    """Map the nested items of *dto*, preserving their order."""
    if dto is None or not dto.order_items:
        return []
    products = products or {}
    return [
        order_item_to_entity(item_dto, order=order, product=products.get(item_dto.product_id))
        for item_dto in dto.order_items
    ]


def update_order_entity(dto: Optional[UpdateOrderDTO], order: Optional[Order]) -> None:
    """Merge non-null header fields of *dto* into *order*; items are untouched."""
    if dto is None or order is None:
        return
    for field in ORDER_MERGEABLE_FIELDS:
        value = getattr(dto, field)
        if value is not None:
            setattr(order, field, value)
