"""Order and OrderItem service layer (Use Cases).

``OrderService.create_order`` is the order-creation workflow: it
validates every line item against current stock, decrements inventory
and persists the Order + OrderItems aggregate inside a single
``transaction.atomic`` block.  Any failure rolls the whole unit back.

Business rules enforced:
- An order must contain at least one item.
- Every referenced product must exist.
- Stock must cover every requested quantity; product rows are locked
  (SELECT FOR UPDATE) between the check and the decrement.
- Line items are processed in the order supplied; the first failing
  item determines the reported error.
- ``total_amount``, ``unit_price`` and ``subtotal`` are trusted as
  supplied and never recomputed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

import structlog

from django.db import transaction

from modules.orders import mappers
from modules.orders.constants import EMPTY_ORDER_MESSAGE
from modules.orders.exceptions import (
    EmptyOrder,
    InsufficientStock,
    OrderItemNotFound,
    OrderNotFound,
    ProductNotFound,
)

if TYPE_CHECKING:
    from modules.orders.dtos import (
        CreateOrderDTO,
        CreateOrderItemDTO,
        UpdateOrderDTO,
        UpdateOrderItemDTO,
    )
    from modules.orders.models import Order, OrderItem
    from modules.orders.repositories.interfaces import (
        IOrderItemRepository,
        IOrderRepository,
    )
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order with atomic stock reservation.

        Steps:
        1. Reject an empty or absent item list.
        2. Lock every referenced product row (primary-key order).
        3. Walk the items in caller order: product must exist and have
           enough remaining stock; reserve the quantity in memory.
        4. Persist the decremented stock.
        5. Persist the order header, bind and persist its items, and
           save the order again to finalise the association.

        Raises:
            EmptyOrder: no line items were supplied.
            ProductNotFound: a referenced product does not exist.
            InsufficientStock: a product cannot cover the requested quantity.
        """
        line_items = list(dto.order_items or [])
        if not line_items:
            logger.warning("order.rejected_empty")
            raise EmptyOrder(EMPTY_ORDER_MESSAGE)

        log = logger.bind(item_count=len(line_items))
        log.info("order.creation_started")

        products = self._product_repo.get_many_for_update(
            item.product_id for item in line_items
        )
        reserved = self._reserve_stock(line_items, products)

        for product in reserved:
            self._product_repo.save_stock(product)
            log.info(
                "order.stock_reserved",
                product_id=product.id,
                remaining=product.stock,
            )

        order = self._order_repo.save(mappers.order_to_entity(dto))
        items = mappers.order_items_to_entities(dto, order=order, products=products)
        self._order_repo.replace_items(order, items)
        order = self._order_repo.save(order)

        log.info("order.created", order_id=order.id)
        return self._order_repo.get_by_id(order.id) or order

    @transaction.atomic
    def update_order(self, order_id: int | str, dto: UpdateOrderDTO) -> Order:
        """Merge header fields; items and stock are left untouched.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(order_id)

        mappers.update_order_entity(dto, order)
        order = self._order_repo.save(order)
        logger.info("order.updated", order_id=order.id)
        return order

    @transaction.atomic
    def delete_order(self, order_id: int | str) -> None:
        """Delete an order together with all of its items.

        Raises:
            OrderNotFound: order does not exist.
        """
        if not self._order_repo.exists(order_id):
            raise OrderNotFound(order_id)
        self._order_repo.delete(order_id)
        logger.info("order.deleted", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int | str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(order_id)
        return order

    def list_orders(self) -> List[Order]:
        orders = self._order_repo.list()
        logger.info("order.listed", count=len(orders))
        return orders

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _reserve_stock(
        line_items: List[CreateOrderItemDTO],
        products: Dict[int, Product],
    ) -> List[Product]:
        """Check and decrement stock in memory, in caller order.

        Items naming the same product draw on the running remainder.
        Returns the touched products, each once, in first-seen order.
        """
        touched: Dict[int, Product] = {}
        for item in line_items:
            product = products.get(item.product_id)
            if product is None:
                logger.warning("order.product_missing", product_id=item.product_id)
                raise ProductNotFound(item.product_id)
            if not product.has_stock_for(item.quantity):
                logger.warning(
                    "order.insufficient_stock",
                    product_id=product.id,
                    available=product.stock,
                    requested=item.quantity,
                )
                raise InsufficientStock(product.name, product.stock, item.quantity)
            product.stock -= item.quantity
            touched.setdefault(product.id, product)
        return list(touched.values())


class OrderItemService:
    """Application service for standalone OrderItem use-cases.

    Items created or updated here do not move stock; only the
    order-creation workflow reserves inventory.
    """

    def __init__(
        self,
        order_item_repository: IOrderItemRepository,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._item_repo = order_item_repository
        self._order_repo = order_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order_item(self, dto: CreateOrderItemDTO) -> OrderItem:
        """Create an item bound to an existing order and product.

        Raises:
            OrderNotFound: the parent order does not exist.
            ProductNotFound: the product does not exist.
        """
        log = logger.bind(order_id=dto.order_id, product_id=dto.product_id)
        order = self._resolve_order(dto.order_id)
        product = self._resolve_product(dto.product_id)

        item = mappers.order_item_to_entity(dto, order=order, product=product)
        item = self._item_repo.save(item)
        log.info("order_item.created", order_item_id=item.id)
        return item

    @transaction.atomic
    def update_order_item(self, item_id: int | str, dto: UpdateOrderItemDTO) -> OrderItem:
        """Merge supplied fields; re-bind order/product when their ids are given.

        Raises:
            OrderItemNotFound: the item does not exist.
            OrderNotFound: a supplied order id does not exist.
            ProductNotFound: a supplied product id does not exist.
        """
        item = self._item_repo.get_by_id(item_id)
        if not item:
            raise OrderItemNotFound(item_id)

        order = self._resolve_order(dto.order_id) if dto.order_id is not None else None
        product = (
            self._resolve_product(dto.product_id) if dto.product_id is not None else None
        )

        mappers.update_order_item_entity(dto, item, order=order, product=product)
        item = self._item_repo.save(item)
        logger.info("order_item.updated", order_item_id=item.id)
        return item

    @transaction.atomic
    def delete_order_item(self, item_id: int | str) -> None:
        """Delete a single item.

        Raises:
            OrderItemNotFound: the item does not exist.
        """
        if not self._item_repo.exists(item_id):
            raise OrderItemNotFound(item_id)
        self._item_repo.delete(item_id)
        logger.info("order_item.deleted", order_item_id=item_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order_item(self, item_id: int | str) -> OrderItem:
        item = self._item_repo.get_by_id(item_id)
        if not item:
            raise OrderItemNotFound(item_id)
        return item

    def list_order_items(self) -> List[OrderItem]:
        return self._item_repo.list()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_order(self, order_id) -> Order:
        order = self._order_repo.get_by_id(order_id) if order_id is not None else None
        if not order:
            raise OrderNotFound(order_id)
        return order

    def _resolve_product(self, product_id) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return product
