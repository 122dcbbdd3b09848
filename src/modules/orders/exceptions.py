"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.exceptions.api_exception_handler`` translates them into
HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import BusinessRuleViolation, ResourceNotFound
from modules.products.exceptions import ProductNotFound

__all__ = [
    "EmptyOrder",
    "InsufficientStock",
    "OrderItemNotFound",
    "OrderNotFound",
    "ProductNotFound",
]


class OrderNotFound(ResourceNotFound):
    """The requested (or referenced) order does not exist."""

    def __init__(self, order_id) -> None:
        super().__init__("Order", "id", order_id)


class OrderItemNotFound(ResourceNotFound):
    """The requested order item does not exist."""

    def __init__(self, order_item_id) -> None:
        super().__init__("OrderItem", "id", order_item_id)


class EmptyOrder(BusinessRuleViolation):
    """An order was submitted without any line items."""


class InsufficientStock(BusinessRuleViolation):
    """Not enough stock to fulfil a line item."""

    def __init__(self, product_name: str, available: int, requested: int) -> None:
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for product '{product_name}'. "
            f"Available: {available}, Requested: {requested}"
        )
