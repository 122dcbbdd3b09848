"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.exceptions.api_exception_handler`` translates them into
HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import BusinessRuleViolation, ResourceNotFound


class ProductNotFound(ResourceNotFound):
    """The requested (or referenced) product does not exist."""

    def __init__(self, product_id) -> None:
        super().__init__("Product", "id", product_id)


class ProductInUse(BusinessRuleViolation):
    """The product is still referenced by order items and cannot be deleted."""
