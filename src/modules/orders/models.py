"""Order and OrderItem models.

- ``Order`` owns its items: deleting an order deletes every item
  (``on_delete=CASCADE`` plus an explicit delete in the repository).
- ``OrderItem.product`` uses PROTECT: a product with order history
  cannot be removed out from under its items.
- ``total_amount``, ``unit_price`` and ``subtotal`` are stored exactly as
  supplied by the client; the server does not recompute them.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus


class Order(BaseModel):
    """Order aggregate root."""

    customer_name: models.CharField = models.CharField(
        max_length=255, validators=[MinLengthValidator(2)]
    )
    customer_email: models.EmailField = models.EmailField(max_length=255)
    shipping_address: models.CharField = models.CharField(
        max_length=500, validators=[MinLengthValidator(5)]
    )
    total_amount: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )

    class Meta:
        db_table = "orders"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total_amount__gte=0),
                name="orders_total_amount_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product.

    Items are ordered by primary key, which preserves the order in which
    they were supplied at creation time.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="order_items",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    unit_price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
    )
    subtotal: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
    )

    class Meta:
        db_table = "order_items"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(unit_price__gt=0),
                name="order_items_unit_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(subtotal__gte=0),
                name="order_items_subtotal_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} (${self.subtotal})"
