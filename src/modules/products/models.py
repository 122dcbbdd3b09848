"""Product model with stock control.

Constraints mirrored at the database level:
- ``price`` is a non-negative decimal (10, 2).
- ``stock`` is a non-negative integer; the order-creation workflow
  decrements it when an order is placed.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog entry that order items reference by id."""

    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    description = models.TextField(max_length=1000, blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    stock = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def __str__(self) -> str:
        return f"{self.name} (stock: {self.stock})"
