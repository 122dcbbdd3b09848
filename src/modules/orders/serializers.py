"""Order DRF serializers for request validation.

The serializers operate at the Interface layer (API Views) and only
validate input; responses are built from the output DTOs.  Business
logic lives in the Service Layer, which receives Pydantic DTOs from
``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.core.constants import MAX_BIG_INTEGER, MAX_INTEGER
from modules.orders.constants import OrderStatus


def _money(**kwargs) -> serializers.DecimalField:
    return serializers.DecimalField(max_digits=10, decimal_places=2, **kwargs)


class OrderItemFieldsMixin(serializers.Serializer):
    """Field constraints shared by nested and standalone item payloads."""

    product_id = serializers.IntegerField(
        max_value=MAX_BIG_INTEGER,
        error_messages={
            "required": "Product ID is required.",
            "max_value": "Product ID is out of range.",
        },
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=MAX_INTEGER,
        error_messages={
            "required": "Quantity is required.",
            "min_value": "Quantity must be at least 1.",
            "max_value": f"Quantity must be at most {MAX_INTEGER}.",
        },
    )
    unit_price = _money(
        error_messages={"required": "Unit price is required."},
    )
    subtotal = _money(
        min_value=Decimal("0.00"),
        error_messages={
            "required": "Subtotal is required.",
            "min_value": "Subtotal must be greater than or equal to 0.00.",
        },
    )

    def validate_unit_price(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Unit price must be greater than 0.00.")
        return value


# ---------------------------------------------------------------------------
# Order items
# ---------------------------------------------------------------------------


class OrderLineSerializer(OrderItemFieldsMixin):
    """A line item nested in an order creation request."""


class OrderItemInputSerializer(OrderItemFieldsMixin):
    """Standalone order item payload for POST and (partial) PUT."""

    order_id = serializers.IntegerField(
        max_value=MAX_BIG_INTEGER,
        error_messages={
            "required": "Order ID is required.",
            "max_value": "Order ID is out of range.",
        },
    )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class OrderInputSerializer(serializers.Serializer):
    """Order payload for POST and (partial) PUT.

    ``order_items`` may be absent or empty here: the order-creation
    workflow reports that as a business-rule violation.  PUT ignores it.
    """

    customer_name = serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={
            "required": "Customer name is required.",
            "blank": "Customer name is required.",
            "min_length": "Customer name must be between 2 and 255 characters.",
            "max_length": "Customer name must be between 2 and 255 characters.",
        },
    )
    customer_email = serializers.EmailField(
        max_length=255,
        error_messages={
            "required": "Customer email is required.",
            "blank": "Customer email is required.",
            "invalid": "Email must be valid.",
        },
    )
    shipping_address = serializers.CharField(
        min_length=5,
        max_length=500,
        error_messages={
            "required": "Shipping address is required.",
            "blank": "Shipping address is required.",
            "min_length": "Shipping address must be between 5 and 500 characters.",
            "max_length": "Shipping address must be between 5 and 500 characters.",
        },
    )
    total_amount = _money(
        min_value=Decimal("0.00"),
        error_messages={
            "required": "Total amount is required.",
            "min_value": "Total amount must be greater than or equal to 0.00.",
        },
    )
    status = serializers.ChoiceField(
        choices=OrderStatus.choices,
        error_messages={"required": "Order status is required."},
    )
    order_items = OrderLineSerializer(many=True, required=False, allow_null=True)
