"""Product DRF serializers for request validation.

The serializer operates at the Interface layer (API Views) and only
validates input; responses are built from ``ProductOutputDTO``.
Business logic lives in the Service Layer, which receives Pydantic
DTOs from ``dtos.py``.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.core.constants import MAX_INTEGER


class ProductInputSerializer(serializers.Serializer):
    """Validates product payloads for POST and (partial) PUT."""

    name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            "required": "Product name is required.",
            "blank": "Product name is required.",
            "min_length": "Name must be between 2 and 100 characters.",
            "max_length": "Name must be between 2 and 100 characters.",
        },
    )
    description = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"max_length": "Description cannot exceed 1000 characters."},
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.00"),
        error_messages={
            "required": "Price is required.",
            "min_value": "Price must be greater than or equal to 0.",
        },
    )
    stock = serializers.IntegerField(
        min_value=0,
        max_value=MAX_INTEGER,
        error_messages={
            "required": "Stock quantity is required.",
            "min_value": "Stock quantity must be greater than or equal to 0.",
            "max_value": f"Stock quantity must be at most {MAX_INTEGER}.",
        },
    )
