"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: a line item, either nested in an order
  creation request or created standalone (then ``order_id`` is set).
- ``UpdateOrderItemDTO``: partial order item update.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``UpdateOrderDTO``: partial order header update (items untouched).
- ``OrderItemOutputDTO`` / ``OrderOutputDTO``: API responses.

The emptiness of ``order_items`` is deliberately *not* validated here:
it is a business rule reported by ``OrderService.create_order``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import OrderStatus


def _non_negative(v: Optional[Decimal], label: str) -> Optional[Decimal]:
    if v is not None and v < 0:
        raise ValueError(f"{label} must be greater than or equal to 0.00.")
    return v


# ---------------------------------------------------------------------------
# Order item DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order line.

    ``unit_price`` and ``subtotal`` are taken as supplied by the client.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    order_id: Optional[int] = None

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    @field_validator("unit_price")
    @classmethod
    def unit_price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Unit price must be greater than 0.00.")
        return v

    @field_validator("subtotal")
    @classmethod
    def subtotal_must_not_be_negative(cls, v: Decimal) -> Decimal:
        return _non_negative(v, "Subtotal")


class UpdateOrderItemDTO(BaseModel):
    """Immutable DTO for order item updates.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    order_id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: Optional[int] = None
    unit_price: Optional[Decimal] = None
    subtotal: Optional[Decimal] = None

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    @field_validator("unit_price")
    @classmethod
    def unit_price_must_be_positive(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v <= 0:
            raise ValueError("Unit price must be greater than 0.00.")
        return v

    @field_validator("subtotal")
    @classmethod
    def subtotal_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _non_negative(v, "Subtotal")


# ---------------------------------------------------------------------------
# Order DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests."""

    model_config = ConfigDict(frozen=True)

    customer_name: str
    customer_email: str
    shipping_address: str
    total_amount: Decimal
    status: OrderStatus
    order_items: Optional[List[CreateOrderItemDTO]] = None

    @field_validator("total_amount")
    @classmethod
    def total_must_not_be_negative(cls, v: Decimal) -> Decimal:
        return _non_negative(v, "Total amount")


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order header updates.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    shipping_address: Optional[str] = None
    total_amount: Optional[Decimal] = None
    status: Optional[OrderStatus] = None

    @field_validator("total_amount")
    @classmethod
    def total_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _non_negative(v, "Total amount")


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    """Immutable DTO for order item API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    order_id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    created_at: datetime
    updated_at: datetime


class OrderOutputDTO(BaseModel):
    """Immutable DTO for order API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    customer_name: str
    customer_email: str
    shipping_address: str
    total_amount: Decimal
    status: OrderStatus
    order_items: List[OrderItemOutputDTO]
    created_at: datetime
    updated_at: datetime
