"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductOutputDTO``: output with all product fields.

Conversions to and from the ``Product`` model live in ``mappers.py``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``price`` is a non-negative Decimal.
    - ``stock`` is non-negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    stock: int
    description: Optional[str] = None

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price must be greater than or equal to 0.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity must be greater than or equal to 0.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v < 0:
            raise ValueError("Price must be greater than or equal to 0.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("Stock quantity must be greater than or equal to 0.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: Optional[str]
    price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime
