"""Product <-> DTO mapping.

Pure functions with no I/O.  Every mapper is null-safe: ``None`` in,
``None`` out.
"""

from __future__ import annotations

from typing import Optional, Union

from modules.products.dtos import CreateProductDTO, ProductOutputDTO, UpdateProductDTO
from modules.products.models import Product

MERGEABLE_FIELDS = ("name", "description", "price", "stock")


def to_dto(product: Optional[Product]) -> Optional[ProductOutputDTO]:
    if product is None:
        return None
    return ProductOutputDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def to_entity(
    dto: Optional[Union[CreateProductDTO, ProductOutputDTO]],
) -> Optional[Product]:
    """Build a new, unsaved ``Product``.  Any id carried by *dto* is ignored."""
    if dto is None:
        return None
    return Product(
        name=dto.name,
        description=dto.description or "",
        price=dto.price,
        stock=dto.stock,
    )


def update_entity(dto: Optional[UpdateProductDTO], product: Optional[Product]) -> None:
    """Copy every non-null field of *dto* onto *product* in place."""
    if dto is None or product is None:
        return
    for field in MERGEABLE_FIELDS:
        value = getattr(dto, field)
        if value is not None:
            setattr(product, field, value)
