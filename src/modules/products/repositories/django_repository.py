"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def exists(self, id: int | str) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        return True

    def get_many_for_update(self, ids: Iterable[int]) -> Dict[int, Product]:
        """Lock the requested product rows in primary-key order.

        A single ordered query keeps lock acquisition deterministic, so
        two orders touching the same products cannot deadlock.
        """
        products = Product.objects.select_for_update().filter(id__in=set(ids)).order_by("id")
        return {product.id: product for product in products}

    def save_stock(self, product: Product) -> Product:
        product.save(update_fields=["stock"])
        return product

    def is_referenced(self, id: int | str) -> bool:
        from modules.orders.models import OrderItem

        return OrderItem.objects.filter(product_id=id).exists()
