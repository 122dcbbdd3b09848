"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Updates are partial merges: only supplied (non-null) fields change.
- A product referenced by order items cannot be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products import mappers
from modules.products.exceptions import ProductInUse, ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = self._repo.save(mappers.to_entity(dto))
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int | str, dto: UpdateProductDTO) -> Product:
        """Merge the supplied fields into an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)

        mappers.update_entity(dto, product)
        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def delete_product(self, id: int | str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if order items still reference it.
        """
        if not self._repo.exists(id):
            raise ProductNotFound(id)
        if self._repo.is_referenced(id):
            logger.warning("product.delete_refused", product_id=id)
            raise ProductInUse(
                f"Product with id '{id}' is referenced by existing order items "
                "and cannot be deleted."
            )
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        products = self._repo.list()
        logger.info("product.listed", count=len(products))
        return products

    def get_product(self, id: int | str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)
        return product
