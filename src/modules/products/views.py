"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Validation happens in ``ProductInputSerializer``; domain exceptions
propagate to ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.products import mappers
from modules.products.dtos import CreateProductDTO, ProductOutputDTO, UpdateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductInputSerializer
from modules.products.services import ProductService


@extend_schema(tags=["Product"])
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response([mappers.to_dto(p).model_dump(mode="json") for p in products])

    @extend_schema(responses=ProductOutputDTO)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(pk)
        return Response(mappers.to_dto(product).model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductInputSerializer, responses={201: ProductOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        serializer = ProductInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._service.create_product(
            CreateProductDTO(**serializer.validated_data)
        )

        location = reverse("product-detail", args=[product.id], request=request)
        return Response(
            mappers.to_dto(product).model_dump(mode="json"),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(request=ProductInputSerializer, responses=ProductOutputDTO)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}

        Partial merge: omitted or null fields keep their stored value.
        """
        serializer = ProductInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = self._service.update_product(
            pk, UpdateProductDTO(**serializer.validated_data)
        )
        return Response(mappers.to_dto(product).model_dump(mode="json"))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
