"""Order and OrderItem API views.

Expose ``OrderService`` / ``OrderItemService`` via HTTP using DRF
ViewSets.  Validation happens in the input serializers; domain
exceptions propagate to ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.orders import mappers
from modules.orders.dtos import (
    CreateOrderDTO,
    CreateOrderItemDTO,
    OrderItemOutputDTO,
    OrderOutputDTO,
    UpdateOrderDTO,
    UpdateOrderItemDTO,
)
from modules.orders.repositories.django_repository import (
    OrderDjangoRepository,
    OrderItemDjangoRepository,
)
from modules.orders.serializers import OrderInputSerializer, OrderItemInputSerializer
from modules.orders.services import OrderItemService, OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


@extend_schema(tags=["Order"])
class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/orders"""
        orders = self._service.list_orders()
        return Response([mappers.order_to_dto(o).model_dump(mode="json") for o in orders])

    @extend_schema(responses=OrderOutputDTO)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/orders/{pk}"""
        order = self._service.get_order(pk)
        return Response(mappers.order_to_dto(order).model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(request=OrderInputSerializer, responses={201: OrderOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /api/orders

        Runs the order-creation workflow: stock is checked and reserved
        for every item, or nothing is persisted.
        """
        serializer = OrderInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self._service.create_order(CreateOrderDTO(**serializer.validated_data))

        location = reverse("order-detail", args=[order.id], request=request)
        return Response(
            mappers.order_to_dto(order).model_dump(mode="json"),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    # ------------------------------------------------------------------
    # Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=OrderInputSerializer, responses=OrderOutputDTO)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/orders/{pk}

        Partial merge of the header fields.  ``order_items`` is ignored:
        items are managed through /api/order-items.
        """
        serializer = OrderInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        data.pop("order_items", None)
        order = self._service.update_order(pk, UpdateOrderDTO(**data))
        return Response(mappers.order_to_dto(order).model_dump(mode="json"))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/orders/{pk}"""
        self._service.delete_order(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["OrderItem"])
class OrderItemViewSet(ViewSet):
    """ViewSet for standalone OrderItem CRUD operations."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderItemService(
            order_item_repository=OrderItemDjangoRepository(),
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/order-items"""
        items = self._service.list_order_items()
        return Response([mappers.order_item_to_dto(i).model_dump(mode="json") for i in items])

    @extend_schema(responses=OrderItemOutputDTO)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/order-items/{pk}"""
        item = self._service.get_order_item(pk)
        return Response(mappers.order_item_to_dto(item).model_dump(mode="json"))

    @extend_schema(request=OrderItemInputSerializer, responses={201: OrderItemOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /api/order-items"""
        serializer = OrderItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = self._service.create_order_item(
            CreateOrderItemDTO(**serializer.validated_data)
        )

        location = reverse("order-item-detail", args=[item.id], request=request)
        return Response(
            mappers.order_item_to_dto(item).model_dump(mode="json"),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(request=OrderItemInputSerializer, responses=OrderItemOutputDTO)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/order-items/{pk}"""
        serializer = OrderItemInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        item = self._service.update_order_item(
            pk, UpdateOrderItemDTO(**serializer.validated_data)
        )
        return Response(mappers.order_item_to_dto(item).model_dump(mode="json"))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/order-items/{pk}"""
        self._service.delete_order_item(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
