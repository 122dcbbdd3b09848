"""Unit tests for Order DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, UpdateOrderDTO

pytestmark = pytest.mark.unit


def _item(**overrides):
    data = {
        "product_id": 1,
        "quantity": 1,
        "unit_price": Decimal("10.00"),
        "subtotal": Decimal("10.00"),
    }
    data.update(overrides)
    return data


class TestCreateOrderItemDTO:
    def test_valid(self):
        dto = CreateOrderItemDTO(**_item())
        assert dto.order_id is None

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Quantity"):
            CreateOrderItemDTO(**_item(quantity=0))

    def test_zero_unit_price_rejected(self):
        with pytest.raises(ValidationError, match="Unit price"):
            CreateOrderItemDTO(**_item(unit_price=Decimal("0")))

    def test_zero_subtotal_accepted(self):
        assert CreateOrderItemDTO(**_item(subtotal=Decimal("0"))).subtotal == Decimal("0")


class TestCreateOrderDTO:
    def test_items_optional(self):
        dto = CreateOrderDTO(
            customer_name="Jane",
            customer_email="jane@example.com",
            shipping_address="1 Road St",
            total_amount=Decimal("0.00"),
            status="PENDING",
        )
        assert dto.order_items is None
        assert dto.status is OrderStatus.PENDING

    def test_nested_items_parsed(self):
        dto = CreateOrderDTO(
            customer_name="Jane",
            customer_email="jane@example.com",
            shipping_address="1 Road St",
            total_amount=Decimal("10.00"),
            status=OrderStatus.PENDING,
            order_items=[_item()],
        )
        assert isinstance(dto.order_items[0], CreateOrderItemDTO)

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError, match="Total amount"):
            UpdateOrderDTO(total_amount=Decimal("-1"))
