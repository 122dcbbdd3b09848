"""Integration tests for standalone OrderItem API endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem

pytestmark = pytest.mark.integration


@pytest.fixture()
def order():
    return Order.objects.create(
        customer_name="Jane Roe",
        customer_email="jane.roe@example.com",
        shipping_address="9 Elm Street",
        total_amount=Decimal("10.00"),
        status=OrderStatus.PENDING,
    )


@pytest.fixture()
def order_item(order, product_a):
    return OrderItem.objects.create(
        order=order,
        product=product_a,
        quantity=1,
        unit_price=Decimal("10.00"),
        subtotal=Decimal("10.00"),
    )


def _payload(order, product, **overrides):
    data = {
        "order_id": order.id,
        "product_id": product.id,
        "quantity": 2,
        "unit_price": "10.00",
        "subtotal": "20.00",
    }
    data.update(overrides)
    return data


class TestOrderItemCreate:
    def test_create(self, api_client, order, product_a):
        response = api_client.post("/api/order-items", _payload(order, product_a), format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["order_id"] == order.id
        assert data["product_id"] == product_a.id
        assert data["subtotal"] == "20.00"
        assert response["Location"].endswith(f"/api/order-items/{data['id']}")

    def test_create_does_not_move_stock(self, api_client, order, product_a):
        api_client.post("/api/order-items", _payload(order, product_a), format="json")
        product_a.refresh_from_db()
        assert product_a.stock == 100

    def test_unknown_order(self, api_client, order, product_a):
        response = api_client.post(
            "/api/order-items", _payload(order, product_a, order_id=999999), format="json"
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Order not found with id: '999999'"

    def test_unknown_product(self, api_client, order, product_a):
        response = api_client.post(
            "/api/order-items", _payload(order, product_a, product_id=999999), format="json"
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Product not found with id: '999999'"

    def test_zero_quantity(self, api_client, order, product_a):
        response = api_client.post(
            "/api/order-items", _payload(order, product_a, quantity=0), format="json"
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "quantity"

    def test_out_of_range_quantity(self, api_client, order, product_a):
        response = api_client.post(
            "/api/order-items", _payload(order, product_a, quantity=10**20), format="json"
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["quantity"]
        assert not OrderItem.objects.exists()

    def test_out_of_range_order_id(self, api_client, order, product_a):
        response = api_client.post(
            "/api/order-items", _payload(order, product_a, order_id=10**20), format="json"
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["order_id"]


class TestOrderItemReadUpdateDelete:
    def test_list(self, api_client, order_item):
        response = api_client.get("/api/order-items")
        assert response.status_code == 200
        assert [i["id"] for i in response.json()] == [order_item.id]

    def test_retrieve(self, api_client, order_item):
        response = api_client.get(f"/api/order-items/{order_item.id}")
        assert response.status_code == 200
        assert response.json()["quantity"] == 1

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/api/order-items/999999")
        assert response.status_code == 404
        assert response.json()["message"] == "OrderItem not found with id: '999999'"

    def test_partial_update(self, api_client, order_item):
        response = api_client.put(
            f"/api/order-items/{order_item.id}", {"quantity": 3}, format="json"
        )

        assert response.status_code == 200
        order_item.refresh_from_db()
        assert order_item.quantity == 3
        assert order_item.unit_price == Decimal("10.00")

    def test_update_rebinds_product(self, api_client, order_item, product_b):
        response = api_client.put(
            f"/api/order-items/{order_item.id}", {"product_id": product_b.id}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["product_id"] == product_b.id

    def test_update_unknown_product(self, api_client, order_item):
        response = api_client.put(
            f"/api/order-items/{order_item.id}", {"product_id": 999999}, format="json"
        )
        assert response.status_code == 404

    def test_delete(self, api_client, order_item, order):
        response = api_client.delete(f"/api/order-items/{order_item.id}")

        assert response.status_code == 204
        assert not OrderItem.objects.filter(id=order_item.id).exists()
        assert Order.objects.filter(id=order.id).exists()

    def test_delete_not_found(self, api_client):
        response = api_client.delete("/api/order-items/999999")
        assert response.status_code == 404
