"""Integration test for order atomicity on partial stock failures.

Ensures stock reservation is all-or-nothing when any item lacks stock.
"""

from __future__ import annotations

import pytest

from modules.orders.models import Order, OrderItem

pytestmark = pytest.mark.integration


class TestOrderAtomicity:
    def test_partial_stock_failure_rolls_back_everything(
        self, api_client, order_payload, product_a, product_b
    ):
        order_payload["order_items"][1]["quantity"] = 10
        order_payload["order_items"][1]["subtotal"] = "255.00"

        response = api_client.post("/api/orders", order_payload, format="json")

        assert response.status_code == 400
        product_a.refresh_from_db()
        product_b.refresh_from_db()
        assert product_a.stock == 100
        assert product_b.stock == 5
        assert Order.objects.count() == 0
        assert OrderItem.objects.count() == 0

    def test_first_item_failure_leaves_second_product_untouched(
        self, api_client, order_payload, product_a, product_b
    ):
        order_payload["order_items"][0]["quantity"] = 101

        response = api_client.post("/api/orders", order_payload, format="json")

        assert response.status_code == 400
        assert "Product A" in response.json()["message"]
        product_b.refresh_from_db()
        assert product_b.stock == 5

    def test_success_after_failure(self, api_client, order_payload, product_a):
        bad = dict(order_payload, order_items=[dict(order_payload["order_items"][1], quantity=99)])
        assert api_client.post("/api/orders", bad, format="json").status_code == 400

        response = api_client.post("/api/orders", order_payload, format="json")

        assert response.status_code == 201
        product_a.refresh_from_db()
        assert product_a.stock == 98
        assert Order.objects.count() == 1
