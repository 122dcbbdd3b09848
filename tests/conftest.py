from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.orders.constants import OrderStatus
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_request_id(api_client):
    """APIClient pre-configured with a known request ID header."""
    request_id = "test-request-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = request_id
    return api_client, request_id


@pytest.fixture()
def product_a():
    return Product.objects.create(
        name="Product A",
        description="First test product",
        price=Decimal("10.00"),
        stock=100,
    )


@pytest.fixture()
def product_b():
    return Product.objects.create(
        name="Product B",
        description="Second test product",
        price=Decimal("25.50"),
        stock=5,
    )


@pytest.fixture()
def order_payload(product_a, product_b):
    """A valid order creation payload: 2 x A and 1 x B."""
    return {
        "customer_name": "John Doe",
        "customer_email": "john.doe@example.com",
        "shipping_address": "123 Main St, Anytown",
        "total_amount": "45.50",
        "status": OrderStatus.PENDING.value,
        "order_items": [
            {
                "product_id": product_a.id,
                "quantity": 2,
                "unit_price": "10.00",
                "subtotal": "20.00",
            },
            {
                "product_id": product_b.id,
                "quantity": 1,
                "unit_price": "25.50",
                "subtotal": "25.50",
            },
        ],
    }
