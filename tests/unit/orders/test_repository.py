"""Unit tests for the order repositories."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import (
    OrderDjangoRepository,
    OrderItemDjangoRepository,
)
from modules.products.models import Product

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def order():
    return Order.objects.create(
        customer_name="Jane",
        customer_email="jane@example.com",
        shipping_address="1 Road St",
        total_amount=Decimal("30.00"),
        status=OrderStatus.PENDING,
    )


def _item(order, product, quantity=1):
    return OrderItem(
        order=order,
        product=product,
        quantity=quantity,
        unit_price=Decimal("10.00"),
        subtotal=Decimal("10.00") * quantity,
    )


class TestReplaceItems:
    def test_persists_new_items(self, repo, order, product_a):
        repo.replace_items(order, [_item(order, product_a), _item(order, product_a, 2)])
        assert OrderItem.objects.filter(order=order).count() == 2

    def test_removes_orphans(self, repo, order, product_a, product_b):
        kept = _item(order, product_a)
        kept.save()
        orphan = _item(order, product_b)
        orphan.save()

        repo.replace_items(order, [kept])

        assert list(OrderItem.objects.filter(order=order)) == [kept]

    def test_refreshes_prefetched_collection(self, repo, order, product_a):
        loaded = repo.get_by_id(order.id)
        assert list(loaded.order_items.all()) == []

        repo.replace_items(loaded, [_item(loaded, product_a)])

        assert len(loaded.order_items.all()) == 1


class TestDelete:
    def test_cascades_items_and_keeps_products(self, repo, order, product_a, product_b):
        _item(order, product_a).save()
        _item(order, product_b).save()

        assert repo.delete(order.id) is True

        assert not Order.objects.filter(id=order.id).exists()
        assert OrderItem.objects.count() == 0
        assert Product.objects.filter(id__in=[product_a.id, product_b.id]).count() == 2

    def test_missing(self, repo):
        assert repo.delete(999999) is False


class TestRead:
    def test_get_by_id_malformed(self, repo):
        assert repo.get_by_id("abc") is None
        assert repo.exists("abc") is False

    def test_list(self, repo, order):
        assert repo.list() == [order]


class TestOrderItemRepository:
    def test_crud(self, order, product_a):
        item_repo = OrderItemDjangoRepository()
        item = item_repo.save(_item(order, product_a))

        assert item_repo.get_by_id(item.id) == item
        assert item_repo.exists(item.id) is True
        assert item_repo.list() == [item]
        assert item_repo.delete(item.id) is True
        assert item_repo.get_by_id(item.id) is None
