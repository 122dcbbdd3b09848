from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository

SEED_PRODUCTS = [
    ("Mechanical Keyboard", "Tenkeyless, hot-swappable switches", Decimal("89.90"), 40),
    ("Wireless Mouse", "Ergonomic 2.4 GHz mouse", Decimal("29.90"), 120),
    ("USB-C Hub", "7-in-1 aluminium hub", Decimal("45.00"), 60),
    ("27\" Monitor", "QHD IPS panel", Decimal("329.00"), 15),
    ("Laptop Stand", "", Decimal("24.50"), 80),
]


class Command(BaseCommand):
    help = "Seed database with demo products and one order."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        products = self._seed_products()
        orders_created = self._seed_order(products)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={len(products)}, "
                f"orders_created={orders_created}"
            )
        )

    def _seed_products(self) -> list[Product]:
        products: list[Product] = []
        for name, description, price, stock in SEED_PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"description": description, "price": price, "stock": stock},
            )
            products.append(product)
        return products

    def _seed_order(self, products: list[Product]) -> int:
        if Order.objects.exists():
            return 0

        keyboard, mouse = products[0], products[1]
        service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        service.create_order(
            CreateOrderDTO(
                customer_name="Jane Doe",
                customer_email="jane.doe@example.com",
                shipping_address="42 Main Street, Springfield",
                total_amount=keyboard.price + mouse.price * 2,
                status=OrderStatus.PENDING,
                order_items=[
                    CreateOrderItemDTO(
                        product_id=keyboard.id,
                        quantity=1,
                        unit_price=keyboard.price,
                        subtotal=keyboard.price,
                    ),
                    CreateOrderItemDTO(
                        product_id=mouse.id,
                        quantity=2,
                        unit_price=mouse.price,
                        subtotal=mouse.price * 2,
                    ),
                ],
            )
        )
        return 1
