from __future__ import annotations

import random

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Product

CUSTOMER_NAMES = [
    "Ana Souza",
    "Bruno Lima",
    "Carla Mendes",
    "Daniel Costa",
    "Eduardo Alves",
    "Fernanda Rocha",
    "Gabriel Santos",
    "Helena Ferreira",
    "Igor Ramos",
    "Julia Oliveira",
]

PRODUCT_DESCRIPTIONS = [
    "Monitor 27\"",
    "Mechanical keyboard",
    "Gaming mouse",
    "14\" notebook",
    "Headset",
    "Office desk",
    "Ergonomic chair",
    "Bookshelf",
    "A4 paper",
    "Blue pen",
    "Notebook stand",
    "LED lamp",
]


class Command(BaseCommand):
    help = "Seed database with sample customers, products and orders."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=25,
            help="Number of sample orders to create (default: 25).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        products = self._seed_products()
        orders_created = self._seed_orders(customers, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers = [Customer.objects.get_or_create(name=name)[0] for name in CUSTOMER_NAMES]
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products = [
            Product.objects.get_or_create(description=description)[0]
            for description in PRODUCT_DESCRIPTIONS
        ]
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(self, customers: list[Customer], products: list[Product], count: int) -> int:
        self.stdout.write("Creating orders...")
        if not customers or not products:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/products)."))
            return 0

        orders_created = 0
        for i in range(count):
            order, created = Order.objects.get_or_create(
                description=f"Seed order {i + 1}",
                defaults={"customer": random.choice(customers)},
            )
            if not created:
                continue
            item_count = random.randint(0, 4)
            order.products.set(random.sample(products, k=min(item_count, len(products))))
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
