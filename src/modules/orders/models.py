"""Order model.

An order belongs to exactly one customer and references zero or more
products.  The order is the owning side of both relations; the
``orders`` back-references on Customer and Product are read-only.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root.

    The customer FK uses PROTECT so an order never loses its owner.
    """

    description = models.CharField(max_length=255)
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    products = models.ManyToManyField(
        "products.Product",
        related_name="orders",
        blank=True,
        db_table="orders_products",
    )

    class Meta:
        db_table = "orders"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Order #{self.pk}: {self.description}"
