"""Customer model.

A customer is identified by a store-assigned integer id and carries a
display name.  Names are not unique.  The ``orders`` back-reference is
declared on ``Order.customer``; the order is the owning side.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)

    class Meta:
        db_table = "customers"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="customers_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"
