"""Product model.

A product is a catalogue entry identified by a store-assigned integer
id and described by free text.  Orders reference products through the
``Order.products`` many-to-many relation.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root."""

    description = models.CharField(max_length=255)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.description} (#{self.pk})"
