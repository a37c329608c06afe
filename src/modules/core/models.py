"""Base abstract model for the store entities.

Provides ``BaseModel``: auto-increment integer primary key (from
``DEFAULT_AUTO_FIELD``) plus ``created_at`` / ``updated_at`` bookkeeping.

Identities are assigned by the database on first save and never
reused or rewritten.  Timestamps are persistence detail only and do
not appear in any transfer representation.
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["id"]

