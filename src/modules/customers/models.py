"""Customer model.

Fields are stored exactly as received: ``name``, ``email`` and ``age`` are
nullable and carry no validation beyond their column types.  The primary
key and both timestamps are owned by storage (see ``BaseModel``).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer record.

    ``id`` is assigned on insert and never changes.  Rows are listed in
    ascending ``id`` order, which is insertion order.
    """

    name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    email = models.CharField(max_length=254, null=True, blank=True)  # noqa: DJ01
    age = models.IntegerField(null=True, blank=True)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
