"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern (``get_by_id`` returns ``None``),
while ``delete_by_id`` raises ``Customer.DoesNotExist`` so callers can
tell "no such row" apart from a successful delete.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.filter(id=id).first()

    def list(self) -> List[Customer]:
        return list(Customer.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        deleted, _ = Customer.objects.filter(id=id).delete()
        if not deleted:
            raise Customer.DoesNotExist(f"No customer with id {id} exists.")
        logger.info("customer.row_deleted", customer_id=id)
