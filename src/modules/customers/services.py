"""Customer service layer (Use Cases).

Orchestrates one persistence operation per call for the Customer entity,
delegating storage to the injected ``ICustomerRepository``.

Every operation returns a ``Result``: ``Ok(value)`` on success, or
``Err(CustomerNotFound)`` when the expected row(s) are missing:

- listing an empty table,
- updating an ID that does not exist,
- deleting an ID that does not exist.

Any other repository failure propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction

from modules.core.result import Err, Ok, Result
from modules.customers.dtos import CustomerResponseDTO
from modules.customers.exceptions import CustomerNotFound

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerRequestDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customers(self) -> Result[List[CustomerResponseDTO], CustomerNotFound]:
        """Return every customer, projected to ``CustomerResponseDTO``.

        An empty table is reported as ``CustomerNotFound``, not as an
        empty list.
        """
        logger.debug("customer.list_started")
        customers = self._repo.list()
        if not customers:
            logger.info("customer.list_empty")
            return Err(CustomerNotFound("No customers found."))
        logger.info("customer.listed", count=len(customers))
        return Ok([CustomerResponseDTO.from_entity(c) for c in customers])

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerRequestDTO) -> Result[int, CustomerNotFound]:
        """Insert a new customer and return the ID storage assigned."""
        logger.debug("customer.create_started")
        customer = self._repo.save(dto.to_entity())
        logger.info("customer.created", customer_id=customer.id)
        return Ok(customer.id)

    @transaction.atomic
    def update_customer(
        self, id: int, dto: CustomerRequestDTO
    ) -> Result[int, CustomerNotFound]:
        """Overwrite ``name``, ``email`` and ``age`` of an existing customer."""
        log = logger.bind(customer_id=id)
        log.debug("customer.update_started")

        customer = self._repo.get_by_id(id)
        if customer is None:
            log.info("customer.update_missing")
            return Err(CustomerNotFound(f"Customer {id} not found."))

        customer = self._repo.save(dto.apply_to(customer))
        log.info("customer.updated")
        return Ok(customer.id)

    @transaction.atomic
    def delete_customer(self, id: int) -> Result[bool, CustomerNotFound]:
        """Delete a customer by ID; ``Ok(True)`` is the only success value."""
        log = logger.bind(customer_id=id)
        log.debug("customer.delete_started")
        try:
            self._repo.delete_by_id(id)
        except ObjectDoesNotExist:
            log.info("customer.delete_missing")
            return Err(CustomerNotFound(f"Customer {id} not found."))
        log.info("customer.deleted")
        return Ok(True)
