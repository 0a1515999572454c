"""Customer repository interface.

Narrows ``IRepository[Customer]`` to the four primitives the Customer
service relies on: list, look-up by ID, save and delete by ID.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

    @abstractmethod
    def list(self) -> List[Customer]:
        """List all customers in ascending ID order."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by ID, or ``None`` if absent."""

    @abstractmethod
    def save(self, entity: Customer) -> Customer:
        """Insert or update a customer; storage assigns ID and timestamps."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Hard-delete a customer by ID.

        Raises:
            Customer.DoesNotExist: if no customer has the given ID.
        """
