"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CustomerRequestDTO``: input for customer creation and update.
- ``CustomerResponseDTO``: output projection of a stored customer.

Field mapping is explicit in both directions so it is obvious which
fields are copied and which are left to storage:

- request -> new entity: ``name``, ``email``, ``age`` (``id`` and
  timestamps unset).
- request -> existing entity: overwrites ``name``, ``email``, ``age``;
  ``id`` and ``created_at`` untouched.
- entity -> response: ``id``, ``name``, ``email``, ``age``.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.customers.models import Customer

# Bounds of the ``integer`` column backing ``Customer.age``.
AGE_MIN = -(2**31)
AGE_MAX = 2**31 - 1


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CustomerRequestDTO(BaseModel):
    """Immutable DTO for customer create/update requests.

    Only basic type parsing is applied: every field is optional, and
    ``None`` or empty strings pass through to storage unchanged. Numbers
    sent for ``name``/``email`` are stored as their string form; ``age``
    must fit the storage column.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[Annotated[int, Field(ge=AGE_MIN, le=AGE_MAX)]] = None

    def to_entity(self) -> Customer:
        """Build a new, unsaved ``Customer`` from this request."""
        return Customer(name=self.name, email=self.email, age=self.age)

    def apply_to(self, customer: Customer) -> Customer:
        """Overwrite ``name``, ``email`` and ``age`` on an existing customer."""
        customer.name = self.name
        customer.email = self.email
        customer.age = self.age
        return customer


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerResponseDTO(BaseModel):
    """Immutable DTO for customer API responses (timestamps dropped)."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerResponseDTO:
        """Build an output DTO from a Customer model instance."""
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            age=customer.age,
        )
