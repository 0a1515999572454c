"""Explicit success-or-failure result for the Service Layer.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising domain
exceptions, so the API layer decides the HTTP status by inspecting the
variant:

    result = service.update_customer(pk, dto)
    if not result.is_ok():
        return not_found_response(request, result.error)
    return Response(result.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""

    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain exception that describes it.

    The exception is never raised; its ``str()`` is what the API layer
    exposes to clients.
    """

    error: E

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
