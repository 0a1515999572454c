"""Customer domain errors.

The Service Layer does not raise these: it returns them wrapped in an
``Err`` result.  The API layer (Views) inspects the result and translates
the error into an HTTP 404 whose body carries ``str(error)``.
"""

from __future__ import annotations


class CustomerNotFound(Exception):
    """No customer matched: the table is empty, or the requested ID is absent."""
