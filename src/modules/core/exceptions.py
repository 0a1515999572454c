"""Standardized error responses.

Every error the API returns has the same body shape::

    {
        "timestamp": "2024-01-17T08:58:01.000000+00:00",
        "status": "404 NOT_FOUND",
        "message": "...",
        "errors": "..."
    }

``error_response()`` builds it for errors the views translate themselves
(domain ``*NotFound`` results, DTO parse failures).  ``api_exception_handler``
is registered as DRF's ``EXCEPTION_HANDLER`` so framework errors (malformed
JSON, unsupported method or media type) render the same way.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional

import structlog
from django.utils import timezone
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def status_label(status_code: int) -> str:
    """Render a status code as ``"<code> <NAME>"`` (e.g. ``"404 NOT_FOUND"``)."""
    code = int(status_code)
    return f"{code} {HTTPStatus(code).name}"


def build_error_body(status_code: int, message: str, errors: Any = None) -> Dict[str, Any]:
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_label(status_code),
        "message": message,
        "errors": message if errors is None else errors,
    }


def error_response(status_code: int, message: str, errors: Any = None) -> Response:
    """Build a DRF ``Response`` carrying the standard error body."""
    return Response(build_error_body(status_code, message, errors), status=status_code)


def not_found_response(request: Request, error: Exception) -> Response:
    """Translate a domain *not found* error into a 404 response.

    ``message`` and ``errors`` are both the error's string description.
    """
    logger.warning(
        "request.not_found",
        path=request.path,
        query_params=dict(request.query_params.lists()),
        error=str(error),
    )
    return error_response(int(HTTPStatus.NOT_FOUND), str(error))


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF exception handler rendering framework errors in the standard shape.

    Returns ``None`` for exceptions DRF does not handle, leaving them to
    Django's default 500 behaviour.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    message = str(detail) if detail is not None else str(exc)
    response.data = build_error_body(response.status_code, message, response.data)
    logger.info(
        "request.rejected",
        status_code=response.status_code,
        error=message,
    )
    return response
