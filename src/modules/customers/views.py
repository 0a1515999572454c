"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
The view holds no business logic: it parses the body into a DTO, calls
the service and translates the returned ``Result`` into a status code.
``Err(CustomerNotFound)`` always becomes a 404 with the standard error
body; unexpected exceptions are left to propagate.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import error_response, not_found_response
from modules.customers.dtos import CustomerRequestDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CustomerRequestSerializer,
    CustomerResponseSerializer,
    ErrorSerializer,
)
from modules.customers.services import CustomerService


def _parse_request(request: Request) -> CustomerRequestDTO:
    return CustomerRequestDTO.model_validate(request.data)


def _invalid_body_response(exc: PydanticValidationError) -> Response:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid customer payload.",
        exc.errors(include_url=False, include_context=False),
    )


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    @extend_schema(
        responses={200: CustomerResponseSerializer(many=True), 404: ErrorSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        result = self._service.get_customers()
        if not result.is_ok():
            return not_found_response(request, result.error)
        return Response([dto.model_dump() for dto in result.value])

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CustomerRequestSerializer,
        responses={200: OpenApiTypes.INT, 400: ErrorSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = _parse_request(request)
        except PydanticValidationError as exc:
            return _invalid_body_response(exc)

        result = self._service.create_customer(dto)
        return Response(result.value, status=status.HTTP_200_OK)

    @extend_schema(
        request=CustomerRequestSerializer,
        responses={200: OpenApiTypes.INT, 400: ErrorSerializer, 404: ErrorSerializer},
    )
    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/customers/{pk}"""
        try:
            dto = _parse_request(request)
        except PydanticValidationError as exc:
            return _invalid_body_response(exc)

        result = self._service.update_customer(int(pk), dto)
        if not result.is_ok():
            return not_found_response(request, result.error)
        return Response(result.value)

    @extend_schema(responses={200: OpenApiTypes.BOOL, 404: ErrorSerializer})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/customers/{pk}"""
        result = self._service.delete_customer(int(pk))
        if not result.is_ok():
            return not_found_response(request, result.error)
        return Response(result.value)
