"""Customer DRF serializers describing the wire shapes.

Request parsing and response building go through the Pydantic DTOs in
``dtos.py``; these serializers only document the HTTP contract in the
OpenAPI schema generated by drf-spectacular.
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerRequestSerializer(serializers.Serializer):
    """Body of ``POST`` and ``PUT`` requests."""

    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    email = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    age = serializers.IntegerField(required=False, allow_null=True)


class CustomerResponseSerializer(serializers.Serializer):
    """One element of the ``GET`` listing."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(allow_null=True)
    email = serializers.CharField(allow_null=True)
    age = serializers.IntegerField(allow_null=True)


class ErrorSerializer(serializers.Serializer):
    """Standard error body (see ``modules.core.exceptions``)."""

    timestamp = serializers.DateTimeField()
    status = serializers.CharField()
    message = serializers.CharField()
    errors = serializers.JSONField()
