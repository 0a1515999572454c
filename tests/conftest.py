import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer_factory():
    """Persist customers with default field values, overridable per call."""
    from modules.customers.models import Customer

    def _create(**overrides) -> Customer:
        fields = {"name": "Name", "email": "email@test.com", "age": 27}
        fields.update(overrides)
        return Customer.objects.create(**fields)

    return _create
