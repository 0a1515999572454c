from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_data import SEED_CUSTOMERS
from modules.customers.models import Customer

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_creates_sample_customers(self):
        call_command("seed_data", stdout=StringIO())
        assert Customer.objects.count() == len(SEED_CUSTOMERS)

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        call_command("seed_data", stdout=StringIO())
        assert Customer.objects.count() == len(SEED_CUSTOMERS)

    def test_seeded_customers_are_listed(self, api_client):
        call_command("seed_data", stdout=StringIO())
        response = api_client.get("/api/v1/customers/")
        assert response.status_code == 200
        assert len(response.json()) == len(SEED_CUSTOMERS)
