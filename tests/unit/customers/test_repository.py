"""Unit tests for CustomerDjangoRepository.

Covers:
- Instantiation and interface compliance.
- list / get_by_id / save / delete_by_id against the test database.
- Timestamp bookkeeping done by storage on insert and update.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from freezegun import freeze_time

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_customer(save: bool = True, **overrides) -> Customer:
    """Create a Customer instance with sane defaults."""
    defaults = {"name": "Name", "email": "email@test.com", "age": 27}
    defaults.update(overrides)
    customer = Customer(**defaults)
    if save:
        customer.save()
    return customer


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        from modules.customers.repositories.interfaces import ICustomerRepository

        assert isinstance(repo, ICustomerRepository)


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_all_customers_in_id_order(self, repo):
        first = _make_customer(name="A")
        second = _make_customer(name="B")
        third = _make_customer(name="C")

        result = repo.list()

        assert [c.id for c in result] == [first.id, second.id, third.id]

    def test_returns_empty_list_when_no_customers(self, repo):
        assert repo.list() == []


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer()
        result = repo.get_by_id(customer.id)
        assert result is not None
        assert result.id == customer.id
        assert result.email == "email@test.com"

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999_999) is None


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_insert_assigns_id_and_timestamps(self, repo):
        customer = _make_customer(save=False)
        assert customer.id is None

        result = repo.save(customer)

        assert result is customer
        assert result.id is not None
        assert result.created_at is not None
        assert result.updated_at is not None
        assert Customer.objects.filter(id=result.id).exists()

    def test_ids_are_unique(self, repo):
        a = repo.save(_make_customer(save=False))
        b = repo.save(_make_customer(save=False))
        assert a.id != b.id

    def test_stores_null_fields(self, repo):
        result = repo.save(Customer())
        stored = Customer.objects.get(id=result.id)
        assert stored.name is None
        assert stored.email is None
        assert stored.age is None

    def test_update_keeps_id_and_created_at_and_advances_updated_at(self, repo):
        with freeze_time("2022-12-03 10:15:30"):
            customer = repo.save(_make_customer(save=False))
        created_at = customer.created_at
        original_id = customer.id

        with freeze_time("2023-01-17 08:58:01"):
            customer.email = "email-mod@test.com"
            repo.save(customer)

        stored = Customer.objects.get(id=original_id)
        assert stored.id == original_id
        assert stored.email == "email-mod@test.com"
        assert stored.created_at == created_at
        assert stored.updated_at > created_at
        assert Customer.objects.count() == 1


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    def test_removes_existing_customer(self, repo):
        customer = _make_customer()

        repo.delete_by_id(customer.id)

        assert not Customer.objects.filter(id=customer.id).exists()

    def test_raises_does_not_exist_for_missing_id(self, repo):
        with pytest.raises(Customer.DoesNotExist):
            repo.delete_by_id(999_999)

    def test_second_delete_raises(self, repo):
        customer = _make_customer()
        repo.delete_by_id(customer.id)

        with pytest.raises(Customer.DoesNotExist):
            repo.delete_by_id(customer.id)

    def test_logs_row_deletion_under_its_own_event(self, repo):
        customer = _make_customer()

        with patch("modules.customers.repositories.django_repository.logger") as mock_logger:
            repo.delete_by_id(customer.id)

        mock_logger.info.assert_called_once_with(
            "customer.row_deleted", customer_id=customer.id
        )
