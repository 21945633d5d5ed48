"""Integration tests for CustomerDjangoRepository."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.customers.models import Customer
from modules.customers.repositories import CustomerDjangoRepository, ICustomerRepository

pytestmark = pytest.mark.integration


@pytest.fixture()
def repo():
    return CustomerDjangoRepository()


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Repo Customer", email="Repo@Example.com")


class TestCustomerDjangoRepository:
    def test_implements_interface(self, repo):
        assert isinstance(repo, ICustomerRepository)

    def test_find_by_id_returns_customer(self, repo, customer):
        assert repo.find_by_id(str(customer.id)) == customer

    def test_find_by_id_unknown_returns_none(self, repo):
        assert repo.find_by_id(str(uuid4())) is None

    @pytest.mark.parametrize("raw", ["", "C1", "not-a-uuid"])
    def test_find_by_id_malformed_returns_none(self, repo, raw):
        assert repo.find_by_id(raw) is None

    def test_email_is_normalised(self, customer):
        customer.refresh_from_db()
        assert customer.email == "repo@example.com"
