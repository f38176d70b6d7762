"""Unit tests for CustomerDjangoRepository.

Covers:
- Instantiation and interface compliance.
- get_by_id, list ordering, save, delete.
- get_by_email look-up.
- Edge cases: non-numeric IDs, non-existent records, cascade on delete.
"""

from __future__ import annotations

import uuid
from datetime import date

import pytest

from modules.bookings.models import Booking
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_customer(save: bool = True, **overrides) -> Customer:
    """Create a Customer instance with sane defaults."""
    defaults = {
        "name": "Maria",
        "email": f"{uuid.uuid4().hex[:8]}@example.com",
        "phone_number": "01234567890",
    }
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
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer()
        result = repo.get_by_id(customer.id)
        assert result is not None
        assert result.id == customer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999999) is None

    def test_returns_none_for_non_numeric_id(self, repo):
        assert repo.get_by_id("not-a-number") is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_all_ordered_by_name(self, repo):
        _make_customer(name="Zoe")
        _make_customer(name="Adam")
        _make_customer(name="Mia")
        result = repo.list()
        assert [c.name for c in result] == ["Adam", "Mia", "Zoe"]

    def test_returns_empty_list_when_no_customers(self, repo):
        assert repo.list() == []


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_customer(self, repo):
        customer = _make_customer(save=False)
        result = repo.save(customer)
        assert result.id is not None
        assert Customer.objects.filter(id=result.id).exists()

    def test_returns_same_entity(self, repo):
        customer = _make_customer(save=False)
        assert repo.save(customer) is customer


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_removes_row(self, repo):
        customer = _make_customer()
        customer_id = customer.id
        repo.delete(customer)
        assert not Customer.objects.filter(id=customer_id).exists()

    def test_removes_dependent_bookings(self, repo):
        customer = _make_customer()
        Booking.objects.create(customer=customer, hotel_id=5, booking_date=date(2026, 5, 1))
        repo.delete(customer)
        assert Booking.objects.count() == 0


# ===========================================================================
# get_by_email
# ===========================================================================


class TestGetByEmail:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer(email="found@example.com")
        result = repo.get_by_email("found@example.com")
        assert result is not None
        assert result.id == customer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_email("ghost@example.com") is None
