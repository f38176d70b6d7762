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
def customer_payload():
    """A valid create-customer request body."""
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "phoneNumber": "01234567890",
    }
