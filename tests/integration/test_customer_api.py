"""Integration tests for Customer API endpoints.

Covers:
- List, retrieve, look-up by email, create and delete via /customer.
- Status-code mapping (200, 201, 204, 400, 404, 409, 500).
- Cascade delete of bookings through the API.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

from modules.bookings.models import Booking
from modules.customers.models import Customer

pytestmark = pytest.mark.integration

DUPLICATE_BODY = {"email": "That email is already used, please use a unique email"}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_customer():
    """A persisted Customer instance."""
    return Customer.objects.create(
        name="Joan",
        email="joan@example.com",
        phone_number="07700900123",
    )


# ===========================================================================
# LIST
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get("/customer")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_ordered_by_name(self, api_client, sample_customer):
        Customer.objects.create(name="Adam", email="adam@example.com", phone_number="07700900124")
        response = api_client.get("/customer")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Adam", "Joan"]

    def test_list_item_shape(self, api_client, sample_customer):
        Booking.objects.create(customer=sample_customer, hotel_id=1, booking_date=date(2026, 1, 1))
        item = api_client.get("/customer").json()[0]
        assert item == {
            "id": sample_customer.id,
            "name": "Joan",
            "email": "joan@example.com",
            "phoneNumber": "07700900123",
        }


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestCustomerRetrieve:
    def test_retrieve_success(self, api_client, sample_customer):
        response = api_client.get(f"/customer/{sample_customer.id}")
        assert response.status_code == 200
        assert response.json()["id"] == sample_customer.id
        assert response.json()["name"] == "Joan"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/customer/999999")
        assert response.status_code == 404
        assert response.json() == {"detail": "No Customer with the id 999999 was found!"}

    def test_non_numeric_id_does_not_route(self, api_client):
        response = api_client.get("/customer/abc")
        assert response.status_code == 404


# ===========================================================================
# LOOK-UP BY EMAIL
# ===========================================================================


class TestCustomerByEmail:
    def test_found_by_path(self, api_client, sample_customer):
        response = api_client.get("/customer/email/joan@example.com")
        assert response.status_code == 200
        assert response.json()["id"] == sample_customer.id

    def test_query_parameter_takes_precedence(self, api_client, sample_customer):
        response = api_client.get("/customer/email/other@example.com?email=joan@example.com")
        assert response.status_code == 200
        assert response.json()["email"] == "joan@example.com"

    def test_not_found(self, api_client):
        response = api_client.get("/customer/email/ghost@example.com")
        assert response.status_code == 404
        assert "ghost@example.com" in response.json()["detail"]


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_success(self, api_client, customer_payload):
        response = api_client.post("/customer", customer_payload, format="json")
        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["name"] == "Ann"
        assert body["email"] == "ann@x.com"
        assert body["phoneNumber"] == "01234567890"
        assert Customer.objects.filter(id=body["id"]).exists()

    def test_client_supplied_id_is_ignored(self, api_client, customer_payload, sample_customer):
        payload = {**customer_payload, "id": sample_customer.id}
        response = api_client.post("/customer", payload, format="json")
        assert response.status_code == 201
        assert response.json()["id"] != sample_customer.id
        assert Customer.objects.get(id=sample_customer.id).email == "joan@example.com"

    def test_duplicate_email_returns_409(self, api_client, customer_payload):
        first = api_client.post("/customer", customer_payload, format="json")
        assert first.status_code == 201

        second = api_client.post("/customer", customer_payload, format="json")
        assert second.status_code == 409
        assert second.json() == DUPLICATE_BODY
        assert Customer.objects.filter(email="ann@x.com").count() == 1

    def test_validation_failure_lists_every_field(self, api_client):
        payload = {"name": "Ann99", "email": "bad-email", "phoneNumber": "12345"}
        response = api_client.post("/customer", payload, format="json")
        assert response.status_code == 400
        assert response.json() == {
            "name": "Please use a name without numbers or specials",
            "email": "The email address must be in the format of name@domain.com",
            "phoneNumber": "^0[0-9]{10}$ format",
        }
        assert Customer.objects.count() == 0

    def test_missing_field_returns_400(self, api_client):
        response = api_client.post("/customer", {"name": "Ann"}, format="json")
        assert response.status_code == 400
        assert response.json() == {
            "email": "must not be null",
            "phoneNumber": "must not be null",
        }

    def test_display_name_email_returns_400(self, api_client, customer_payload):
        first = api_client.post("/customer", customer_payload, format="json")
        assert first.status_code == 201

        payload = dict(customer_payload, email="Ann <ann@x.com>")
        response = api_client.post("/customer", payload, format="json")
        assert response.status_code == 400
        assert response.json() == {
            "email": "The email address must be in the format of name@domain.com"
        }
        assert Customer.objects.count() == 1

    def test_empty_object_lists_every_null_field(self, api_client):
        response = api_client.post("/customer", data="{}", content_type="application/json")
        assert response.status_code == 400
        assert response.json() == {
            "name": "must not be null",
            "email": "must not be null",
            "phoneNumber": "must not be null",
        }
        assert Customer.objects.count() == 0

    def test_null_body_returns_400(self, api_client):
        response = api_client.post("/customer", data="null", content_type="application/json")
        assert response.status_code == 400
        assert response.json() == {"detail": "Bad Request"}

    def test_absent_body_returns_400(self, api_client):
        response = api_client.post("/customer")
        assert response.status_code == 400
        assert response.json() == {"detail": "Bad Request"}

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post("/customer", data="{", content_type="application/json")
        assert response.status_code == 400

    def test_unexpected_error_returns_500(self, api_client, customer_payload):
        with patch(
            "modules.customers.services.CustomerService.register",
            side_effect=RuntimeError("database unavailable"),
        ):
            response = api_client.post("/customer", customer_payload, format="json")
        assert response.status_code == 500
        assert response.json() == {"detail": "database unavailable"}


# ===========================================================================
# DESTROY
# ===========================================================================


class TestCustomerDestroy:
    def test_destroy_success(self, api_client, sample_customer):
        response = api_client.delete(f"/customer/{sample_customer.id}")
        assert response.status_code == 204
        assert response.content == b""

        follow_up = api_client.get(f"/customer/{sample_customer.id}")
        assert follow_up.status_code == 404

    def test_destroy_cascades_to_bookings(self, api_client, sample_customer):
        Booking.objects.create(customer=sample_customer, hotel_id=4, booking_date=date(2026, 4, 4))
        response = api_client.delete(f"/customer/{sample_customer.id}")
        assert response.status_code == 204
        assert Booking.objects.count() == 0

    def test_destroy_not_found(self, api_client):
        response = api_client.delete("/customer/999999")
        assert response.status_code == 404
        assert response.json() == {"detail": "No Customer with the id 999999 was found!"}

    def test_unexpected_error_returns_500(self, api_client, sample_customer):
        with patch(
            "modules.customers.services.CustomerService.delete",
            side_effect=RuntimeError("boom"),
        ):
            response = api_client.delete(f"/customer/{sample_customer.id}")
        assert response.status_code == 500
        assert response.json() == {"detail": "boom"}
        assert Customer.objects.filter(id=sample_customer.id).exists()


# ===========================================================================
# OpenAPI
# ===========================================================================


class TestSchema:
    def test_schema_lists_customer_paths(self, api_client):
        response = api_client.get("/api/schema/?format=json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/customer" in paths
        assert "/customer/{id}" in paths
