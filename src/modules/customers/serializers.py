"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Input is validated by ``dtos.validate_customer`` and
persisted through the Service Layer.  ``bookings`` is never exposed.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource (``{id, name, email, phoneNumber}``)."""

    phoneNumber = serializers.CharField(source="phone_number")

    class Meta:
        model = Customer
        fields = ["id", "name", "email", "phoneNumber"]
        read_only_fields = ["id"]
