"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(self) -> List[Customer]:
        """List every customer ordered by name."""
        return list(Customer.objects.all().order_by("name"))

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity.pk is None
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        """Hard-delete a customer; its bookings go with it (CASCADE)."""
        customer_id = entity.id
        _, deleted = entity.delete()
        logger.info(
            "customer.deleted",
            customer_id=customer_id,
            bookings_deleted=deleted.get("bookings.Booking", 0),
        )

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address (exact match)."""
        return Customer.objects.filter(email=email).first()
