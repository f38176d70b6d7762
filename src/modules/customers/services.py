"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email must be unique.  The look-up before insert is a pre-check; the
  database unique constraint is the final word and an ``IntegrityError``
  on insert is reported as the same duplicate-email condition.
- Deletion removes the customer and, by cascade, its bookings.

Two layers of API are exposed:
- ``find_*`` / ``create`` / ``delete`` raise domain exceptions or return
  ``None``, mirroring the repository.
- ``lookup_by_*`` / ``register`` / ``remove`` return result variants from
  ``modules.customers.results`` and are what the views call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.customers.dtos import CreateCustomerDTO, validate_customer
from modules.customers.exceptions import CustomerNotFound, UniqueEmailException
from modules.customers.models import Customer
from modules.customers.results import (
    CreateResult,
    DuplicateConflict,
    Found,
    LookupResult,
    NotFound,
    ValidationFailed,
)

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all_customers(self) -> List[Customer]:
        """Return every customer ordered by name (ascending)."""
        return self._repo.list()

    def find_customer_by_id(self, id: int) -> Optional[Customer]:
        """Return the customer with this id, or ``None``."""
        return self._repo.get_by_id(id)

    def find_customer_by_email(self, email: str) -> Customer:
        """Retrieve a single customer by email.

        Raises:
            CustomerNotFound: if no customer has this email.
        """
        customer = self._repo.get_by_email(email)
        if customer is None:
            raise CustomerNotFound(f"No Customer with the email {email} was found!")
        return customer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing email uniqueness.

        Raises:
            UniqueEmailException: if the email is already taken.
        """
        log = logger.bind(email=dto.email)

        if self._repo.get_by_email(dto.email) is not None:
            log.warning("customer.duplicate_email")
            raise UniqueEmailException(f"Email {dto.email} already registered.")

        customer = Customer(
            name=dto.name,
            email=dto.email,
            phone_number=dto.phone_number,
        )
        try:
            with transaction.atomic():
                customer = self._repo.save(customer)
        except IntegrityError as exc:
            log.warning("customer.duplicate_email", source="constraint")
            raise UniqueEmailException(
                f"Email {dto.email} already registered."
            ) from exc

        log.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def delete(self, customer: Customer) -> None:
        """Delete a customer and, through the cascade, its bookings."""
        self._repo.delete(customer)

    # ------------------------------------------------------------------
    # Result-typed facade (used by the API layer)
    # ------------------------------------------------------------------

    def lookup_by_id(self, id: int) -> LookupResult[Customer]:
        customer = self.find_customer_by_id(id)
        if customer is None:
            return NotFound(f"No Customer with the id {id} was found!")
        logger.info("customer.retrieved", customer_id=customer.id)
        return Found(customer)

    def lookup_by_email(self, email: str) -> LookupResult[Customer]:
        try:
            return Found(self.find_customer_by_email(email))
        except CustomerNotFound as exc:
            return NotFound(str(exc))

    def register(self, payload: Mapping[str, Any]) -> CreateResult[Customer]:
        """Validate ``payload`` and create the customer it describes.

        Any ``id`` in the payload is ignored; storage assigns a new one.
        """
        violations = validate_customer(payload)
        if violations:
            logger.info(
                "customer.validation_failed",
                fields=[field for field, _ in violations],
            )
            return ValidationFailed(errors=dict(violations))

        dto = CreateCustomerDTO.model_validate(payload)
        try:
            return Found(self.create(dto))
        except UniqueEmailException:
            return DuplicateConflict()

    def remove(self, id: int) -> LookupResult[Customer]:
        """Delete the customer with this id, returning it when it existed."""
        customer = self.find_customer_by_id(id)
        if customer is None:
            return NotFound(f"No Customer with the id {id} was found!")
        self.delete(customer)
        logger.info("customer.removed", customer_id=id)
        return Found(customer)
