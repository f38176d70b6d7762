"""Customer model.

Business rules implemented:
- ``email`` is unique across all customers (database constraint).
- Equality and hashing use ``email`` (natural key), not the surrogate ``id``.
- Deleting a customer cascades to its bookings (see ``modules.bookings``).
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models

NAME_PATTERN = r"^[A-Za-z\-']+$"
PHONE_PATTERN = r"^0[0-9]{10}$"

NAME_MESSAGE = "Please use a name without numbers or specials"
EMAIL_MESSAGE = "The email address must be in the format of name@domain.com"
PHONE_MESSAGE = "^0[0-9]{10}$ format"


class Customer(models.Model):
    """Customer aggregate root.

    ``id`` is assigned by the database on insert.  Field validators mirror
    the checks performed by ``modules.customers.dtos.validate_customer`` so
    ``full_clean()`` (e.g. from the admin) rejects the same input.
    """

    name = models.CharField(
        max_length=25,
        validators=[
            MinLengthValidator(1),
            RegexValidator(NAME_PATTERN, message=NAME_MESSAGE),
        ],
    )
    email = models.EmailField(
        max_length=254,
        unique=True,
        error_messages={"invalid": EMAIL_MESSAGE},
    )
    phone_number = models.CharField(
        max_length=11,
        db_column="phone_number",
        validators=[RegexValidator(PHONE_PATTERN, message=PHONE_MESSAGE)],
    )

    class Meta:
        db_table = "Customer"
        ordering = ["name"]

    # ------------------------------------------------------------------
    # Identity (natural key)
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Customer):
            return NotImplemented
        return self.email == other.email

    def __hash__(self) -> int:
        return hash(self.email) if self.email is not None else 0

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return (
            f"Customer{{id={self.id}, name='{self.name}', "
            f"email='{self.email}', phoneNumber='{self.phone_number}'}}"
        )
