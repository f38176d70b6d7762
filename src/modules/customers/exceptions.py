"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The service facade converts them into result variants which the API
layer (Views) translates into HTTP responses.
"""

from __future__ import annotations


class UniqueEmailException(Exception):
    """A customer with the same email already exists."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""
