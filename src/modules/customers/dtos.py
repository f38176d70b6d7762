"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``validate_customer``: explicit validation returning ``(field, message)``
  pairs, one per violated field.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Tuple

from email_validator import EmailNotValidError
from email_validator import validate_email as check_email_syntax
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticCustomError

from modules.customers.models import (
    EMAIL_MESSAGE,
    NAME_MESSAGE,
    NAME_PATTERN,
    PHONE_MESSAGE,
    PHONE_PATTERN,
)

FieldViolation = Tuple[str, str]

NOT_NULL_MESSAGE = "must not be null"
NOT_EMPTY_MESSAGE = "must not be empty"
NAME_SIZE_MESSAGE = "size must be between 1 and 25"

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 25

_NAME_RE = re.compile(NAME_PATTERN)
_PHONE_RE = re.compile(PHONE_PATTERN)


def _not_null(value: Any) -> None:
    if value is None:
        raise PydanticCustomError("not_null", NOT_NULL_MESSAGE)


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Accepts the JSON field names (``phoneNumber``) as well as the Python
    ones.  Unknown keys, including a client-supplied ``id``, are ignored.

    Validates:
    - ``name`` is 1-25 characters of letters, hyphen or apostrophe.
    - ``email`` is non-empty and well-formed.
    - ``phone_number`` is ``0`` followed by ten digits.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    name: str | None = None
    email: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        _not_null(v)
        if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
            raise PydanticCustomError("name_size", NAME_SIZE_MESSAGE)
        if not _NAME_RE.fullmatch(v):
            raise PydanticCustomError("name_pattern", NAME_MESSAGE)
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str | None) -> str | None:
        """Check the syntax only; the stored value is kept as supplied."""
        _not_null(v)
        if not v:
            raise PydanticCustomError("not_empty", NOT_EMPTY_MESSAGE)
        try:
            check_email_syntax(v, check_deliverability=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError("email_format", EMAIL_MESSAGE) from exc
        return v

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: str | None) -> str | None:
        _not_null(v)
        if not _PHONE_RE.fullmatch(v):
            raise PydanticCustomError("phone_pattern", PHONE_MESSAGE)
        return v


# ---------------------------------------------------------------------------
# Explicit validation
# ---------------------------------------------------------------------------


def violations_from(exc: ValidationError) -> List[FieldViolation]:
    """Flatten a Pydantic error into ``(field, message)`` pairs.

    Only the first message per field is kept.
    """
    json_names = {
        name: info.alias or name
        for name, info in CreateCustomerDTO.model_fields.items()
    }
    violations: List[FieldViolation] = []
    seen = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        field = json_names.get(field, field)
        if field in seen:
            continue
        seen.add(field)
        violations.append((field, error["msg"]))
    return violations


def validate_customer(payload: Mapping[str, Any]) -> List[FieldViolation]:
    """Return every violated field of ``payload``; empty when valid."""
    try:
        CreateCustomerDTO.model_validate(payload)
    except ValidationError as exc:
        return violations_from(exc)
    return []
