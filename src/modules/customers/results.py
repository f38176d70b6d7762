"""Outcome variants returned by ``CustomerService`` to the API layer.

Each variant is a frozen dataclass; views branch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, TypeVar, Union

T = TypeVar("T")

DUPLICATE_EMAIL_MESSAGE = "That email is already used, please use a unique email"


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class DuplicateConflict:
    field: str = "email"
    message: str = DUPLICATE_EMAIL_MESSAGE

    def as_errors(self) -> Dict[str, str]:
        return {self.field: self.message}


@dataclass(frozen=True)
class ValidationFailed:
    """Field name -> violation message, one entry per violated field."""

    errors: Dict[str, str] = field(default_factory=dict)


LookupResult = Union[Found[T], NotFound]
CreateResult = Union[Found[T], ValidationFailed, DuplicateConflict]
