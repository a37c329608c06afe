"""Failure taxonomy shared by every module.

A failure is described by data, not by class: ``ServiceError`` carries
an ``ErrorKind`` tag, an optional explicit status, a reason and, for
validation failures, the list of violated fields.  The HTTP boundary
(``modules.core.error_handling``) maps the kind to a status code and
body through a flat table, so the exception subclasses declared by each
module only pre-fill the kind and the reason.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional, Sequence


class ErrorKind(StrEnum):
    """Closed set of failure categories."""

    VALIDATION_FAILED = "ValidationFailed"
    CONSTRAINT_VIOLATION = "ConstraintViolation"
    INVALID_REFERENCE = "InvalidReference"
    NOT_FOUND = "NotFound"
    TYPE_MISMATCH = "TypeMismatch"
    STORE_FAILURE = "StoreFailure"
    UNCLASSIFIED = "Unclassified"


class ServiceError(Exception):
    """A classified failure raised anywhere in the request pipeline.

    ``status`` is only consulted for ``INVALID_REFERENCE``, where the
    raiser chooses the status code together with the reason.
    """

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    default_message: str = "An unexpected error occurred"
    default_status: Optional[int] = None

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        kind: Optional[ErrorKind] = None,
        status: Optional[int] = None,
        errors: Optional[Sequence[str]] = None,
    ) -> None:
        self.message = message or self.default_message
        if kind is not None:
            self.kind = kind
        self.status = status if status is not None else self.default_status
        self.errors = list(errors) if errors else []
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!s}, message={self.message!r})"


class ValidationFailed(ServiceError):
    """One or more required fields of a request body are invalid."""

    kind = ErrorKind.VALIDATION_FAILED
    default_message = "Validation failed"


class ConstraintViolation(ServiceError):
    """A query or path parameter violates a declared constraint."""

    kind = ErrorKind.CONSTRAINT_VIOLATION
    default_message = "Constraint violation"


class InvalidReference(ServiceError):
    """A reference inside a payload (or the request itself) was rejected."""

    kind = ErrorKind.INVALID_REFERENCE
    default_status = 400


class EntityNotFound(ServiceError):
    """A direct lookup by id found nothing."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Entity not found"


class TypeMismatch(ServiceError):
    """A parameter could not be converted to its declared type."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, value: object, name: str, expected: str = "int") -> None:
        self.value = value
        self.name = name
        self.expected = expected
        super().__init__(
            f"Invalid value '{value}' for parameter '{name}'. Expected type: {expected}"
        )
