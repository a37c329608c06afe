"""HTTP boundary for failures.

Every exception that escapes a view lands in ``api_exception_handler``
(installed as DRF's ``EXCEPTION_HANDLER``).  It is classified exactly
once into an ``ErrorKind`` and rendered as::

    {"status": 404, "message": "Order not found", "path": "/order/find/9"}

``errors`` is added only for validation and constraint failures.  Store
and unclassified failures are logged with their traceback but answered
with a generic message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import structlog
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.exceptions import (
    EntityNotFound,
    ErrorKind,
    InvalidReference,
    ServiceError,
    ValidationFailed,
)

logger = structlog.get_logger(__name__)

# kind -> (status, message); ``None`` means "taken from the raised error"
RESPONSE_TABLE: Dict[ErrorKind, Tuple[Optional[int], Optional[str]]] = {
    ErrorKind.VALIDATION_FAILED: (400, "Validation failed"),
    ErrorKind.CONSTRAINT_VIOLATION: (400, "Constraint violation"),
    ErrorKind.INVALID_REFERENCE: (None, None),
    ErrorKind.NOT_FOUND: (404, None),
    ErrorKind.TYPE_MISMATCH: (400, None),
    ErrorKind.STORE_FAILURE: (500, "Database access error"),
    ErrorKind.UNCLASSIFIED: (500, "An unexpected error occurred"),
}

_KINDS_WITH_ERRORS = {ErrorKind.VALIDATION_FAILED, ErrorKind.CONSTRAINT_VIOLATION}


def classify(exc: BaseException) -> ServiceError:
    """Translate any exception into a ``ServiceError``."""
    if isinstance(exc, ServiceError):
        return exc
    if isinstance(exc, DatabaseError):
        return ServiceError(kind=ErrorKind.STORE_FAILURE)
    if isinstance(exc, drf_exceptions.ParseError):
        return ValidationFailed(errors=[f"body: {exc.detail}"])
    if isinstance(exc, drf_exceptions.ValidationError):
        return ValidationFailed(errors=_flatten_drf_detail(exc.detail))
    if isinstance(exc, drf_exceptions.APIException):
        return InvalidReference(str(exc.detail), status=exc.status_code)
    if isinstance(exc, Http404):
        return EntityNotFound("Not found")
    return ServiceError(kind=ErrorKind.UNCLASSIFIED)


def build_error_body(error: ServiceError, path: str) -> Tuple[int, Dict[str, Any]]:
    """Return ``(status, body)`` for a classified failure."""
    status, message = RESPONSE_TABLE[error.kind]
    if status is None:
        status = error.status or 400
    if message is None:
        message = error.message

    body: Dict[str, Any] = {"status": status, "message": message, "path": path}
    if error.kind in _KINDS_WITH_ERRORS:
        body["errors"] = list(error.errors)
    return status, body


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler: classify, log and shape the failure."""
    request = context.get("request")
    path = request.path if request is not None else ""

    error = classify(exc)
    status, body = build_error_body(error, path)

    log = logger.bind(path=path, kind=str(error.kind), status_code=status)
    if status >= 500:
        log.error("request.failed", detail=str(exc), exc_info=exc)
    elif error.errors:
        log.warning("request.rejected", message=body["message"], errors=error.errors)
    else:
        log.warning("request.rejected", message=body["message"])

    set_rollback()
    return Response(body, status=status)


def _flatten_drf_detail(detail: Any, prefix: str = "") -> list[str]:
    if isinstance(detail, dict):
        flattened: list[str] = []
        for field, value in detail.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            flattened.extend(_flatten_drf_detail(value, name))
        return flattened
    if isinstance(detail, list):
        flattened = []
        for value in detail:
            flattened.extend(_flatten_drf_detail(value, prefix))
        return flattened
    return [f"{prefix or 'body'}: {detail}"]
