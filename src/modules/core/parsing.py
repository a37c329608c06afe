"""Request parsing helpers.

Turn raw request input into validated DTOs, raising the failure kind
that matches where the input came from:

- request body              -> ``ValidationFailed``
- query / path constraints  -> ``ConstraintViolation``
- unconvertible parameter   -> ``TypeMismatch``
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.dtos import BIGINT_MAX, BIGINT_MIN
from modules.core.exceptions import ConstraintViolation, TypeMismatch, ValidationFailed

M = TypeVar("M", bound=BaseModel)

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def format_errors(exc: PydanticValidationError) -> List[str]:
    """Render Pydantic errors as ``"<field>: <reason>"`` strings."""
    formatted = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        formatted.append(f"{location}: {error['msg']}")
    return formatted


def parse_body(dto_class: Type[M], data: Any) -> M:
    """Validate a request body against ``dto_class``.

    Raises:
        ValidationFailed: listing every violated field.
    """
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationFailed(errors=format_errors(exc)) from exc


def parse_params(dto_class: Type[M], data: Any) -> M:
    """Validate already-converted query or path parameters.

    Raises:
        ConstraintViolation: listing every violated parameter.
    """
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        raise ConstraintViolation(errors=format_errors(exc)) from exc


def parse_int(value: Optional[str], name: str, default: Optional[int] = None) -> Optional[int]:
    """Convert a path or query value to a signed 64-bit ``int``.

    Only plain decimal literals are accepted: no surrounding whitespace,
    no ``_`` separators.  ``None`` or an empty string yields ``default``.

    Raises:
        TypeMismatch: if ``value`` is not such a literal or does not fit
            in 64 bits.
    """
    if value is None or value == "":
        return default
    if not INTEGER_LITERAL.fullmatch(value):
        raise TypeMismatch(value, name, expected="int")
    number = int(value)
    if not BIGINT_MIN <= number <= BIGINT_MAX:
        raise TypeMismatch(value, name, expected="int")
    return number
