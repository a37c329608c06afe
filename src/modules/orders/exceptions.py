"""Order domain exceptions.

Raised by the Service Layer; the HTTP boundary turns them into
responses according to their ``ErrorKind``.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound, InvalidReference


class OrderNotFound(EntityNotFound):
    """The requested order does not exist."""

    default_message = "Order not found"


class InvalidCustomerReference(InvalidReference):
    """The customer referenced by a new order does not exist.

    Answered with 400 rather than 404: the order payload is at fault,
    not the requested resource.
    """

    default_message = "Invalid customer ID"
    default_status = 400
