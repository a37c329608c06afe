"""Customer domain exceptions.

Raised by the Service Layer; each one fixes its ``ErrorKind`` and
reason so the HTTP boundary can shape the response.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound


class CustomerNotFound(EntityNotFound):
    """The requested customer does not exist."""

    default_message = "Customer not found"
