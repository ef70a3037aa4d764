"""
Service-level exceptions.

Every business rule violation raised by the services derives from
``OrderFlowError`` so the application can translate all of them into
HTTP responses with a single exception handler (see ``main.py``).
Each subclass carries the status code it is reported with; the
exception message is sent to the client verbatim as ``detail``.
"""

from fastapi import status


class OrderFlowError(Exception):
    """Base class for all service errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(OrderFlowError):
    """A required field is missing or a value is invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(OrderFlowError):
    """A uniqueness rule was violated."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(OrderFlowError):
    """A requested entity or a referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(OrderFlowError):
    """The store rejected or failed a write.

    Reported to clients as a bad request with a fixed message; the
    underlying database error is chained as ``__cause__`` and logged
    by the service that raised it.
    """

    status_code = status.HTTP_400_BAD_REQUEST
