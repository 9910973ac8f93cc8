"""Errors raised by the commerce domain.

Every failure surfaced by ``OrderService`` is a ``CommerceError`` with a
``kind`` that callers can branch on, and a ``context`` dict describing
the records involved.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    VALIDATION = "Validation"
    NOT_FOUND = "NotFound"
    INVALID_STATE = "InvalidState"
    STORE = "Store"


class CommerceError(Exception):
    """Base exception for all commerce errors."""

    kind = ErrorKind.STORE

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.kind.value, "detail": self.message, "context": self.context}


class CommerceValidationError(CommerceError):
    """Raised when input or a state transition is rejected."""

    kind = ErrorKind.VALIDATION


class CommerceNotFoundError(CommerceError):
    """Raised when a referenced record does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidStateError(CommerceError):
    """Raised when a record exists but cannot be used as it is (e.g. an empty cart)."""

    kind = ErrorKind.INVALID_STATE


class StoreError(CommerceError):
    """Raised for unclassified failures of the underlying store."""

    kind = ErrorKind.STORE


HTTP_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 409,
    ErrorKind.STORE: 500,
}
