"""Domain error kinds raised by flows and mapped to transport status at the API boundary."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base class for every error a flow is allowed to raise."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "An error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid input"


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
    default_message = "User not found"


class UnauthorizedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidTokenError(UnauthorizedError):
    """Raised for malformed, forged, expired or wrongly-typed tokens alike."""

    default_message = "Invalid or expired token"


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"


class InternalError(DomainError):
    kind = ErrorKind.INTERNAL


__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "InternalError",
    "InvalidTokenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
