"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain layer. All domain exceptions inherit from DomainException so callers
can branch on a stable ``code`` instead of parsing messages.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for repository callers.

    These codes are part of the public contract. Should not be changed.
    """

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    BANK_NOT_FOUND = "BANK_NOT_FOUND"

    # Conflict Errors
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"

    # Persistence Errors
    RESOURCE_CREATION_FAILED = "RESOURCE_CREATION_FAILED"
    RESOURCE_UPDATE_FAILED = "RESOURCE_UPDATE_FAILED"
    STORE_FAILURE = "STORE_FAILURE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DUPLICATE_RESOURCE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PersistenceError(DomainException):
    """Raised when the backing store rejects or fails an operation."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.STORE_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
