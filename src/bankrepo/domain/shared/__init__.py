"""Shared domain components.

This module exports the exception hierarchy and result helpers used across
domain boundaries.
"""

from bankrepo.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
)
from bankrepo.domain.shared.result import Failure, Ok, Result, capture

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "EntityNotFoundError",
    "ConflictError",
    "PersistenceError",
    # Results
    "Ok",
    "Failure",
    "Result",
    "capture",
]
