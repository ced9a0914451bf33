"""Banking domain exceptions.

This module defines the error kinds a bank repository can raise. Callers
branch on the exception type (or its ``code``) to tell duplicates, failed
creations, failed updates and generic store failures apart.

Messages are fixed where callers rely on them; store-specific context lives
in ``details``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from bankrepo.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
)

if TYPE_CHECKING:
    from bankrepo.domain.banking.value_objects import Status

DUPLICATE_RESOURCE_MESSAGE = "Resource already exist"
STORE_FAILURE_MESSAGE = "An error occured"


class DuplicateResourceError(ConflictError):
    """Raised when a create violates a uniqueness constraint."""

    def __init__(
        self,
        message: str = DUPLICATE_RESOURCE_MESSAGE,
        store_code: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.DUPLICATE_RESOURCE,
            details={"store_code": store_code} if store_code else None,
        )


class ResourceCreationFailedError(PersistenceError):
    """Raised when a create completes without yielding a usable identifier."""

    def __init__(self, acronym: str) -> None:
        super().__init__(
            message=f"Failed to create {acronym}",
            code=ErrorCode.RESOURCE_CREATION_FAILED,
            details={"acronym": acronym},
        )


class ResourceUpdateFailedError(PersistenceError):
    """Raised when the store rejects a status change."""

    def __init__(self, bank_id: UUID, status: Status, reason: str) -> None:
        super().__init__(
            message=(
                f"StatusUpdateFailed. Id:{bank_id}, Status:{status}, Message:{reason}"
            ),
            code=ErrorCode.RESOURCE_UPDATE_FAILED,
            details={"id": str(bank_id), "status": status.label, "reason": reason},
        )


class StoreFailureError(PersistenceError):
    """Raised for any store failure without a more specific kind.

    The message is deliberately generic; the store's own code and message
    are kept in ``details`` for logging.
    """

    def __init__(
        self,
        store_code: str | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(
            message=STORE_FAILURE_MESSAGE,
            code=ErrorCode.STORE_FAILURE,
            details={"store_code": store_code, "reason": reason},
        )


class BankNotFoundError(EntityNotFoundError):
    """Raised by callers that treat a missing bank as an error.

    ``fetch_bank`` itself returns None for a missing bank.
    """

    def __init__(self, bank_id: UUID) -> None:
        super().__init__(
            message=f"Bank '{bank_id}' not found",
            code=ErrorCode.BANK_NOT_FOUND,
            details={"id": str(bank_id)},
        )
