"""Result values for callers that prefer matching over try/except.

Repository operations raise DomainException subclasses. ``capture`` awaits an
operation and folds its outcome into ``Ok`` or ``Failure`` so callers can write::

    match await capture(repo.create_bank(bank)):
        case Ok(value=bank_id):
            ...
        case Failure(error=DuplicateResourceError()):
            ...
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from bankrepo.domain.shared.exceptions import DomainException, ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's return value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the domain error that was raised."""

    error: DomainException

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def details(self) -> dict[str, Any]:
        return self.error.details


Result = Union[Ok[T], Failure]


async def capture(operation: Awaitable[T]) -> Result[T]:
    """Await ``operation`` and wrap its value or domain error."""
    try:
        value = await operation
    except DomainException as exc:
        return Failure(exc)
    return Ok(value)
