"""Translation of store failures into banking domain errors.

This is the only place that knows store-specific error codes. Repositories
hand over the code and message of a failed call and get a domain error back
as an exception.
"""

from __future__ import annotations

import asyncio
from typing import NoReturn, Optional

from sqlalchemy.exc import DBAPIError

from bankrepo.domain.banking.exceptions import (
    DuplicateResourceError,
    StoreFailureError,
)

# PostgreSQL SQLSTATE unique_violation, plus SQL Server's duplicate key numbers
UNIQUE_VIOLATION_CODES = frozenset({"23505", "2627", "2601"})

# Raised by the driver while connecting, before SQLAlchemy has a DBAPI
# connection whose errors it could wrap
CONNECTION_ERRORS = (OSError, asyncio.TimeoutError)


def store_error_code(exc: BaseException) -> Optional[str]:
    """Extract the driver's error code from a wrapped DBAPI error.

    Connection errors raised outside SQLAlchemy carry no store code.
    """
    if not isinstance(exc, DBAPIError):
        return None
    orig = exc.orig
    if orig is None:
        return None

    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)

    # pyodbc / pymssql put the native error number first in args
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return str(args[0])
    return None


def store_error_message(exc: BaseException) -> str:
    """Return the driver's own message, without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def translate_store_error(code: Optional[str], message: str) -> NoReturn:
    """Raise the domain error matching a store failure.

    Parameters
    ----------
    code
        Store error code (SQLSTATE or native error number), if known
    message
        Store error message; kept in the error details, never in its message

    Raises
    ------
    DuplicateResourceError
        If the code signals a uniqueness violation
    StoreFailureError
        For every other code
    """
    if code is not None and code in UNIQUE_VIOLATION_CODES:
        raise DuplicateResourceError(store_code=code)
    raise StoreFailureError(store_code=code, reason=message)
