"""SQLAlchemy implementation of BankRepository."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NoReturn, Optional
from uuid import UUID

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine

from bankrepo.domain.banking.exceptions import (
    ResourceCreationFailedError,
    ResourceUpdateFailedError,
)
from bankrepo.domain.banking.repositories import BankRepository
from bankrepo.domain.banking.value_objects import Bank, BankInformation, Status
from bankrepo.infrastructure.persistence.sqlalchemy.error_translator import (
    CONNECTION_ERRORS,
    store_error_code,
    store_error_message,
    translate_store_error,
)
from bankrepo.infrastructure.persistence.sqlalchemy.statements import (
    CHANGE_BANK_STATUS,
    CREATE_BANK,
    GET_BANK,
    LIST_BANKS,
)

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)

# Failures of the call itself or of connecting to the store
STORE_ERRORS = (DBAPIError, *CONNECTION_ERRORS)


class BankRepositorySQLAlchemy(BankRepository):
    """SQLAlchemy implementation of bank repository.

    Every operation checks a connection out of the engine and returns it when
    the statement is done, whether it succeeded or not. No connection is held
    between operations, so one instance may serve concurrent callers.
    Reads use ``engine.connect()``; writes use ``engine.begin()`` so the single
    statement is committed on success.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        """Engine the repository checks connections out of."""
        return self._engine

    async def list_banks(self) -> list[BankInformation]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(LIST_BANKS)
                rows = result.mappings().all()
        except STORE_ERRORS as exc:
            self._raise_translated("list banks", exc)

        logger.debug("Listed %d banks", len(rows))
        return [self._map_to_domain(row) for row in rows]

    async def fetch_bank(self, bank_id: UUID) -> Optional[BankInformation]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(GET_BANK, {"id": bank_id})
                row = result.mappings().first()
        except STORE_ERRORS as exc:
            self._raise_translated(f"fetch bank {bank_id}", exc)

        if row is None:
            logger.debug("Bank not found: %s", bank_id)
            return None

        return self._map_to_domain(row)

    async def create_bank(self, bank: Bank) -> UUID:
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    CREATE_BANK,
                    {"acronym": bank.acronym, "name": bank.name},
                )
                row = result.mappings().first()
        except STORE_ERRORS as exc:
            self._raise_translated(f"create bank {bank.acronym}", exc)

        bank_id = _parse_identifier(row["id"]) if row is not None else None
        if bank_id is None or bank_id == NIL_UUID:
            logger.error("Store returned no identifier for bank %s", bank.acronym)
            raise ResourceCreationFailedError(bank.acronym)

        logger.info("Bank created: %s (%s)", bank.acronym, bank_id)
        return bank_id

    async def change_bank_status(self, bank_id: UUID, status: Status) -> None:
        # Affected rows are not checked: an unknown id is a silent success
        try:
            async with self._engine.begin() as conn:
                await conn.execute(
                    CHANGE_BANK_STATUS,
                    {"id": bank_id, "status": int(status)},
                )
        except STORE_ERRORS as exc:
            reason = store_error_message(exc)
            logger.error(
                "Status update failed for bank %s (status=%s): %s",
                bank_id,
                status,
                reason,
            )
            raise ResourceUpdateFailedError(bank_id, status, reason) from exc

        logger.info("Bank status changed: %s -> %s", bank_id, status)

    def _raise_translated(self, operation: str, exc: Exception) -> NoReturn:
        code = store_error_code(exc)
        message = store_error_message(exc)
        logger.error(
            "Store error during %s: code=%s, message=%s",
            operation,
            code,
            message,
        )
        translate_store_error(code, message)

    def _map_to_domain(self, row: Mapping[str, Any]) -> BankInformation:
        raw_id = row["id"]
        return BankInformation(
            # A malformed stored id is store corruption: let ValueError surface
            id=raw_id if isinstance(raw_id, UUID) else UUID(str(raw_id)),
            name=row["name"],
            acronym=row["acronym"],
            status=Status.parse(row["status"]),
        )


def _parse_identifier(value: Any) -> Optional[UUID]:
    """Lenient identifier parsing for values returned by the create call."""
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
