"""
Integration tests for BankRepositorySQLAlchemy against PostgreSQL.

These tests exercise the real store functions: uniqueness violations,
status round-trips and tolerance of unknown stored status values.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import text

from bankrepo.domain.banking.exceptions import (
    DuplicateResourceError,
    StoreFailureError,
)
from bankrepo.domain.banking.value_objects import Bank, Status
from bankrepo.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankRepositorySQLAlchemy,
)

pytestmark = pytest.mark.integration


class TestBankRepositoryPostgres:
    """Round-trips through the real schema."""

    @pytest.mark.asyncio
    async def test_list_banks_on_empty_table(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)

        assert await repo.list_banks() == []

    @pytest.mark.asyncio
    async def test_create_fetch_and_activate(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)

        bank_id = await repo.create_bank(Bank(name="First Bank", acronym="FB"))

        created = await repo.fetch_bank(bank_id)
        assert created is not None
        assert created.id == bank_id
        assert created.acronym == "FB"
        assert created.name == "First Bank"
        assert created.status == Status.CREATED

        await repo.change_bank_status(bank_id, Status.ACTIVE)

        activated = await repo.fetch_bank(bank_id)
        assert activated is not None
        assert activated.status == Status.ACTIVE

    @pytest.mark.asyncio
    async def test_duplicate_acronym_is_reported(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)
        await repo.create_bank(Bank(name="First Bank", acronym="FB"))

        with pytest.raises(DuplicateResourceError) as exc_info:
            await repo.create_bank(Bank(name="Another First Bank", acronym="FB"))

        assert exc_info.value.message == "Resource already exist"
        assert len(await repo.list_banks()) == 1

    @pytest.mark.asyncio
    async def test_fetch_unknown_id_returns_none(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)

        assert await repo.fetch_bank(uuid4()) is None

    @pytest.mark.asyncio
    async def test_status_change_for_unknown_id_is_silent(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)

        await repo.change_bank_status(uuid4(), Status.ACTIVE)

        assert await repo.list_banks() == []

    @pytest.mark.asyncio
    async def test_unknown_stored_status_reads_as_none(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)
        bank_id = await repo.create_bank(Bank(name="Drift Bank", acronym="DB"))

        async with bank_engine.begin() as conn:
            await conn.execute(
                text("UPDATE banks SET status = 42 WHERE id = :id"),
                {"id": bank_id},
            )

        fetched = await repo.fetch_bank(bank_id)
        assert fetched is not None
        assert fetched.status is None

        listed = await repo.list_banks()
        assert [bank.status for bank in listed] == [None]

    @pytest.mark.asyncio
    async def test_missing_schema_is_a_generic_store_failure(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)
        async with bank_engine.begin() as conn:
            await conn.execute(text("DROP TABLE banks CASCADE"))

        with pytest.raises(StoreFailureError) as exc_info:
            await repo.list_banks()

        assert exc_info.value.message == "An error occured"
        assert exc_info.value.details["store_code"] == "42P01"

    @pytest.mark.asyncio
    async def test_concurrent_creates_share_one_repository(self, bank_engine):
        repo = BankRepositorySQLAlchemy(bank_engine)

        ids = await asyncio.gather(
            *(
                repo.create_bank(Bank(name=f"Bank {i}", acronym=f"B{i}"))
                for i in range(5)
            )
        )

        assert len(set(ids)) == 5
        assert len(await repo.list_banks()) == 5
