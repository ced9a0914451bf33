"""SQLAlchemy repository factory wiring settings, engine and repositories."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from bankrepo.infrastructure.persistence.sqlalchemy.engine import (
    create_engine_from_settings,
)
from bankrepo.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankRepositorySQLAlchemy,
)
from bankrepo_config.settings import Settings

logger = logging.getLogger(__name__)


class SQLAlchemyRepositoryFactory:
    """Creates repositories sharing one async engine."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

        # Cached instances (created on demand)
        self._bank_repo: BankRepositorySQLAlchemy | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
    ) -> SQLAlchemyRepositoryFactory:
        """Build the engine from the BankDB connection string.

        Fails fast with ConfigurationError when it is not configured.
        """
        return cls(create_engine_from_settings(settings))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def bank_repository(self) -> BankRepositorySQLAlchemy:
        if self._bank_repo is None:
            self._bank_repo = BankRepositorySQLAlchemy(self._engine)
        return self._bank_repo

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()
        logger.debug("Repository engine disposed")


def create_bank_repository(
    settings: Optional[Settings] = None,
) -> BankRepositorySQLAlchemy:
    """Shortcut for callers that only need the bank repository.

    The repository owns a fresh engine; release its pool with
    ``await repo.engine.dispose()`` when done.
    """
    return SQLAlchemyRepositoryFactory.from_settings(settings).bank_repository()
