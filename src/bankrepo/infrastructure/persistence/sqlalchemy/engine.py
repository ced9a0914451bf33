"""Async engine construction for the bank store."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from bankrepo_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine for the BankDB connection string.

    Raises ConfigurationError when the connection string is missing, so a
    misconfigured process fails at startup rather than on first query.
    """
    settings = settings or get_settings()
    database_url = settings.bank_db_url

    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    logger.info("Using bank database: %s", db_display)

    return create_async_engine(
        database_url,
        echo=settings.db_echo,
        pool_pre_ping=settings.db_pool_pre_ping,
    )
