"""
Pytest fixtures for bank repository integration tests.

Uses Testcontainers PostgreSQL; these tests never touch a configured database.
"""

from tests.shared.fixtures.database import (
    async_engine,
    bank_engine,
    postgres_container,
)

# Make fixtures available
__all__ = ["async_engine", "bank_engine", "postgres_container"]
