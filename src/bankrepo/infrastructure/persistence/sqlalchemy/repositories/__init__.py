"""SQLAlchemy repository implementations organized by bounded context."""

from bankrepo.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankRepositorySQLAlchemy,
)
from bankrepo.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
    create_bank_repository,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "create_bank_repository",
    # Banking
    "BankRepositorySQLAlchemy",
]
