"""Banking domain SQLAlchemy repositories."""

from bankrepo.infrastructure.persistence.sqlalchemy.repositories.banking.bank_repository import (  # NOQA: E501
    BankRepositorySQLAlchemy,
)

__all__ = [
    "BankRepositorySQLAlchemy",
]
