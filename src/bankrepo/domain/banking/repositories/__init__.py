"""Repository interfaces for banking domain."""

from bankrepo.domain.banking.repositories.bank_repository import BankRepository

__all__ = [
    "BankRepository",
]
