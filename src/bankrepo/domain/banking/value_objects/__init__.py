"""Value objects for banking domain."""

from bankrepo.domain.banking.value_objects.bank import Bank, BankInformation
from bankrepo.domain.banking.value_objects.status import Status

__all__ = [
    "Bank",
    "BankInformation",
    "Status",
]
