"""Repository interface for banks."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bankrepo.domain.banking.exceptions import BankNotFoundError
from bankrepo.domain.banking.value_objects import Bank, BankInformation, Status


class BankRepository(ABC):
    """Repository for the bank records of the store.

    Callers never issue queries; they call these operations and branch on
    the domain exceptions they raise.
    """

    @abstractmethod
    async def list_banks(self) -> list[BankInformation]:
        """
        List every bank.

        Returns
        -------
        All banks, or an empty list when none exist

        Raises
        ------
        StoreFailureError
            If the store call fails
        """

    @abstractmethod
    async def fetch_bank(self, bank_id: UUID) -> Optional[BankInformation]:
        """
        Fetch a bank by its identifier.

        Parameters
        ----------
        bank_id
            Identifier assigned by the store

        Returns
        -------
        The bank, or None if no bank has this identifier
        """

    @abstractmethod
    async def create_bank(self, bank: Bank) -> UUID:
        """
        Create a bank and return its store-assigned identifier.

        Parameters
        ----------
        bank
            Name and acronym of the new bank

        Raises
        ------
        DuplicateResourceError
            If the acronym is already taken
        ResourceCreationFailedError
            If the store returned no usable identifier
        StoreFailureError
            For any other store failure
        """

    @abstractmethod
    async def change_bank_status(self, bank_id: UUID, status: Status) -> None:
        """
        Change the status of a bank.

        An identifier that matches no bank is not an error.

        Raises
        ------
        ResourceUpdateFailedError
            If the store rejects the update
        """

    async def get_bank(self, bank_id: UUID) -> BankInformation:
        """Fetch a bank, raising BankNotFoundError when it does not exist."""
        bank = await self.fetch_bank(bank_id)
        if bank is None:
            raise BankNotFoundError(bank_id)
        return bank
