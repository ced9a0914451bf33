"""Bank value objects (write-side input and read-side record)."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from bankrepo.domain.banking.value_objects.status import Status


class Bank(BaseModel):
    """
    Input for creating a bank.

    No identifier: the store assigns one on creation. Format rules for name
    and acronym belong to upstream callers.
    """

    name: str = Field(..., description="Display name of the bank")
    acronym: str = Field(..., description="Short code, unique across banks")

    model_config = ConfigDict(frozen=True)


class BankInformation(BaseModel):
    """
    A bank as read back from the store.

    ``status`` is None when the stored value does not map to a known
    Status member.
    """

    id: UUID = Field(..., description="Store-assigned identifier")
    name: str
    acronym: str
    status: Status | None = None

    model_config = ConfigDict(frozen=True)

    @field_serializer("status")
    def serialize_status(self, value: Status | None) -> str | None:
        return value.label if value is not None else None
