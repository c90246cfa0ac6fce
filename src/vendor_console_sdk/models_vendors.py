from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .models import loose_status


class VendorStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PendingVendor(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | str
    first_name: str | None = Field(default=None, validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str | None = Field(default=None, validation_alias=AliasChoices("lastName", "last_name"))
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    business_name: str | None = None
    payout_method: str | None = None
    status: str | None = VendorStatus.PENDING.value
    created_at: datetime | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _loose_status(cls, value: object) -> str | None:
        return loose_status(value)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class VendorDecision(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    status: VendorStatus
    admin_notes: str = Field(default="", serialization_alias="adminNotes")

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)
