from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .models import loose_status
from .status import StatusBadge, resolve_payout_status


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"
    STRIPE = "stripe"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Payout(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | str
    amount: Decimal
    status: str | None = "pending"
    payment_method: str | None = None
    payment_details: str | None = None
    created_at: datetime | None = None
    processed_at: datetime | None = None

    @field_validator("status", "payment_method", mode="before")
    @classmethod
    def _loose_text(cls, value: object) -> str | None:
        return loose_status(value)

    @property
    def status_badge(self) -> StatusBadge:
        return resolve_payout_status(self.status)

    @property
    def method_label(self) -> str:
        return (self.payment_method or "").replace("_", " ")


class Balance(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    available: Decimal = Field(
        default=Decimal("0"), ge=0, validation_alias=AliasChoices("available_balance", "available")
    )
    pending: Decimal = Field(default=Decimal("0"), ge=0, validation_alias=AliasChoices("pending_balance", "pending"))


class PayoutRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: Decimal = Field(gt=0)
    payment_method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    payment_details: str = Field(min_length=1)
