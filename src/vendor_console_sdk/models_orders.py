from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from .models import SortOrder, loose_status
from .status import StatusBadge, resolve_order_status, resolve_payment_status


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    order_item_id: int | str | None = None
    product_id: int | str
    product_name: str | None = None
    product_sku: str | None = None
    quantity: int = 1
    price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    image: str | None = None


class Order(BaseModel):
    model_config = ConfigDict(extra="allow")

    order_id: int | str
    order_number: str
    customer_name: str | None = None
    customer_email: str | None = None
    status: str | None = None
    payment_status: str | None = None
    total_amount: Decimal = Decimal("0")
    created_at: datetime | None = None
    items: list[OrderItem] = []

    @field_validator("status", "payment_status", mode="before")
    @classmethod
    def _loose_status(cls, value: object) -> str | None:
        return loose_status(value)

    @property
    def status_badge(self) -> StatusBadge:
        return resolve_order_status(self.status)

    @property
    def payment_badge(self) -> StatusBadge:
        return resolve_payment_status(self.payment_status)


class OrderQuery(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    limit: int = 5
    page: int = 1
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.DESC

    def to_params(self) -> dict[str, object]:
        return {
            "limit": self.limit,
            "page": self.page,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order.value,
        }
