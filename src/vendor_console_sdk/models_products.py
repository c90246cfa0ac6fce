from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import loose_flag
from .status import StatusBadge, resolve_product_status


class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | str
    name: str
    description: str | None = None
    price: Decimal
    compare_at_price: Decimal | None = None
    sku: str | None = None
    category_id: int | str | None = None
    categories: str | None = None
    vendor_name: str | None = None
    thumbnail_url: str | None = None
    file_key: str | None = None
    is_published: bool | None = False
    is_active: bool | None = False
    average_rating: float | None = None
    reviews_count: int = 0
    created_at: datetime | None = None

    @field_validator("is_published", "is_active", mode="before")
    @classmethod
    def _loose_flags(cls, value: object) -> bool | None:
        return loose_flag(value)

    @property
    def display_status(self) -> StatusBadge:
        return resolve_product_status(self.is_published, self.is_active)

    @property
    def has_discount(self) -> bool:
        return self.compare_at_price is not None and self.compare_at_price > self.price


class ProductQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    limit: int = 5
    offset: int = 0
    search: str | None = None
    status: str | None = None


class ProductCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    description: str = ""
    price: Decimal = Field(gt=0)
    compare_at_price: Decimal | None = None
    sku: str | None = None
    category_id: int | str
    vendor_id: int | str | None = None
    file_key: str
    original_file_name: str
    file_size: str
    file_type: str
    duration: str | None = None
    preview_url: str | None = None
    thumbnail_url: str | None = None
