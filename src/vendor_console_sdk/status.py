"""Display status and badge severity for server records.

Every resolver is total: unknown or missing values come back with the
``default`` severity instead of raising, so one malformed row never breaks a
list render.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    DEFAULT = "default"


@dataclass(frozen=True)
class StatusBadge:
    label: str
    severity: Severity


PUBLISHED = StatusBadge("Published", Severity.SUCCESS)
DRAFT = StatusBadge("Draft", Severity.WARNING)
INACTIVE = StatusBadge("Inactive", Severity.DEFAULT)

ORDER_SEVERITY: Mapping[str, Severity] = {
    "completed": Severity.SUCCESS,
    "pending": Severity.WARNING,
    "cancelled": Severity.ERROR,
    "refunded": Severity.DEFAULT,
}
PAYMENT_SEVERITY: Mapping[str, Severity] = {
    "paid": Severity.SUCCESS,
    "pending": Severity.WARNING,
    "failed": Severity.ERROR,
    "refunded": Severity.DEFAULT,
}
PAYOUT_SEVERITY: Mapping[str, Severity] = {
    "completed": Severity.SUCCESS,
    "pending": Severity.WARNING,
    "failed": Severity.ERROR,
}
VENDOR_SEVERITY: Mapping[str, Severity] = {
    "approved": Severity.SUCCESS,
    "pending": Severity.WARNING,
    "rejected": Severity.ERROR,
}

UNKNOWN_LABEL = "Unknown"


def resolve_product_status(published: bool | None, active: bool | None) -> StatusBadge:
    if not active:
        return INACTIVE
    return PUBLISHED if published else DRAFT


def resolve_order_status(value: object) -> StatusBadge:
    return _resolve(value, ORDER_SEVERITY)


def resolve_payment_status(value: object) -> StatusBadge:
    return _resolve(value, PAYMENT_SEVERITY)


def resolve_payout_status(value: object) -> StatusBadge:
    return _resolve(value, PAYOUT_SEVERITY)


def resolve_vendor_status(value: object) -> StatusBadge:
    return _resolve(value, VENDOR_SEVERITY)


def _resolve(value: object, table: Mapping[str, Severity]) -> StatusBadge:
    if isinstance(value, Enum):
        value = value.value
    raw = str(value).strip() if value is not None else ""
    if not raw:
        return StatusBadge(UNKNOWN_LABEL, Severity.DEFAULT)
    key = raw.lower()
    severity = table.get(key, Severity.DEFAULT)
    return StatusBadge(key.replace("_", " ").capitalize(), severity)
