from __future__ import annotations

from dataclasses import dataclass

from .exceptions import (
    ApiError,
    BusinessRuleError,
    ClientValidationError,
    DataFormatError,
    NetworkError,
    RequestRejectedError,
)

VALIDATION = "validation"
BUSINESS_RULE = "business_rule"
DATA_FORMAT = "data_format"
NETWORK = "network"
API = "api"

_RETRYABLE_KINDS = {NETWORK, DATA_FORMAT, API}


@dataclass(frozen=True)
class ViewError:
    kind: str
    message: str
    details: str | None = None
    trace_id: str | None = None

    @property
    def retryable(self) -> bool:
        return self.kind in _RETRYABLE_KINDS


def to_view_error(exc: Exception) -> ViewError:
    if isinstance(exc, BusinessRuleError):
        return ViewError(kind=BUSINESS_RULE, message=str(exc))
    if isinstance(exc, ClientValidationError):
        return ViewError(kind=VALIDATION, message=str(exc))
    if isinstance(exc, DataFormatError):
        return ViewError(kind=DATA_FORMAT, message=exc.message or "Unexpected data format received from server")
    if isinstance(exc, NetworkError):
        return ViewError(kind=NETWORK, message="Could not reach the server", details=exc.message, trace_id=exc.trace_id)
    if isinstance(exc, RequestRejectedError):
        return ViewError(kind=VALIDATION, message=exc.message, details=_details(exc), trace_id=exc.trace_id)
    if isinstance(exc, ApiError):
        primary = exc.message.strip() or "Request failed"
        return ViewError(kind=API, message=primary, details=_details(exc), trace_id=exc.trace_id)
    return ViewError(kind=API, message=str(exc) or type(exc).__name__)


def _details(exc: ApiError) -> str:
    details = f"{exc.code} (HTTP {exc.status_code})"
    if exc.details:
        details = f"{details}: {exc.details}"
    return details
