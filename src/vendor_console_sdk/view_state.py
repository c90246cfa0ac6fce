from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .ui_errors import ViewError


class ViewStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: ViewStatus
    message: str
    error: ViewError | None = None

    @property
    def busy(self) -> bool:
        return self.status is ViewStatus.LOADING

    def render(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "error_kind": self.error.kind if self.error else None,
            "trace_id": self.error.trace_id if self.error else None,
        }


def resolve_view_state(*, loading: bool, has_data: bool, error: ViewError | None) -> ViewState:
    if loading:
        return ViewState(status=ViewStatus.LOADING, message="Loading")
    if error is not None:
        return ViewState(status=ViewStatus.ERROR, message=error.message, error=error)
    if not has_data:
        return ViewState(status=ViewStatus.EMPTY, message="No records")
    return ViewState(status=ViewStatus.SUCCESS, message="Ready")
