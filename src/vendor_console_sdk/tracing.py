from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Mapping

REQUEST_ID_HEADER = "X-Request-ID"
_RESPONSE_ID_HEADERS = (REQUEST_ID_HEADER, "X-Request-Id", "x-request-id", "X-Trace-ID")


@dataclass
class TraceContext:
    """Correlation id shared by the requests of one console session."""

    trace_id: str | None = None

    def ensure(self) -> str:
        if not self.trace_id:
            self.trace_id = uuid.uuid4().hex
        return self.trace_id

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        for key in _RESPONSE_ID_HEADERS:
            value = headers.get(key)
            if value:
                self.trace_id = value
                return

    def update_from_payload(self, payload: Mapping[str, object]) -> None:
        for key in ("trace_id", "request_id"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                self.trace_id = value
                return
