from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..collection import PageRequest
from ..idempotency import idempotency_headers
from ..models_vendors import PendingVendor, VendorDecision
from ..pagination import DecodedPage, decode_page
from .base import BaseClient


@dataclass
class VendorsClient(BaseClient):
    def fetch_pending_page(self, request: PageRequest) -> object:
        params: dict[str, Any] = {"limit": request.page_size, "page": request.page}
        if request.filters.get("search"):
            params["search"] = request.filters["search"]
        return self._request(
            "GET",
            "/admin/vendors/pending",
            params=params,
            module="vendors",
            operation="list_pending_vendors",
        )

    def list_pending_vendors(self) -> DecodedPage[PendingVendor]:
        payload = self._request(
            "GET", "/admin/vendors/pending", module="vendors", operation="list_pending_vendors"
        )
        return decode_page(payload, "vendors", PendingVendor)

    def decide_vendor(
        self,
        vendor_id: int | str,
        decision: VendorDecision,
        *,
        idempotency_key: str | None = None,
    ) -> dict[str, Any]:
        payload = self._request(
            "PATCH",
            f"/admin/vendors/{vendor_id}/approve",
            json_body=decision.to_payload(),
            headers=idempotency_headers(idempotency_key) if idempotency_key else {},
            module="vendors",
            operation=f"vendor_{decision.status.value}",
        )
        return payload if isinstance(payload, dict) else {}
