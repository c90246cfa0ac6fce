from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..collection import PageRequest
from ..exceptions import data_format_error
from ..idempotency import idempotency_headers
from ..models_payouts import Balance, Payout, PayoutRequest
from ..pagination import DecodedPage, decode_page
from .base import BaseClient


@dataclass
class PayoutsClient(BaseClient):
    def fetch_page(self, request: PageRequest) -> object:
        return self._request(
            "GET",
            "/vendor/payouts",
            params={"limit": request.page_size, "page": request.page},
            module="payouts",
            operation="list_payouts",
        )

    def list_payouts(self) -> DecodedPage[Payout]:
        payload = self._request("GET", "/vendor/payouts", module="payouts", operation="list_payouts")
        return decode_page(payload, "payouts", Payout)

    def get_balance(self) -> Balance:
        payload = self._request("GET", "/vendor/balance", module="payouts", operation="get_balance")
        if not isinstance(payload, dict):
            raise data_format_error("Expected balance response to be a JSON object", payload)
        body = payload.get("data", payload)
        if not isinstance(body, dict):
            raise data_format_error("Balance response has no data object", payload)
        try:
            return Balance.model_validate(body)
        except PydanticValidationError as exc:
            raise data_format_error(f"Invalid balance: {exc.errors()[0]['msg']}", payload) from exc

    def request_payout(self, request: PayoutRequest, *, idempotency_key: str | None = None) -> dict[str, Any]:
        body = request.model_dump(mode="json")
        # The endpoint expects a JSON number, not the string form of a Decimal.
        body["amount"] = float(request.amount)
        payload = self._request(
            "POST",
            "/vendor/payouts/request",
            json_body=body,
            headers=idempotency_headers(idempotency_key) if idempotency_key else {},
            module="payouts",
            operation="request_payout",
        )
        return payload if isinstance(payload, dict) else {}
