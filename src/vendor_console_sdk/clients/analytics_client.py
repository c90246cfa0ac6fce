from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import data_format_error
from ..metrics import monthly_revenue_series
from ..models_analytics import VendorAnalytics
from .base import BaseClient


@dataclass
class AnalyticsClient(BaseClient):
    def get_analytics(self, vendor_id: int | str | None = None, year: int | None = None) -> VendorAnalytics:
        params: dict[str, int | str] = {}
        if vendor_id is not None:
            params["vendor_id"] = vendor_id
        if year is not None:
            params["year"] = year
        payload = self._request(
            "GET",
            "/vendor/analytics",
            params=params,
            module="analytics",
            operation="get_analytics",
        )
        if not isinstance(payload, dict):
            raise data_format_error("Expected analytics response to be a JSON object", payload)
        body = payload.get("data", payload)
        if not isinstance(body, dict):
            raise data_format_error("Analytics response has no data object", payload)
        try:
            return VendorAnalytics.model_validate(body)
        except PydanticValidationError as exc:
            raise data_format_error(f"Invalid analytics: {exc.errors()[0]['msg']}", payload) from exc

    def get_monthly_revenue(self, vendor_id: int | str, year: int) -> list[Decimal]:
        analytics = self.get_analytics(vendor_id, year)
        if analytics.monthly_trends is None:
            raise data_format_error("Monthly revenue data is missing from analytics response")
        return monthly_revenue_series(analytics.monthly_trends, year)
