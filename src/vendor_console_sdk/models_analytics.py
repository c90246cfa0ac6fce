from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AllTimeStats(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_orders: int = 0
    # Revenue arrives as a number or a formatted string such as "$1,234.56".
    total_revenue: str | float | int | None = None


class LastSevenDaysStats(BaseModel):
    model_config = ConfigDict(extra="allow")

    orders_last_7_days: int = 0
    revenue_last_7_days: str | float | int | None = None


class MonthlyTrend(BaseModel):
    model_config = ConfigDict(extra="allow")

    month: str
    revenue: str | float | int | None = None


class VendorAnalytics(BaseModel):
    model_config = ConfigDict(extra="allow")

    all_time: AllTimeStats | None = None
    last_7_days: LastSevenDaysStats | None = None
    monthly_trends: list[MonthlyTrend] | None = None
