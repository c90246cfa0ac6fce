from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from .models_analytics import MonthlyTrend, VendorAnalytics
from .status import Severity

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)")
ZERO = Decimal("0")
CENT = Decimal("0.01")
# The previous-period baseline is a quarter of the all-time figure, which only
# approximates a trailing week.
BASELINE_DIVISOR = Decimal("4")

Numeric = Decimal | int | float | str | None


def parse_currency(raw: Numeric) -> Decimal:
    """Parse "$1,234.56" style values; anything unparseable is 0."""
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else ZERO
    if isinstance(raw, (int, float)):
        return _to_decimal(str(raw))
    cleaned = _NON_NUMERIC_RE.sub("", str(raw))
    match = _LEADING_NUMBER_RE.match(cleaned)
    if not match:
        return ZERO
    return _to_decimal(match.group(0))


def _to_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        return ZERO
    return value if value.is_finite() else ZERO


def parse_amount(raw: Numeric) -> Decimal | None:
    """Strict form-input parse: None unless the whole value is a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def percent_change(current: Numeric, previous: Numeric) -> Decimal:
    current_value = parse_currency(current)
    previous_value = parse_currency(previous)
    if previous_value == 0:
        return ZERO
    return (current_value - previous_value) / previous_value * 100


def weekly_baseline(all_time_total: Numeric) -> Decimal:
    return parse_currency(all_time_total) / BASELINE_DIVISOR


@dataclass(frozen=True)
class MetricCard:
    name: str
    value: Decimal
    last_7_days: Decimal
    change_percent: Decimal

    @property
    def direction(self) -> str:
        return "up" if self.change_percent >= 0 else "down"

    @property
    def severity(self) -> Severity:
        return Severity.SUCCESS if self.change_percent >= 0 else Severity.ERROR

    @property
    def change_display(self) -> str:
        return f"{abs(self.change_percent).quantize(CENT, rounding=ROUND_HALF_UP)}%"


@dataclass(frozen=True)
class DashboardMetrics:
    orders: MetricCard
    revenue: MetricCard


def summarize_analytics(analytics: VendorAnalytics) -> DashboardMetrics:
    all_time = analytics.all_time
    last_week = analytics.last_7_days

    total_orders = Decimal(all_time.total_orders) if all_time else ZERO
    weekly_orders = Decimal(last_week.orders_last_7_days) if last_week else ZERO
    total_revenue = parse_currency(all_time.total_revenue) if all_time else ZERO
    weekly_revenue = parse_currency(last_week.revenue_last_7_days) if last_week else ZERO

    return DashboardMetrics(
        orders=MetricCard(
            name="orders",
            value=total_orders,
            last_7_days=weekly_orders,
            change_percent=percent_change(weekly_orders, weekly_baseline(total_orders)),
        ),
        revenue=MetricCard(
            name="revenue",
            value=total_revenue.quantize(CENT, rounding=ROUND_HALF_UP),
            last_7_days=weekly_revenue.quantize(CENT, rounding=ROUND_HALF_UP),
            change_percent=percent_change(weekly_revenue, weekly_baseline(total_revenue)),
        ),
    )


def monthly_revenue_series(trends: Iterable[MonthlyTrend], year: int) -> list[Decimal]:
    series = [ZERO] * 12
    for trend in trends:
        parts = trend.month.split("-")
        if len(parts) < 2:
            continue
        try:
            trend_year, month = int(parts[0]), int(parts[1])
        except ValueError:
            continue
        if trend_year != year or not 1 <= month <= 12:
            continue
        series[month - 1] = parse_currency(trend.revenue)
    return series


def format_price(value: Numeric) -> str:
    amount = parse_currency(value).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
