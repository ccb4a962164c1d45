"""
Value objects for sales reports.
Encapsulates the report window, filters and the computed summary.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, NamedTuple

import pandas as pd

from core.config import settings
from core.constants import ERROR_INVALID_DATE_RANGE, ZERO
from core.time_utils import epoch_millis


def quantize_money(amount: Decimal, places: int | None = None) -> Decimal:
    """Round to currency precision."""
    places = settings.currency_places if places is None else places
    return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of calendar days.
    Immutable and self-validating.
    """
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(ERROR_INVALID_DATE_RANGE.format(start=self.start, end=self.end))

    def to_epoch_millis(self, tz: tzinfo) -> tuple[int, int]:
        """
        Millisecond bounds for the range in the given zone.

        The lower bound is 00:00:00.000 of `start`, the upper bound is
        23:59:59.999 of `end`; both are inclusive.
        """
        start_of_day = datetime.combine(self.start, time.min, tzinfo=tz)
        next_day = datetime.combine(self.end + timedelta(days=1), time.min, tzinfo=tz)
        return epoch_millis(start_of_day), epoch_millis(next_day) - 1

    def contains(self, timestamp: int, tz: tzinfo) -> bool:
        start_ms, end_ms = self.to_epoch_millis(tz)
        return start_ms <= timestamp <= end_ms

    @property
    def days(self) -> int:
        """Number of calendar days covered."""
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class ReportFilter:
    """Report window plus optional exact-match category and salesperson."""
    date_range: DateRange
    category: str | None = None
    salesperson: str | None = None

    @classmethod
    def last_days(
        cls,
        days: int | None = None,
        today: date | None = None,
        **kwargs: Any,
    ) -> ReportFilter:
        """Window ending today and starting `days` days earlier."""
        days = settings.default_report_days if days is None else days
        if days < 0:
            raise ValueError("days cannot be negative")
        end = today or datetime.now(settings.tzinfo).date()
        return cls(DateRange(end - timedelta(days=days), end), **kwargs)


class ProductSales(NamedTuple):
    """Total quantity sold for one product name."""
    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReportSummary:
    """KPIs and breakdowns for a filtered set of sales."""
    total_revenue: Decimal = ZERO
    total_profit: Decimal = ZERO
    transaction_count: int = 0
    category_breakdown: dict[str, Decimal] = field(default_factory=dict)
    daily_trend: dict[date, Decimal] = field(default_factory=dict)
    top_products: tuple[ProductSales, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0

    def sorted_trend(self) -> list[tuple[date, Decimal]]:
        """Daily trend ordered by day, oldest first."""
        return sorted(self.daily_trend.items())

    def trend_frame(self) -> pd.DataFrame:
        """Daily trend as a DataFrame with `day` and `revenue` columns, oldest first."""
        rows = self.sorted_trend()
        return pd.DataFrame(
            {
                "day": [day for day, _ in rows],
                "revenue": [float(revenue) for _, revenue in rows],
            },
            columns=["day", "revenue"],
        )

    def to_dict(self, places: int | None = None) -> dict[str, Any]:
        """Serialize for a presentation layer: money as fixed-point strings, days as ISO dates."""
        def money(amount: Decimal) -> str:
            return str(quantize_money(amount, places))

        return {
            "total_revenue": money(self.total_revenue),
            "total_profit": money(self.total_profit),
            "transaction_count": self.transaction_count,
            "category_breakdown": {
                category: money(revenue) for category, revenue in self.category_breakdown.items()
            },
            "daily_trend": {day.isoformat(): money(revenue) for day, revenue in self.sorted_trend()},
            "top_products": [
                {"product_name": product.product_name, "quantity": product.quantity}
                for product in self.top_products
            ],
        }
