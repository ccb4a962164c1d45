"""
Value Objects for Search and Filtering Operations
Encapsulates listing parameters with validation.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum

from ..entities.sales import SaleStatus


class SortOrder(str, Enum):
    """Listing sort orders offered by the inventory and sales screens."""
    NEWEST_FIRST = "newest_first"
    OLDEST_FIRST = "oldest_first"
    QUANTITY_LOW_TO_HIGH = "quantity_low_to_high"
    QUANTITY_HIGH_TO_LOW = "quantity_high_to_low"
    PRICE_LOW_TO_HIGH = "price_low_to_high"
    PRICE_HIGH_TO_LOW = "price_high_to_low"


class DateRangePreset(str, Enum):
    """Named sales history windows."""
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


def resolve_preset(preset: DateRangePreset, now: datetime) -> tuple[datetime, datetime] | None:
    """
    Window for a preset, ending at `now`.

    Periods start at midnight of the current day, week (Monday), month or
    year in the zone of `now`. ALL has no window.
    """
    if preset == DateRangePreset.ALL:
        return None

    today = now.date()
    if preset == DateRangePreset.TODAY:
        first_day = today
    elif preset == DateRangePreset.WEEK:
        first_day = today - timedelta(days=today.weekday())
    elif preset == DateRangePreset.MONTH:
        first_day = today.replace(day=1)
    elif preset == DateRangePreset.YEAR:
        first_day = today.replace(month=1, day=1)
    else:
        raise ValueError(f"Unsupported preset: {preset}")

    return datetime.combine(first_day, time.min, tzinfo=now.tzinfo), now


def custom_range(start_day: date, end_day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Window from the start of `start_day` to 23:59:59.999 on `end_day`."""
    if start_day > end_day:
        raise ValueError("Start date cannot be after end date")
    start = datetime.combine(start_day, time.min, tzinfo=tz)
    end = datetime.combine(end_day, time(23, 59, 59, 999000), tzinfo=tz)
    return start, end


@dataclass(frozen=True)
class SalesHistoryCriteria:
    """
    Value object for sales history filtering.
    Immutable and self-validating.
    """
    start: datetime | None = None
    end: datetime | None = None
    preset: DateRangePreset | None = None
    search_query: str = ""
    category: str | None = None
    status: SaleStatus | None = None
    sort_order: SortOrder = SortOrder.NEWEST_FIRST

    def __post_init__(self):
        """Validate criteria after initialization."""
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be given together")

        if self.start is not None and self.preset is not None:
            raise ValueError("Use either an explicit window or a preset, not both")

        if self.start is not None:
            if self.start.tzinfo is None or self.end.tzinfo is None:
                raise ValueError("Window bounds must be timezone-aware")
            if self.start > self.end:
                raise ValueError("start cannot be after end")


@dataclass(frozen=True)
class InventoryCriteria:
    """Value object for inventory listing parameters."""
    search_query: str = ""
    category: str | None = None
    sort_order: SortOrder = SortOrder.NEWEST_FIRST
