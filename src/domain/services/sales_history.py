"""
Sales history listing.

Filtering and ordering of the sales list shown to staff, including
reversed sales. Unlike reports, history can be narrowed by status.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from core.config import settings
from core.logging import get_logger
from core.time_utils import epoch_millis

from ..entities.sales import SaleTransaction
from ..value_objects.search_criteria import SalesHistoryCriteria, SortOrder, resolve_preset

logger = get_logger(__name__)


def _matches_query(transaction: SaleTransaction, query: str) -> bool:
    needle = query.casefold()
    return any(
        needle in item.product_name.casefold() or needle in item.sku.casefold()
        for item in transaction.line_items
    )


def _window(
    criteria: SalesHistoryCriteria,
    tz: tzinfo,
    now: datetime | None,
) -> tuple[int, int] | None:
    if criteria.start is not None:
        return epoch_millis(criteria.start), epoch_millis(criteria.end)

    if criteria.preset is not None:
        now = now or datetime.now(tz)
        if now.tzinfo is None:
            now = now.replace(tzinfo=tz)
        bounds = resolve_preset(criteria.preset, now)
        if bounds is not None:
            return epoch_millis(bounds[0]), epoch_millis(bounds[1])

    return None


def filter_sales_history(
    transactions: Iterable[SaleTransaction],
    criteria: SalesHistoryCriteria,
    tz: tzinfo | None = None,
    now: datetime | None = None,
) -> list[SaleTransaction]:
    """
    Apply history criteria and sort.

    Args:
        transactions: Sales snapshot
        criteria: Window, search, category, status and order
        tz: Zone for preset windows (default from settings)
        now: Reference time for presets (default: current time in `tz`)

    Returns:
        New list of matching transactions
    """
    tz = tz or settings.tzinfo
    records = list(transactions)
    total = len(records)

    window = _window(criteria, tz, now)
    if window is not None:
        start_ms, end_ms = window
        records = [r for r in records if start_ms <= r.timestamp <= end_ms]

    if criteria.search_query:
        records = [r for r in records if _matches_query(r, criteria.search_query)]

    if criteria.category is not None:
        records = [r for r in records if r.has_category(criteria.category)]

    if criteria.status is not None:
        records = [r for r in records if r.status == criteria.status]

    # Only time orders apply to sales; anything else falls back to newest first
    newest_first = criteria.sort_order != SortOrder.OLDEST_FIRST
    records.sort(key=lambda r: r.timestamp, reverse=newest_first)

    logger.debug("Sales history kept %d of %d records", len(records), total)
    return records
