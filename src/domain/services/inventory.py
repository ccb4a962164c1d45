"""Inventory listing and stock level checks."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from core.config import settings
from core.logging import get_logger

from ..entities.inventory import InventoryItem
from ..value_objects.search_criteria import InventoryCriteria, SortOrder

logger = get_logger(__name__)

# sort key and descending flag per order
_SORT_KEYS: dict[SortOrder, tuple[Callable[[InventoryItem], Any], bool]] = {
    SortOrder.NEWEST_FIRST: (lambda item: item.last_updated, True),
    SortOrder.OLDEST_FIRST: (lambda item: item.last_updated, False),
    SortOrder.QUANTITY_LOW_TO_HIGH: (lambda item: item.quantity, False),
    SortOrder.QUANTITY_HIGH_TO_LOW: (lambda item: item.quantity, True),
    SortOrder.PRICE_LOW_TO_HIGH: (lambda item: item.selling_price, False),
    SortOrder.PRICE_HIGH_TO_LOW: (lambda item: item.selling_price, True),
}


def filter_inventory(
    items: Iterable[InventoryItem],
    criteria: InventoryCriteria,
) -> list[InventoryItem]:
    """Search, narrow by category, then sort. Returns a new list."""
    result = list(items)

    if criteria.search_query:
        result = [item for item in result if item.matches_query(criteria.search_query)]

    if criteria.category is not None:
        result = [item for item in result if item.category == criteria.category]

    key, descending = _SORT_KEYS[criteria.sort_order]
    result.sort(key=key, reverse=descending)
    return result


def low_stock_items(
    items: Iterable[InventoryItem],
    threshold: int | None = None,
) -> list[InventoryItem]:
    """Items whose quantity is at or below the threshold, in input order."""
    threshold = settings.low_stock_threshold if threshold is None else threshold
    low = [item for item in items if item.is_low_stock(threshold)]
    if low:
        logger.info("%d item(s) at or below stock threshold %d", len(low), threshold)
    return low
