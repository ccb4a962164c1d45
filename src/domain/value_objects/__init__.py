"""Immutable value objects for filters and report output."""

from .report import (
    DateRange,
    ProductSales,
    ReportFilter,
    ReportSummary,
    quantize_money,
)
from .search_criteria import (
    DateRangePreset,
    InventoryCriteria,
    SalesHistoryCriteria,
    SortOrder,
    custom_range,
    resolve_preset,
)

__all__ = [
    "DateRange",
    "ReportFilter",
    "ReportSummary",
    "ProductSales",
    "quantize_money",
    "SortOrder",
    "DateRangePreset",
    "SalesHistoryCriteria",
    "InventoryCriteria",
    "resolve_preset",
    "custom_range",
]
