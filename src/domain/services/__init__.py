"""Domain services: reports, sales history and inventory listings."""

from .inventory import filter_inventory, low_stock_items
from .report_aggregator import (
    ReportAggregator,
    compute_report,
    filter_transactions,
    list_categories,
    list_salespeople,
)
from .report_service import ReportService
from .sales_history import filter_sales_history

__all__ = [
    "ReportAggregator",
    "compute_report",
    "filter_transactions",
    "list_categories",
    "list_salespeople",
    "ReportService",
    "filter_sales_history",
    "filter_inventory",
    "low_stock_items",
]
