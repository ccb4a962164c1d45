"""Domain layer containing sales entities, report value objects and services."""

# Core entities
from .entities import InventoryItem, SaleLineItem, SaleStatus, SaleTransaction

# Value objects
from .value_objects import (
    DateRange,
    DateRangePreset,
    InventoryCriteria,
    ProductSales,
    ReportFilter,
    ReportSummary,
    SalesHistoryCriteria,
    SortOrder,
)

# Interfaces
from .interfaces import ISalesRepository

# Services
from .services import (
    ReportAggregator,
    ReportService,
    compute_report,
    filter_inventory,
    filter_sales_history,
    list_categories,
    list_salespeople,
    low_stock_items,
)

# Validators
from .validators import BusinessRuleValidator, validate_transactions

__all__ = [
    # Entities
    "SaleTransaction",
    "SaleLineItem",
    "SaleStatus",
    "InventoryItem",

    # Value objects
    "DateRange",
    "ReportFilter",
    "ReportSummary",
    "ProductSales",
    "SortOrder",
    "DateRangePreset",
    "SalesHistoryCriteria",
    "InventoryCriteria",

    # Interfaces
    "ISalesRepository",

    # Services
    "ReportAggregator",
    "ReportService",
    "compute_report",
    "list_salespeople",
    "list_categories",
    "filter_sales_history",
    "filter_inventory",
    "low_stock_items",

    # Validators
    "BusinessRuleValidator",
    "validate_transactions",
]
