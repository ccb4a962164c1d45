"""
Sales report aggregation.

Turns a snapshot of sales and inventory into revenue, profit, category,
daily trend and top product figures for a report window. Everything here
is a pure transform over its arguments.
"""
from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, tzinfo
from decimal import Decimal

from core.config import settings
from core.constants import ZERO
from core.logging import get_logger

from ..entities.inventory import InventoryItem, build_cost_lookup
from ..entities.sales import SaleTransaction
from ..validators.business_rules import validate_transactions
from ..value_objects.report import ProductSales, ReportFilter, ReportSummary

logger = get_logger(__name__)


def filter_transactions(
    transactions: Iterable[SaleTransaction],
    report_filter: ReportFilter,
    tz: tzinfo,
) -> list[SaleTransaction]:
    """
    Transactions inside the report window matching the optional filters.

    Status is not considered; Completed and Reversed sales both pass.
    """
    start_ms, end_ms = report_filter.date_range.to_epoch_millis(tz)
    category = report_filter.category
    salesperson = report_filter.salesperson

    return [
        transaction
        for transaction in transactions
        if start_ms <= transaction.timestamp <= end_ms
        and (category is None or transaction.has_category(category))
        and (salesperson is None or transaction.creator_name == salesperson)
    ]


def rank_products(quantities: dict[str, int], limit: int) -> tuple[ProductSales, ...]:
    """Highest quantities first; equal quantities keep first-seen order."""
    ranked = sorted(quantities.items(), key=lambda entry: entry[1], reverse=True)
    return tuple(ProductSales(name, quantity) for name, quantity in ranked[:limit])


class ReportAggregator:
    """
    Computes ReportSummary values.

    Holds only configuration; safe to share between callers.
    """

    def __init__(
        self,
        tz: tzinfo | None = None,
        top_products_limit: int | None = None,
        strict: bool | None = None,
    ) -> None:
        self.tz = settings.tzinfo if tz is None else tz
        self.top_products_limit = (
            settings.top_products_limit if top_products_limit is None else top_products_limit
        )
        if self.top_products_limit < 0:
            raise ValueError("top_products_limit cannot be negative")
        self.strict = settings.strict_validation if strict is None else strict

    def compute(
        self,
        transactions: Iterable[SaleTransaction],
        inventory_items: Iterable[InventoryItem],
        report_filter: ReportFilter,
    ) -> ReportSummary:
        """
        Build the report for `report_filter`.

        Args:
            transactions: Sales snapshot, any status
            inventory_items: Inventory snapshot used for cost prices
            report_filter: Window and optional category/salesperson

        Returns:
            A new ReportSummary; zeroed when nothing matches

        Raises:
            InvalidInputError: In strict mode, when any transaction is malformed
        """
        transactions = list(transactions)
        if self.strict:
            validate_transactions(transactions)

        selected = filter_transactions(transactions, report_filter, self.tz)
        logger.debug(
            "Report filter kept %d of %d transactions", len(selected), len(transactions)
        )

        costs = build_cost_lookup(inventory_items)

        total_revenue = ZERO
        total_profit = ZERO
        by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
        by_day: dict[date, Decimal] = defaultdict(lambda: ZERO)
        quantities: dict[str, int] = defaultdict(int)

        for transaction in selected:
            day = transaction.sale_date(self.tz)
            day_revenue = ZERO

            for item in transaction.line_items:
                revenue = item.revenue
                total_revenue += revenue
                total_profit += item.profit(costs.get(item.product_id, ZERO))
                by_category[item.category] += revenue
                quantities[item.product_name] += item.quantity
                day_revenue += revenue

            by_day[day] += day_revenue

        summary = ReportSummary(
            total_revenue=total_revenue,
            total_profit=total_profit,
            transaction_count=len(selected),
            category_breakdown={
                category: revenue for category, revenue in by_category.items() if revenue > ZERO
            },
            daily_trend=dict(by_day),
            top_products=rank_products(quantities, self.top_products_limit),
        )

        logger.info(
            "Computed report: %d transactions, revenue %s, profit %s",
            summary.transaction_count,
            summary.total_revenue,
            summary.total_profit,
        )
        return summary


def compute_report(
    transactions: Iterable[SaleTransaction],
    inventory_items: Iterable[InventoryItem],
    report_filter: ReportFilter,
    *,
    tz: tzinfo | None = None,
    strict: bool | None = None,
) -> ReportSummary:
    """Compute a report with settings defaults. See ReportAggregator.compute."""
    aggregator = ReportAggregator(tz=tz, strict=strict)
    return aggregator.compute(transactions, inventory_items, report_filter)


def list_salespeople(transactions: Iterable[SaleTransaction]) -> list[str]:
    """Distinct creator names in first-seen order."""
    return list(dict.fromkeys(transaction.creator_name for transaction in transactions))


def list_categories(transactions: Iterable[SaleTransaction]) -> list[str]:
    """Distinct line item categories in first-seen order."""
    return list(dict.fromkeys(
        item.category for transaction in transactions for item in transaction.line_items
    ))
