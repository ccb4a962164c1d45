"""
Report Domain Service
Loads a shop's sales and inventory from the repository and aggregates them.
"""
from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Any

from core.constants import ERROR_REPOSITORY_FETCH
from core.exceptions import RepositoryException, ValidationException
from core.logging import get_logger_with_context

from ..entities.sales import SaleStatus
from ..interfaces.sales_repository import ISalesRepository
from ..value_objects.report import ReportFilter, ReportSummary
from .report_aggregator import ReportAggregator


class ReportService:
    """
    Domain service for report generation.
    Orchestrates repository reads and aggregation.
    """

    def __init__(
        self,
        repository: ISalesRepository,
        aggregator: ReportAggregator | None = None,
    ):
        self._repository = repository
        self._aggregator = aggregator or ReportAggregator()

    def _fetch(
        self,
        resource: str,
        fetch: Callable[[str], Any],
        shop_id: str,
    ) -> list[Any]:
        logger = get_logger_with_context(__name__, shop_id=shop_id, resource=resource)
        message = ERROR_REPOSITORY_FETCH.format(resource=resource, shop_id=shop_id)
        try:
            result = fetch(shop_id)
        except RepositoryException:
            logger.error(message)
            raise
        except Exception as e:
            logger.error(f"{message}: {e}")
            raise RepositoryException(message, shop_id=shop_id, details={"reason": str(e)}) from e

        # An error value must never turn into an empty report
        if result is None:
            logger.error(f"{message}: repository returned no result")
            raise RepositoryException(message, shop_id=shop_id)

        return list(result)

    def generate_report(
        self,
        shop_id: str,
        report_filter: ReportFilter,
        statuses: Collection[SaleStatus] | None = None,
    ) -> ReportSummary:
        """
        Generate the report for one shop.

        Business Rules:
        - Sales of every status count unless `statuses` narrows them
        - Fetch failures are raised, never reported as an empty summary

        Raises:
            ValidationException: If shop_id is empty
            RepositoryException: If either snapshot cannot be loaded
        """
        if not shop_id or not shop_id.strip():
            raise ValidationException("Shop ID cannot be empty", field="shop_id")

        sales = self._fetch("sales", self._repository.list_sales, shop_id)
        inventory = self._fetch("inventory", self._repository.list_inventory_items, shop_id)

        if statuses is not None:
            allowed = set(statuses)
            sales = [sale for sale in sales if sale.status in allowed]

        summary = self._aggregator.compute(sales, inventory, report_filter)

        get_logger_with_context(__name__, shop_id=shop_id).info(
            f"Generated report for {report_filter.date_range.start}..{report_filter.date_range.end} "
            f"({summary.transaction_count} sales)"
        )
        return summary
