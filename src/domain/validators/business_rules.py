"""
Business Rule Validators
Strict checks applied to sales records before aggregation when requested.
"""
from collections.abc import Iterable
from typing import Any

from core.constants import ERROR_STRICT_VALIDATION, HUNDRED, ZERO
from core.exceptions import InvalidInputError
from core.logging import get_logger

from ..entities.sales import SaleLineItem, SaleTransaction

logger = get_logger(__name__)


class BusinessRuleValidator:
    """
    Record-level rules for sales data.

    The aggregator accepts anything arithmetic can handle; these rules are
    what a well-formed point-of-sale record looks like.
    """

    MAX_PERCENTAGE_DISCOUNT = HUNDRED

    @classmethod
    def line_item_issues(cls, item: SaleLineItem) -> list[tuple[str, str]]:
        """Return (field, problem) pairs for one line item."""
        issues: list[tuple[str, str]] = []

        if item.quantity < 0:
            issues.append(("quantity", f"negative quantity {item.quantity}"))

        if item.unit_price < ZERO:
            issues.append(("unit_price", f"negative unit price {item.unit_price}"))

        if item.discount_amount < ZERO:
            issues.append(("discount_amount", f"negative discount {item.discount_amount}"))
        elif item.is_percentage_discount and item.discount_amount > cls.MAX_PERCENTAGE_DISCOUNT:
            issues.append(("discount_amount", f"percentage discount {item.discount_amount} exceeds 100"))

        if not item.category.strip():
            issues.append(("category", "missing category"))

        if not item.product_name.strip():
            issues.append(("product_name", "missing product name"))

        return issues

    @classmethod
    def transaction_issues(cls, transaction: SaleTransaction) -> list[dict[str, Any]]:
        """Return issue records for a transaction and its line items."""
        issues: list[dict[str, Any]] = []

        def add(field: str, problem: str, line: int | None = None) -> None:
            issue: dict[str, Any] = {
                "transaction_id": transaction.id,
                "field": field,
                "problem": problem,
            }
            if line is not None:
                issue["line"] = line
            issues.append(issue)

        if not transaction.line_items:
            add("line_items", "transaction has no line items")

        if transaction.timestamp < 0:
            add("timestamp", f"negative timestamp {transaction.timestamp}")

        for index, item in enumerate(transaction.line_items):
            for field, problem in cls.line_item_issues(item):
                add(field, problem, line=index)

        return issues


def collect_issues(transactions: Iterable[SaleTransaction]) -> list[dict[str, Any]]:
    """Issues across all transactions, in input order."""
    issues: list[dict[str, Any]] = []
    for transaction in transactions:
        issues.extend(BusinessRuleValidator.transaction_issues(transaction))
    return issues


def validate_transactions(transactions: Iterable[SaleTransaction]) -> None:
    """
    Raise InvalidInputError listing every offending record.

    Args:
        transactions: Sales to check

    Raises:
        InvalidInputError: If any record breaks a rule
    """
    issues = collect_issues(transactions)
    if issues:
        logger.warning("Strict validation rejected %d issue(s)", len(issues))
        raise InvalidInputError(
            ERROR_STRICT_VALIDATION.format(count=len(issues)),
            issues=issues,
        )


def is_valid_transaction(transaction: SaleTransaction) -> bool:
    """Validate a transaction entity."""
    return not BusinessRuleValidator.transaction_issues(transaction)


def bulk_validate(transactions: list[SaleTransaction]) -> list[bool]:
    """
    Validate each transaction independently.

    Returns:
        List of boolean results indicating validation success for each entity
    """
    return [is_valid_transaction(transaction) for transaction in transactions]
