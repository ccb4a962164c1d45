"""Validation of sales records ahead of aggregation."""

from .business_rules import (
    BusinessRuleValidator,
    bulk_validate,
    collect_issues,
    is_valid_transaction,
    validate_transactions,
)

__all__ = [
    "BusinessRuleValidator",
    "bulk_validate",
    "collect_issues",
    "is_valid_transaction",
    "validate_transactions",
]
