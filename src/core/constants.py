"""
Application constants.
Central location for magic numbers and constant values.
"""

from decimal import Decimal
from typing import Final

# Money
ZERO: Final[Decimal] = Decimal("0")
HUNDRED: Final[Decimal] = Decimal("100")

# Backend row values
STATUS_COMPLETED: Final[str] = "Completed"
STATUS_REVERSED: Final[str] = "Reversed"

# Error Messages
ERROR_INVALID_DATE_RANGE: Final[str] = "Start date cannot be after end date: {start} > {end}"
ERROR_REPOSITORY_FETCH: Final[str] = "Failed to fetch {resource} for shop {shop_id}"
ERROR_STRICT_VALIDATION: Final[str] = "{count} invalid sales record field(s) rejected"
