"""
Sales transaction entities.

A transaction is recorded at the point of sale and is never edited
afterwards apart from its status flipping to Reversed. Line items carry
snapshots of product name, sku, category and price taken at sale time, so
renaming a product later does not rewrite history.
"""
from __future__ import annotations

from datetime import date, datetime, tzinfo
from decimal import Decimal
from enum import Enum

from pydantic import Field

from core.constants import HUNDRED, STATUS_COMPLETED, STATUS_REVERSED, ZERO
from core.time_utils import from_epoch_millis

from ..base import DomainModel


class SaleStatus(str, Enum):
    """Lifecycle status of a sale."""
    COMPLETED = STATUS_COMPLETED
    REVERSED = STATUS_REVERSED


class SaleLineItem(DomainModel):
    """One product entry within a sale."""

    product_id: int = Field(default=0, alias="id")
    product_name: str = Field(alias="name")
    sku: str = ""
    category: str = Field(default="", alias="productCategory")
    quantity: int = Field(alias="quantitySold")
    unit_price: Decimal = Field(alias="selling_price")
    discount_amount: Decimal = Field(default=ZERO, alias="discount")
    # Percentage is the default discount type on the sales entry form
    is_percentage_discount: bool = Field(default=True, alias="discountType")

    @property
    def unit_discount(self) -> Decimal:
        """Discount taken off a single unit."""
        if self.is_percentage_discount:
            return self.unit_price * (self.discount_amount / HUNDRED)
        return self.discount_amount

    @property
    def net_unit_price(self) -> Decimal:
        """Selling price after discount. Not clamped at zero."""
        return self.unit_price - self.unit_discount

    @property
    def revenue(self) -> Decimal:
        return self.net_unit_price * self.quantity

    def profit(self, cost_price: Decimal) -> Decimal:
        """
        Profit for this line given the unit cost.

        A loss-making line contributes nothing rather than a negative amount.
        """
        return max(ZERO, (self.net_unit_price - cost_price) * self.quantity)


class SaleTransaction(DomainModel):
    """A recorded sale with its line items."""

    id: str = ""
    shop_id: str
    creator_id: str
    creator_name: str
    # Milliseconds since epoch; stored as a string in backend rows
    timestamp: int = Field(alias="lastUpdated")
    status: SaleStatus = SaleStatus.COMPLETED
    line_items: tuple[SaleLineItem, ...] = Field(default=(), alias="itemsList")

    @property
    def is_reversed(self) -> bool:
        return self.status == SaleStatus.REVERSED

    @property
    def revenue(self) -> Decimal:
        """Net revenue across all line items."""
        return sum((item.revenue for item in self.line_items), ZERO)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)

    def occurred_at(self, tz: tzinfo) -> datetime:
        """Timestamp as an aware datetime in the given zone."""
        return from_epoch_millis(self.timestamp, tz)

    def sale_date(self, tz: tzinfo) -> date:
        """Calendar day of the sale in the given zone."""
        return self.occurred_at(tz).date()

    def has_category(self, category: str) -> bool:
        return any(item.category == category for item in self.line_items)
