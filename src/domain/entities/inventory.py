"""
Inventory item entity.

Reports only read `id` and `cost_price`; the remaining fields back the
inventory listing, low-stock checks and checkout pricing.
"""
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pydantic import Field

from core.constants import HUNDRED, ZERO

from ..base import DomainModel


class InventoryItem(DomainModel):
    """Point-in-time snapshot of a stocked product."""

    id: int = 0
    name: str = ""
    quantity: int = 0
    cost_price: Decimal = ZERO
    selling_price: Decimal = ZERO
    # Milliseconds since epoch; stored as a string in backend rows
    last_updated: int = Field(default=0, alias="lastUpdated")
    image_urls: tuple[str, ...] = Field(default=(), alias="imageUrls")
    shop_id: str = ""
    creator_id: str = ""
    category: str = Field(default="", alias="categoryName")
    sku: str = ""
    taxes: Decimal = ZERO
    discount_amount: Decimal = Field(default=ZERO, alias="discount")
    is_percentage_discount: bool = Field(default=True, alias="discountType")

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity <= threshold

    @property
    def unit_discount(self) -> Decimal:
        """Discount taken off one unit at its selling price."""
        if self.is_percentage_discount:
            return self.selling_price * (self.discount_amount / HUNDRED)
        return self.discount_amount

    def checkout_price(self, quantity: int) -> Decimal:
        """
        Price charged for `quantity` units at checkout.

        Tax is a percentage applied to the discounted subtotal.
        """
        subtotal = (self.selling_price - self.unit_discount) * quantity
        return subtotal + subtotal * self.taxes / HUNDRED

    def matches_query(self, query: str) -> bool:
        """Case-insensitive match on name or sku."""
        needle = query.casefold()
        return needle in self.name.casefold() or needle in self.sku.casefold()


def build_cost_lookup(items: Iterable[InventoryItem]) -> dict[int, Decimal]:
    """Map product id to cost price. Later duplicates win."""
    return {item.id: item.cost_price for item in items}
