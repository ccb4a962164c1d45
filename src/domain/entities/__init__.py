"""Domain entities module."""

from .inventory import InventoryItem, build_cost_lookup
from .sales import SaleLineItem, SaleStatus, SaleTransaction

__all__ = [
    "SaleTransaction",
    "SaleLineItem",
    "SaleStatus",
    "InventoryItem",
    "build_cost_lookup",
]
