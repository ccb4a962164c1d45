"""
Sales Repository Interface
Domain layer interface for the sales data source.
"""

from abc import ABC, abstractmethod

from domain.entities.inventory import InventoryItem
from domain.entities.sales import SaleTransaction


class ISalesRepository(ABC):
    """
    Read access to a shop's sales and inventory.

    Each call returns a complete point-in-time snapshot. Implementations
    raise on failure instead of returning an empty list.
    """

    @abstractmethod
    def list_sales(self, shop_id: str) -> list[SaleTransaction]:
        """
        Get every sale recorded for a shop.

        Args:
            shop_id: Owning shop identifier

        Returns:
            All sales, any status
        """
        pass

    @abstractmethod
    def list_inventory_items(self, shop_id: str) -> list[InventoryItem]:
        """Get every inventory item of a shop."""
        pass
