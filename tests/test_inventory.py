"""
Unit Tests for Inventory Listing
"""
import pytest

from domain.services import filter_inventory, low_stock_items
from domain.value_objects import InventoryCriteria, SortOrder

from tests.factories import make_inventory


class TestFilterInventory:
    """Test cases for filter_inventory."""

    def setup_method(self):
        self.items = [
            make_inventory(product_id=1, name="Chips", sku="SN-1", category="Snacks",
                           quantity=40, selling_price="1.50", last_updated=300),
            make_inventory(product_id=2, name="Whole Milk", sku="DA-7", category="Dairy",
                           quantity=3, selling_price="0.99", last_updated=100),
            make_inventory(product_id=3, name="Oat Milk", sku="DA-9", category="Dairy",
                           quantity=12, selling_price="2.49", last_updated=200),
        ]

    @pytest.mark.parametrize("sort_order,expected", [
        (SortOrder.NEWEST_FIRST, [1, 3, 2]),
        (SortOrder.OLDEST_FIRST, [2, 3, 1]),
        (SortOrder.QUANTITY_LOW_TO_HIGH, [2, 3, 1]),
        (SortOrder.QUANTITY_HIGH_TO_LOW, [1, 3, 2]),
        (SortOrder.PRICE_LOW_TO_HIGH, [2, 1, 3]),
        (SortOrder.PRICE_HIGH_TO_LOW, [3, 1, 2]),
    ])
    def test_sort_orders(self, sort_order, expected):
        result = filter_inventory(self.items, InventoryCriteria(sort_order=sort_order))

        assert [item.id for item in result] == expected

    def test_search(self):
        result = filter_inventory(self.items, InventoryCriteria(search_query="milk"))

        assert {item.id for item in result} == {2, 3}

    def test_search_by_sku(self):
        result = filter_inventory(self.items, InventoryCriteria(search_query="sn-"))

        assert [item.id for item in result] == [1]

    def test_category(self):
        result = filter_inventory(
            self.items,
            InventoryCriteria(category="Dairy", sort_order=SortOrder.QUANTITY_LOW_TO_HIGH),
        )

        assert [item.id for item in result] == [2, 3]

    def test_returns_new_list(self):
        result = filter_inventory(self.items, InventoryCriteria(sort_order=SortOrder.OLDEST_FIRST))

        assert result is not self.items
        assert [item.id for item in self.items] == [1, 2, 3]


class TestLowStock:
    """Test cases for low_stock_items."""

    def test_threshold_is_inclusive(self):
        items = [
            make_inventory(product_id=1, quantity=10),
            make_inventory(product_id=2, quantity=11),
            make_inventory(product_id=3, quantity=0),
        ]

        assert [item.id for item in low_stock_items(items, threshold=10)] == [1, 3]

    def test_default_threshold_from_settings(self):
        items = [make_inventory(product_id=1, quantity=10), make_inventory(product_id=2, quantity=50)]

        assert [item.id for item in low_stock_items(items)] == [1]

    def test_nothing_low(self):
        assert low_stock_items([make_inventory(quantity=100)], threshold=5) == []
