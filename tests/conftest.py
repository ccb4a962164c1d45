"""
Pytest Configuration and Fixtures
Provides shared fixtures and configuration for all tests.
"""
from datetime import date

import pytest

from domain.services import ReportAggregator
from domain.value_objects import DateRange, ReportFilter

from tests.factories import UTC


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as crossing the repository boundary"
    )


@pytest.fixture
def aggregator() -> ReportAggregator:
    """Aggregator pinned to UTC with the default top five."""
    return ReportAggregator(tz=UTC, top_products_limit=5, strict=False)


@pytest.fixture
def march_filter() -> ReportFilter:
    """Report window covering March 2024."""
    return ReportFilter(DateRange(date(2024, 3, 1), date(2024, 3, 31)))
