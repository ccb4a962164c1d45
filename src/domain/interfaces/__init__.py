"""Domain interfaces for dependency inversion."""

from .sales_repository import ISalesRepository

__all__ = [
    "ISalesRepository",
]
