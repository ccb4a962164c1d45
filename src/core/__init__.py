"""Core module containing configuration, constants, and shared utilities."""

from .config import Settings, get_settings, settings
from .exceptions import (
    BaseApplicationException,
    ConfigurationException,
    InvalidInputError,
    RepositoryException,
    ValidationException,
)
from .logging import get_logger, get_logger_with_context

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "BaseApplicationException",
    "ConfigurationException",
    "ValidationException",
    "InvalidInputError",
    "RepositoryException",
    "get_logger",
    "get_logger_with_context",
]
