"""
Custom exception classes for the application.
Provides specific error types for better error handling and debugging.
"""

from typing import Any


class BaseApplicationException(Exception):
    """Base exception class for all application exceptions."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize base exception.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            details: Optional additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationException(BaseApplicationException):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationException(BaseApplicationException):
    """Raised when data validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any
    ) -> None:
        """
        Initialize validation exception.

        Args:
            message: Error message
            field: Field that failed validation
            value: Invalid value
            **kwargs: Additional arguments
        """
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        kwargs["details"] = details
        super().__init__(message, **kwargs)


class InvalidInputError(ValidationException):
    """Raised by strict validation when sales records are malformed."""

    def __init__(
        self,
        message: str,
        issues: list[dict[str, Any]] | None = None,
        **kwargs: Any
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            issues: One entry per offending record field
            **kwargs: Additional arguments
        """
        self.issues = list(issues or [])
        details = kwargs.get("details", {})
        details["issues"] = self.issues
        details["issue_count"] = len(self.issues)
        kwargs["details"] = details
        super().__init__(message, **kwargs)


class RepositoryException(BaseApplicationException):
    """Raised when the sales data source fails."""

    def __init__(
        self,
        message: str,
        shop_id: str | None = None,
        **kwargs: Any
    ) -> None:
        details = kwargs.get("details", {})
        if shop_id:
            details["shop_id"] = shop_id
        kwargs["details"] = details
        super().__init__(message, **kwargs)
