"""
Centralized configuration management using Pydantic BaseSettings.
Values come from the environment or a local .env file.
"""

from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the reporting library.
    Shop identity and credentials are not configuration; callers pass them explicitly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level",
    )
    log_format: str = Field(
        default="text",
        description="Log format (json/text)",
    )
    log_file_path: Path | None = Field(
        default=None,
        description="Optional log file path",
    )
    logging_config_path: Path = Field(
        default=Path("config/logging.yaml"),
        description="dictConfig YAML file applied instead of programmatic setup when present",
    )

    # Reporting
    report_timezone: str = Field(
        default="UTC",
        description=(
            "IANA time zone used for day boundaries and the daily trend. "
            "Defaults to UTC rather than the host zone; set it to the shop's local zone"
        ),
    )
    default_report_days: int = Field(
        default=30,
        description="Length of the default report window in days",
        ge=1,
    )
    top_products_limit: int = Field(
        default=5,
        description="Number of entries kept in the top products list",
        ge=1,
    )
    currency_places: int = Field(
        default=2,
        description="Decimal places used when serializing money",
        ge=0,
    )
    strict_validation: bool = Field(
        default=False,
        description="Reject malformed sales records instead of aggregating them",
    )

    # Inventory
    low_stock_threshold: int = Field(
        default=10,
        description="Items at or below this quantity are reported as low stock",
        ge=0,
    )

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}")
        return v

    @field_validator("report_timezone")
    @classmethod
    def validate_report_timezone(cls, v: str) -> str:
        """Validate that the time zone name is known to the zoneinfo database."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @property
    def tzinfo(self) -> tzinfo:
        """Time zone object for report_timezone."""
        return ZoneInfo(self.report_timezone)


@lru_cache
def get_settings() -> "Settings":
    """Uses LRU cache to ensure single instance across application."""
    return Settings()


# Global settings instance
settings = get_settings()
