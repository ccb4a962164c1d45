"""Base domain model with common functionality."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """
    Base class for immutable domain snapshots.

    Fields can be populated either by their Python names or by the
    column aliases used in backend rows.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self, by_alias: bool = False, exclude_none: bool = True) -> dict[str, Any]:
        """Convert model to dictionary."""
        return self.model_dump(by_alias=by_alias, exclude_none=exclude_none)

    def to_json(self, by_alias: bool = True) -> str:
        """Convert model to a JSON row."""
        return self.model_dump_json(by_alias=by_alias, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DomainModel:
        """Create model from a backend row or a dictionary of field names."""
        return cls.model_validate(data)
