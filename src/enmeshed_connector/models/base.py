"""Base model for enmeshed connector payloads."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EnmeshedModel(BaseModel):
    """Base model with common configuration.

    The Connector API speaks camelCase JSON; fields are snake_case in Python
    and aliased on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its wire dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnmeshedModel":
        """Create model from dictionary."""
        return cls.model_validate(data)
