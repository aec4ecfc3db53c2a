"""Configuration surface for the enmeshed connector client."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .models.attribute_values import value_type_of


class ConnectorSettings(BaseSettings):
    """Connector and onboarding configuration.

    Every field can be set through an ``ENMESHED_`` prefixed environment
    variable, e.g. ``ENMESHED_API_KEY`` or
    ``ENMESHED_REQUIRED_ATTRIBUTES=GivenName,Surname``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENMESHED_",
        env_file=".env",
        extra="ignore",
    )

    # Connector API
    base_url: str = "http://localhost:8080"
    api_key: SecretStr = SecretStr("")
    timeout: float = 30.0
    max_retries: int = Field(default=3, ge=0)

    # Onboarding
    display_name: str = "enmeshed Connector"
    required_attributes: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["GivenName", "Surname"])
    optional_attributes: Annotated[List[str], NoDecode] = Field(default_factory=list)
    create_attributes: Annotated[List[str], NoDecode] = Field(default_factory=list)
    invitation_validity_seconds: int = Field(default=3600, gt=0)
    max_allocations: int = Field(default=1, ge=1)

    @field_validator(
        "required_attributes",
        "optional_attributes",
        "create_attributes",
        mode="before",
    )
    @classmethod
    def parse_attribute_list(cls, v):
        """Parse comma-separated attribute types from env var."""
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @field_validator("required_attributes", "optional_attributes", "create_attributes")
    @classmethod
    def validate_attribute_types(cls, v: List[str]) -> List[str]:
        return [value_type_of(t) for t in v]


@lru_cache
def get_settings() -> ConnectorSettings:
    """Get cached settings instance."""
    return ConnectorSettings()
