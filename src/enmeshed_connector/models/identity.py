"""Identity models for the enmeshed connector client."""
from __future__ import annotations

from pydantic import ConfigDict

from .base import EnmeshedModel


class IdentityInfo(EnmeshedModel):
    """The enmeshed identity behind a Connector."""

    model_config = ConfigDict(frozen=True)

    address: str
    public_key: str
    realm: str
