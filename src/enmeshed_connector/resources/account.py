"""Account resource: identity info and synchronization."""
from __future__ import annotations

from ..models.identity import IdentityInfo
from .base import SyncBaseResource


class AccountResource(SyncBaseResource):
    """Resource for the Connector's own account."""

    def get_identity_info(self) -> IdentityInfo:
        """Get the address, public key and realm of the Connector identity."""
        response = self._get("/api/v2/Account/IdentityInfo")
        return self._parse(IdentityInfo, response)

    def sync(self) -> None:
        """Pull pending events from the Backbone so they become visible locally."""
        self._post("/api/v2/Account/Sync", retryable=True)
