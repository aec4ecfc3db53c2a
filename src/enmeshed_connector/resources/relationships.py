"""Relationships resource for the enmeshed connector client."""
from __future__ import annotations

from typing import List, Optional

from ..models.relationships import Relationship, RelationshipStatus
from .base import SyncBaseResource

# The Connector requires a JSON body on change decisions; its content is unused.
_EMPTY_CHANGE_BODY = {"content": {}}


class RelationshipsResource(SyncBaseResource):
    """Resource for relationships and their changes."""

    def search(
        self,
        template_id: Optional[str] = None,
        peer: Optional[str] = None,
        status: Optional[RelationshipStatus] = None,
    ) -> List[Relationship]:
        """Search relationships. Unset filters match everything.

        Args:
            template_id: ID of the template the relationship was created from
            peer: Address of the peer
            status: Relationship status

        Returns:
            Matching relationships in Connector order
        """
        params = {
            "template.id": template_id,
            "peer": peer,
            "status": status.value if isinstance(status, RelationshipStatus) else status,
        }
        response = self._get("/api/v2/Relationships", params=params)
        return self._parse_list(Relationship, response)

    def get(self, relationship_id: str) -> Relationship:
        """Get a relationship by ID."""
        response = self._get(f"/api/v2/Relationships/{relationship_id}")
        return self._parse(Relationship, response)

    def accept_change(self, relationship_id: str, change_id: str) -> Relationship:
        """Accept a pending relationship change."""
        response = self._put(
            f"/api/v2/Relationships/{relationship_id}/Changes/{change_id}/Accept",
            _EMPTY_CHANGE_BODY,
        )
        return self._parse(Relationship, response)

    def reject_change(self, relationship_id: str, change_id: str) -> Relationship:
        """Reject a pending relationship change."""
        response = self._put(
            f"/api/v2/Relationships/{relationship_id}/Changes/{change_id}/Reject",
            _EMPTY_CHANGE_BODY,
        )
        return self._parse(Relationship, response)
