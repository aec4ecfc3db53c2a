"""Relationship models for the enmeshed connector client."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field

from .base import EnmeshedModel
from .identity import IdentityInfo
from .relationship_templates import RelationshipTemplate
from .response_items import Response


class RelationshipStatus(str, Enum):
    """Relationship status."""

    PENDING = "Pending"
    ACTIVE = "Active"
    REJECTED = "Rejected"
    REVOKED = "Revoked"
    TERMINATED = "Terminated"


class RelationshipChangeType(str, Enum):
    """Relationship change type."""

    CREATION = "Creation"
    TERMINATION = "Termination"


class RelationshipChangeStatus(str, Enum):
    """Relationship change status."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    REVOKED = "Revoked"


class RelationshipCreationChangeRequestContent(EnmeshedModel):
    """Content of a creation change: the peer's response to the template."""

    type: Literal["RelationshipCreationChangeRequestContent"] = Field(
        "RelationshipCreationChangeRequestContent", alias="@type"
    )
    response: Optional[Response] = None


class RelationshipChangeRequest(EnmeshedModel):
    created_by: Optional[str] = None
    created_by_device: Optional[str] = None
    created_at: Optional[datetime] = None
    content: Optional[RelationshipCreationChangeRequestContent] = None


class RelationshipChangeResponse(EnmeshedModel):
    created_by: Optional[str] = None
    created_by_device: Optional[str] = None
    created_at: Optional[datetime] = None


class RelationshipChange(EnmeshedModel):
    """A proposed mutation of a relationship."""

    id: str
    type: RelationshipChangeType
    status: RelationshipChangeStatus
    request: Optional[RelationshipChangeRequest] = None
    response: Optional[RelationshipChangeResponse] = None


class Relationship(EnmeshedModel):
    """A bilateral connection between the Connector and a peer."""

    id: str
    template: Optional[RelationshipTemplate] = None
    status: Optional[RelationshipStatus] = None
    peer: str
    peer_identity: Optional[IdentityInfo] = None
    changes: List[RelationshipChange] = Field(default_factory=list)

    def creation_change(self) -> Optional[RelationshipChange]:
        """The authoritative creation change; the last one listed wins."""
        creation = None
        for change in self.changes:
            if change.type == RelationshipChangeType.CREATION:
                creation = change
        return creation
