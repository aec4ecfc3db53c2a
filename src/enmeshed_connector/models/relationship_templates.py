"""Relationship template models for the enmeshed connector client."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import Field

from .base import EnmeshedModel
from .request_items import Request


class RelationshipTemplateContent(EnmeshedModel):
    """What a peer sees when scanning the invitation."""

    type: Literal["RelationshipTemplateContent"] = Field(
        "RelationshipTemplateContent", alias="@type"
    )
    title: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    on_new_relationship: Request
    on_existing_relationship: Optional[Request] = None


class RelationshipTemplate(EnmeshedModel):
    """A published invitation with an expiry and an allocation limit."""

    id: str
    is_own: Optional[bool] = None
    created_by: Optional[str] = None
    created_by_device: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    max_number_of_allocations: Optional[int] = None
    content: Optional[RelationshipTemplateContent] = None


class RelationshipTemplateCreation(EnmeshedModel):
    """Request body to create an own relationship template."""

    max_number_of_allocations: int = 1
    expires_at: datetime
    content: RelationshipTemplateContent
