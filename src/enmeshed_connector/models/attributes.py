"""Attribute models for the enmeshed connector client."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .attribute_values import AttributeValue
from .base import EnmeshedModel

IDENTITY_ATTRIBUTE_TYPE = "IdentityAttribute"


class IdentityAttribute(EnmeshedModel):
    """A typed piece of personal or connector data owned by one identity."""

    type: Literal["IdentityAttribute"] = Field(IDENTITY_ATTRIBUTE_TYPE, alias="@type")
    owner: str = ""
    value: AttributeValue
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    tags: Optional[List[str]] = None


class IdentityAttributeQuery(EnmeshedModel):
    """Query for an identity attribute of a given value type."""

    type: Literal["IdentityAttributeQuery"] = Field("IdentityAttributeQuery", alias="@type")
    value_type: str
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None


class ShareInfo(EnmeshedModel):
    """Where a local attribute was shared from or to."""

    request_reference: Optional[str] = None
    notification_reference: Optional[str] = None
    peer: str
    source_attribute: Optional[str] = None


class LocalAttribute(EnmeshedModel):
    """An attribute as stored by the Connector, wrapping its content."""

    id: str
    created_at: Optional[datetime] = None
    content: IdentityAttribute
    succeeds: Optional[str] = None
    succeeded_by: Optional[str] = None
    share_info: Optional[ShareInfo] = None


class CreateAttributeRequest(EnmeshedModel):
    """Request body to create a local attribute."""

    content: IdentityAttribute
