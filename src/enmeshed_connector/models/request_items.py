"""
Request items embedded in relationship templates.

The set of item kinds is closed: share, read and create, plus the titled
group that partitions them.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from .attributes import IdentityAttribute, IdentityAttributeQuery
from .base import EnmeshedModel


class RequestItemBase(EnmeshedModel):
    """Fields shared by every request item."""

    title: Optional[str] = None
    description: Optional[str] = None
    must_be_accepted: bool


class ShareAttributeRequestItem(RequestItemBase):
    """Pushes one of our own attributes to the peer."""

    type: Literal["ShareAttributeRequestItem"] = Field("ShareAttributeRequestItem", alias="@type")
    attribute: IdentityAttribute
    source_attribute_id: Optional[str] = None


class ReadAttributeRequestItem(RequestItemBase):
    """Asks the peer to send an attribute of a given value type."""

    type: Literal["ReadAttributeRequestItem"] = Field("ReadAttributeRequestItem", alias="@type")
    query: IdentityAttributeQuery


class CreateAttributeRequestItem(RequestItemBase):
    """Asks the peer to create and submit a new attribute of a given value type."""

    type: Literal["CreateAttributeRequestItem"] = Field("CreateAttributeRequestItem", alias="@type")
    query: IdentityAttributeQuery


RequestItem = Annotated[
    Union[ShareAttributeRequestItem, ReadAttributeRequestItem, CreateAttributeRequestItem],
    Field(discriminator="type"),
]


class RequestItemGroup(EnmeshedModel):
    """A titled, ordered collection of request items."""

    type: Literal["RequestItemGroup"] = Field("RequestItemGroup", alias="@type")
    title: Optional[str] = None
    description: Optional[str] = None
    must_be_accepted: bool = False
    items: List[RequestItem] = Field(default_factory=list)


RequestItemOrGroup = Annotated[
    Union[
        RequestItemGroup,
        ShareAttributeRequestItem,
        ReadAttributeRequestItem,
        CreateAttributeRequestItem,
    ],
    Field(discriminator="type"),
]


class Request(EnmeshedModel):
    """The ordered list of groups offered to a peer."""

    type: Literal["Request"] = Field("Request", alias="@type")
    id: Optional[str] = None
    items: List[RequestItemOrGroup] = Field(default_factory=list)
