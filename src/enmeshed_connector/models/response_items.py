"""
Response items returned by a peer.

Response items mirror the structure of the request: flat items, or groups
of items in the same order as the request groups.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from .attributes import IdentityAttribute
from .base import EnmeshedModel


class ResponseItemResult(str, Enum):
    """Per-item outcome."""

    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    ERROR = "Error"


class ResponseResult(str, Enum):
    """Outcome of a whole response."""

    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class ResponseItemBase(EnmeshedModel):
    result: ResponseItemResult


class AcceptResponseItem(ResponseItemBase):
    type: Literal["AcceptResponseItem"] = Field("AcceptResponseItem", alias="@type")


class ReadAttributeAcceptResponseItem(ResponseItemBase):
    """Carries the attribute the peer supplied for a read request."""

    type: Literal["ReadAttributeAcceptResponseItem"] = Field(
        "ReadAttributeAcceptResponseItem", alias="@type"
    )
    attribute_id: Optional[str] = None
    attribute: Optional[IdentityAttribute] = None


class CreateAttributeAcceptResponseItem(ResponseItemBase):
    type: Literal["CreateAttributeAcceptResponseItem"] = Field(
        "CreateAttributeAcceptResponseItem", alias="@type"
    )
    attribute_id: Optional[str] = None


class ShareAttributeAcceptResponseItem(ResponseItemBase):
    type: Literal["ShareAttributeAcceptResponseItem"] = Field(
        "ShareAttributeAcceptResponseItem", alias="@type"
    )
    attribute_id: Optional[str] = None


class FreeTextAcceptResponseItem(ResponseItemBase):
    type: Literal["FreeTextAcceptResponseItem"] = Field("FreeTextAcceptResponseItem", alias="@type")
    free_text: str


class RejectResponseItem(ResponseItemBase):
    type: Literal["RejectResponseItem"] = Field("RejectResponseItem", alias="@type")
    code: Optional[str] = None
    message: Optional[str] = None


class ErrorResponseItem(ResponseItemBase):
    type: Literal["ErrorResponseItem"] = Field("ErrorResponseItem", alias="@type")
    code: str
    message: str


ResponseItem = Annotated[
    Union[
        AcceptResponseItem,
        ReadAttributeAcceptResponseItem,
        CreateAttributeAcceptResponseItem,
        ShareAttributeAcceptResponseItem,
        FreeTextAcceptResponseItem,
        RejectResponseItem,
        ErrorResponseItem,
    ],
    Field(discriminator="type"),
]


class ResponseItemGroup(EnmeshedModel):
    """Responses to one request item group, in request order."""

    type: Literal["ResponseItemGroup"] = Field("ResponseItemGroup", alias="@type")
    result: Optional[ResponseItemResult] = None
    items: List[ResponseItem] = Field(default_factory=list)


ResponseItemOrGroup = Annotated[
    Union[
        ResponseItemGroup,
        AcceptResponseItem,
        ReadAttributeAcceptResponseItem,
        CreateAttributeAcceptResponseItem,
        ShareAttributeAcceptResponseItem,
        FreeTextAcceptResponseItem,
        RejectResponseItem,
        ErrorResponseItem,
    ],
    Field(discriminator="type"),
]


class Response(EnmeshedModel):
    """A peer's answer to a request."""

    type: Literal["Response"] = Field("Response", alias="@type")
    id: Optional[str] = None
    result: ResponseResult
    request_id: Optional[str] = None
    items: List[ResponseItemOrGroup] = Field(default_factory=list)
