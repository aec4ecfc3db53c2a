"""Attributes resource for the enmeshed connector client."""
from __future__ import annotations

from typing import List, Optional

from ..models.attributes import (
    IDENTITY_ATTRIBUTE_TYPE,
    CreateAttributeRequest,
    IdentityAttribute,
    LocalAttribute,
)
from .base import SyncBaseResource


class AttributesResource(SyncBaseResource):
    """Resource for local attributes.

    Example:
        ```python
        attributes = client.attributes.search(
            owner=identity.address,
            value_type="DisplayName",
        )
        ```
    """

    def search(
        self,
        owner: Optional[str] = None,
        value_type: Optional[str] = None,
        content_type: str = IDENTITY_ATTRIBUTE_TYPE,
    ) -> List[LocalAttribute]:
        """Search local attributes.

        Args:
            owner: Address of the owning identity
            value_type: ``@type`` of the attribute value, e.g. ``GivenName``
            content_type: ``@type`` of the attribute content

        Returns:
            Matching attributes in Connector order
        """
        params = {
            "content.@type": content_type,
            "content.owner": owner,
            "content.value.@type": value_type,
        }
        response = self._get("/api/v2/Attributes", params=params)
        return self._parse_list(LocalAttribute, response)

    def create(self, attribute: IdentityAttribute) -> LocalAttribute:
        """Create a local attribute.

        Args:
            attribute: The attribute content, including its owner

        Returns:
            The stored attribute with its Connector-assigned id
        """
        request = CreateAttributeRequest(content=attribute)
        response = self._post("/api/v2/Attributes", request.to_dict())
        return self._parse(LocalAttribute, response)
