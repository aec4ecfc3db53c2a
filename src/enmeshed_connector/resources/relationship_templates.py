"""Relationship templates resource for the enmeshed connector client."""
from __future__ import annotations

from datetime import datetime

from ..models.relationship_templates import (
    RelationshipTemplate,
    RelationshipTemplateContent,
    RelationshipTemplateCreation,
)
from .base import SyncBaseResource


class RelationshipTemplatesResource(SyncBaseResource):
    """Resource for relationship templates (invitations).

    Example:
        ```python
        template = client.relationship_templates.create_own(
            content=content,
            expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        )
        png = client.relationship_templates.get_qr_code(template.id)
        ```
    """

    def create_own(
        self,
        content: RelationshipTemplateContent,
        expires_at: datetime,
        max_number_of_allocations: int = 1,
    ) -> RelationshipTemplate:
        """Create an own relationship template.

        Args:
            content: The template content shown to peers
            expires_at: When the template stops accepting allocations
            max_number_of_allocations: How many peers may use the template

        Returns:
            The created template
        """
        request = RelationshipTemplateCreation(
            content=content,
            expires_at=expires_at,
            max_number_of_allocations=max_number_of_allocations,
        )
        response = self._post("/api/v2/RelationshipTemplates/Own", request.to_dict())
        return self._parse(RelationshipTemplate, response)

    def get(self, template_id: str) -> RelationshipTemplate:
        """Get a relationship template by ID."""
        response = self._get(f"/api/v2/RelationshipTemplates/{template_id}")
        return self._parse(RelationshipTemplate, response)

    def get_qr_code(self, template_id: str) -> bytes:
        """Get the rendered QR code for a template as PNG bytes."""
        return self._get(
            f"/api/v2/RelationshipTemplates/{template_id}",
            accept="image/png",
            raw=True,
        )
