"""Onboarding results derived from Connector data."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Type

from .attribute_values import AttributeValueBase


@dataclass(frozen=True)
class RegistrationData:
    """A published invitation: its template id and rendered QR code."""

    relationship_template_id: str
    qr_code: bytes


@dataclass(frozen=True)
class RegistrationResult:
    """State of a registration, rebuilt on every resolution.

    ``attributes`` maps attribute value type tags (``"GivenName"``) to the
    values the peer supplied.
    """

    enmeshed_address: str
    relationship_id: str
    relationship_change_id: str
    attributes: Dict[str, AttributeValueBase] = field(default_factory=dict)
    accepted: bool = False

    def get(self, value_type: Type[AttributeValueBase]) -> Optional[AttributeValueBase]:
        """Look up an extracted value by its class."""
        return self.attributes.get(value_type.value_type())
