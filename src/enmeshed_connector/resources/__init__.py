"""
Resources for the enmeshed connector client.
"""
from .base import SyncBaseResource
from .account import AccountResource
from .attributes import AttributesResource
from .relationship_templates import RelationshipTemplatesResource
from .relationships import RelationshipsResource

__all__ = [
    "SyncBaseResource",
    "AccountResource",
    "AttributesResource",
    "RelationshipTemplatesResource",
    "RelationshipsResource",
]
