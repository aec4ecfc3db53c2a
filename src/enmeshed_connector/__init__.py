"""
enmeshed connector

Onboard users through the enmeshed identity exchange protocol: publish
invitations on an enmeshed Connector, collect the attributes users share,
and accept or reject their relationships.
"""

from .client import EnmeshedClient
from .config import ConnectorSettings, get_settings
from .models.errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    EnmeshedError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    ValidationError,
)
from .models.registration import RegistrationData, RegistrationResult
from .onboarding import (
    AcceptanceDecider,
    InvitationTitles,
    OnboardingService,
    build_invitation_content,
    extract_attributes,
)
from .retry import RetryConfig

from ._version import __version__

__all__ = [
    # Client
    "EnmeshedClient",
    "RetryConfig",
    # Configuration
    "ConnectorSettings",
    "get_settings",
    # Onboarding
    "OnboardingService",
    "InvitationTitles",
    "AcceptanceDecider",
    "build_invitation_content",
    "extract_attributes",
    "RegistrationData",
    "RegistrationResult",
    # Errors
    "EnmeshedError",
    "APIError",
    "AuthenticationError",
    "ConnectionError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitError",
    "TimeoutError",
    "ValidationError",
]
