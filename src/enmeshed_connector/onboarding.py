"""
Onboarding orchestration on top of the enmeshed Connector.

The flow for a new user:

1. ``publish_invitation`` (or ``create_registration_qr_code``) creates a
   single-use relationship template whose request shares the connector's
   display name and asks for the configured attributes, and returns the
   QR code to show to the user.
2. The user scans the code with the enmeshed app and answers the request,
   which creates a relationship with a pending creation change.
3. ``resolve_registration`` is polled with the template id. Once the
   relationship exists it extracts the supplied attributes, lets a decision
   function accept or reject the change, and reports the outcome.

Example usage:
    ```python
    service = OnboardingService.from_settings()
    data = service.create_registration_qr_code(
        InvitationTitles(shared="Our data", required="Your data", created="New data")
    )
    ...
    result = service.resolve_registration(
        data.relationship_template_id,
        decide=lambda attributes: "Surname" in attributes,
    )
    ```
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type, Union

from .client import EnmeshedClient
from .config import ConnectorSettings, get_settings
from .models.attribute_values import AttributeValueBase, DisplayName, value_type_of
from .models.attributes import IDENTITY_ATTRIBUTE_TYPE, IdentityAttribute, IdentityAttributeQuery, LocalAttribute
from .models.errors import MalformedResponseError
from .models.identity import IdentityInfo
from .models.registration import RegistrationData, RegistrationResult
from .models.relationship_templates import RelationshipTemplateContent
from .models.relationships import Relationship, RelationshipChange, RelationshipChangeStatus
from .models.request_items import (
    CreateAttributeRequestItem,
    ReadAttributeRequestItem,
    Request,
    RequestItemGroup,
    ShareAttributeRequestItem,
)
from .models.response_items import ReadAttributeAcceptResponseItem, Response, ResponseItemGroup, ResponseItemResult

logger = logging.getLogger(__name__)

ValueType = Union[str, Type[AttributeValueBase]]
AttributeMap = Dict[str, AttributeValueBase]

# Called with the extracted attributes of a pending registration; returns
# True to accept the relationship, False to reject it.
AcceptanceDecider = Callable[[Mapping[str, AttributeValueBase]], bool]

DEFAULT_INVITATION_VALIDITY = timedelta(hours=1)
DEFAULT_MAX_ALLOCATIONS = 1


def accept_all(attributes: Mapping[str, AttributeValueBase]) -> bool:
    """Decide every pending registration in favour of accepting it."""
    return True


@dataclass(frozen=True)
class InvitationTitles:
    """Display titles of the invitation sections."""

    shared: str
    required: str
    created: str


def build_invitation_content(
    shared_attribute: LocalAttribute,
    required_types: Sequence[ValueType],
    optional_types: Sequence[ValueType],
    create_types: Sequence[ValueType],
    titles: InvitationTitles,
) -> List[RequestItemGroup]:
    """Build the ordered request item groups of an invitation.

    Groups come in a fixed order: shared (always), requested (required
    items, then optional items; omitted when both are empty), created
    (omitted when empty). Items keep the caller's order within a group.
    """
    groups = [
        RequestItemGroup(
            title=titles.shared,
            must_be_accepted=True,
            items=[
                ShareAttributeRequestItem(
                    must_be_accepted=True,
                    attribute=shared_attribute.content,
                    source_attribute_id=shared_attribute.id,
                )
            ],
        )
    ]

    requested = [_read_item(t, must_be_accepted=True) for t in required_types]
    requested += [_read_item(t, must_be_accepted=False) for t in optional_types]
    if requested:
        groups.append(
            RequestItemGroup(
                title=titles.required,
                must_be_accepted=bool(required_types),
                items=requested,
            )
        )

    if create_types:
        groups.append(
            RequestItemGroup(
                title=titles.created,
                must_be_accepted=True,
                items=[
                    CreateAttributeRequestItem(
                        must_be_accepted=True,
                        query=IdentityAttributeQuery(value_type=value_type_of(t)),
                    )
                    for t in create_types
                ],
            )
        )

    return groups


def _read_item(value_type: ValueType, must_be_accepted: bool) -> ReadAttributeRequestItem:
    return ReadAttributeRequestItem(
        must_be_accepted=must_be_accepted,
        query=IdentityAttributeQuery(value_type=value_type_of(value_type)),
    )


def extract_attributes(response: Response) -> AttributeMap:
    """Collect the attribute values of all accepted response items.

    Groups are flattened one level. Values are keyed by their ``@type``;
    a later item overwrites an earlier one of the same type.

    Raises:
        MalformedResponseError: an accepted read item carries no attribute
    """
    attributes: AttributeMap = {}
    for item in _flatten(response.items):
        if item.result != ResponseItemResult.ACCEPTED:
            continue
        if not isinstance(item, ReadAttributeAcceptResponseItem):
            continue
        if item.attribute is None:
            raise MalformedResponseError(
                "Accepted read attribute response item without attribute",
                details={"attribute_id": item.attribute_id},
            )
        value = item.attribute.value
        attributes[value.type] = value
    return attributes


def _flatten(items):
    for item in items:
        if isinstance(item, ResponseItemGroup):
            yield from item.items
        else:
            yield item


class OnboardingService:
    """
    Onboards users through enmeshed relationships.

    On construction the service fetches the Connector identity and makes
    sure a DisplayName attribute with ``display_name`` exists for it; that
    attribute is shared with every invited peer.

    The service keeps no state between calls. Concurrent
    ``resolve_registration`` calls for the same template id are not
    coordinated and must be serialized by the caller.
    """

    def __init__(
        self,
        client: EnmeshedClient,
        display_name: str,
        required_attributes: Sequence[ValueType] = (),
        optional_attributes: Sequence[ValueType] = (),
        create_attributes: Sequence[ValueType] = (),
        invitation_validity: timedelta = DEFAULT_INVITATION_VALIDITY,
        max_allocations: int = DEFAULT_MAX_ALLOCATIONS,
    ):
        self._client = client
        self.required_attributes = [value_type_of(t) for t in required_attributes]
        self.optional_attributes = [value_type_of(t) for t in optional_attributes]
        self.create_attributes = [value_type_of(t) for t in create_attributes]
        self.invitation_validity = invitation_validity
        self.max_allocations = max_allocations

        self.identity_info: IdentityInfo = client.account.get_identity_info()
        self.connector_display_name_attribute = self.ensure_own_attribute(
            self.identity_info.address,
            DisplayName,
            lambda: DisplayName(value=display_name),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ConnectorSettings] = None,
        client: Optional[EnmeshedClient] = None,
    ) -> "OnboardingService":
        """Build a service (and client, unless given) from settings."""
        settings = settings or get_settings()
        return cls(
            client or EnmeshedClient.from_settings(settings),
            display_name=settings.display_name,
            required_attributes=settings.required_attributes,
            optional_attributes=settings.optional_attributes,
            create_attributes=settings.create_attributes,
            invitation_validity=timedelta(seconds=settings.invitation_validity_seconds),
            max_allocations=settings.max_allocations,
        )

    def ensure_own_attribute(
        self,
        identity_address: str,
        value_type: ValueType,
        value_factory: Callable[[], AttributeValueBase],
    ) -> LocalAttribute:
        """Return the identity's attribute of ``value_type``, creating it if absent.

        An existing attribute is returned unchanged even when its value
        differs from what ``value_factory`` would produce.
        """
        tag = value_type_of(value_type)
        existing = self._client.attributes.search(
            owner=identity_address,
            value_type=tag,
            content_type=IDENTITY_ATTRIBUTE_TYPE,
        )
        if existing:
            return existing[0]

        attribute = self._client.attributes.create(
            IdentityAttribute(owner=identity_address, value=value_factory())
        )
        logger.info(f"Created {tag} attribute {attribute.id} for {identity_address}")
        return attribute

    def build_invitation_content(self, titles: InvitationTitles) -> List[RequestItemGroup]:
        """Build invitation groups from the configured attribute types."""
        return build_invitation_content(
            self.connector_display_name_attribute,
            self.required_attributes,
            self.optional_attributes,
            self.create_attributes,
            titles,
        )

    def publish_invitation(
        self,
        content: Sequence[RequestItemGroup],
        validity: Optional[timedelta] = None,
        max_allocations: Optional[int] = None,
    ) -> RegistrationData:
        """Create a relationship template for ``content`` and fetch its QR code.

        Args:
            content: Ordered request item groups
            validity: How long the invitation can be used (default: one hour)
            max_allocations: How many peers may use it (default: 1)

        Returns:
            The template id and the raw QR code bytes
        """
        validity = validity if validity is not None else self.invitation_validity
        max_allocations = max_allocations if max_allocations is not None else self.max_allocations

        template = self._client.relationship_templates.create_own(
            content=RelationshipTemplateContent(
                on_new_relationship=Request(items=list(content)),
            ),
            expires_at=datetime.now(timezone.utc) + validity,
            max_number_of_allocations=max_allocations,
        )
        logger.info(
            f"Published relationship template {template.id} "
            f"(expires {template.expires_at}, allocations {max_allocations})"
        )

        qr_code = self._client.relationship_templates.get_qr_code(template.id)
        return RegistrationData(relationship_template_id=template.id, qr_code=qr_code)

    def create_registration_qr_code(
        self,
        titles: InvitationTitles,
        validity: Optional[timedelta] = None,
    ) -> RegistrationData:
        """Publish an invitation for the configured attribute types."""
        return self.publish_invitation(self.build_invitation_content(titles), validity)

    def resolve_registration(
        self,
        template_id: str,
        decide: Optional[AcceptanceDecider] = None,
    ) -> Optional[RegistrationResult]:
        """Report the registration state of a template, deciding it if pending.

        Returns None while no relationship exists for the template. A pending
        creation change is passed to ``decide`` (default: accept) and then
        accepted or rejected, after which the state is resolved once more
        and returned as-is, even if still pending.
        """
        state = self._resolve(template_id)
        if state is None:
            return None

        relationship, change, attributes = state
        if change.status == RelationshipChangeStatus.PENDING:
            accept = (decide or accept_all)(attributes)
            if accept:
                logger.info(f"Accepting relationship {relationship.id} change {change.id}")
                self._client.relationships.accept_change(relationship.id, change.id)
            else:
                logger.info(f"Rejecting relationship {relationship.id} change {change.id}")
                self._client.relationships.reject_change(relationship.id, change.id)

            state = self._resolve(template_id)
            if state is None:
                return None
            relationship, change, attributes = state

        return RegistrationResult(
            enmeshed_address=relationship.peer,
            relationship_id=relationship.id,
            relationship_change_id=change.id,
            attributes=attributes,
            accepted=change.status == RelationshipChangeStatus.ACCEPTED,
        )

    def _resolve(
        self, template_id: str
    ) -> Optional[Tuple[Relationship, RelationshipChange, AttributeMap]]:
        self._client.account.sync()

        relationships = self._client.relationships.search(template_id=template_id)
        if not relationships:
            return None

        relationship = relationships[0]
        change = relationship.creation_change()
        if change is None:
            raise MalformedResponseError(
                f"Relationship {relationship.id} has no creation change",
                details={"relationship_id": relationship.id},
            )

        content = change.request.content if change.request else None
        if content is None or content.response is None:
            raise MalformedResponseError(
                f"Creation change {change.id} carries no response",
                details={"relationship_id": relationship.id, "change_id": change.id},
            )

        return relationship, change, extract_attributes(content.response)
