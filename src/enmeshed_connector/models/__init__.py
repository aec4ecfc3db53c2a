"""enmeshed connector models."""
from .base import EnmeshedModel
from .identity import IdentityInfo
from .attribute_values import (
    AttributeValue,
    AttributeValueBase,
    BirthDate,
    BirthDay,
    BirthMonth,
    BirthYear,
    CommunicationLanguage,
    DisplayName,
    EMailAddress,
    GivenName,
    HonorificPrefix,
    HonorificSuffix,
    JobTitle,
    MiddleName,
    Nationality,
    PhoneNumber,
    Sex,
    StreetAddress,
    Surname,
    VALUE_TYPES,
    Website,
    value_type_of,
)
from .attributes import (
    IDENTITY_ATTRIBUTE_TYPE,
    CreateAttributeRequest,
    IdentityAttribute,
    IdentityAttributeQuery,
    LocalAttribute,
    ShareInfo,
)
from .request_items import (
    CreateAttributeRequestItem,
    ReadAttributeRequestItem,
    Request,
    RequestItem,
    RequestItemGroup,
    ShareAttributeRequestItem,
)
from .response_items import (
    AcceptResponseItem,
    CreateAttributeAcceptResponseItem,
    ErrorResponseItem,
    FreeTextAcceptResponseItem,
    ReadAttributeAcceptResponseItem,
    RejectResponseItem,
    Response,
    ResponseItem,
    ResponseItemGroup,
    ResponseItemResult,
    ResponseResult,
    ShareAttributeAcceptResponseItem,
)
from .relationship_templates import (
    RelationshipTemplate,
    RelationshipTemplateContent,
    RelationshipTemplateCreation,
)
from .relationships import (
    Relationship,
    RelationshipChange,
    RelationshipChangeRequest,
    RelationshipChangeStatus,
    RelationshipChangeType,
    RelationshipCreationChangeRequestContent,
    RelationshipStatus,
)
from .registration import RegistrationData, RegistrationResult
from .errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    EnmeshedError,
    ErrorCode,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "EnmeshedModel",
    "IdentityInfo",
    "AttributeValue",
    "AttributeValueBase",
    "BirthDate",
    "BirthDay",
    "BirthMonth",
    "BirthYear",
    "CommunicationLanguage",
    "DisplayName",
    "EMailAddress",
    "GivenName",
    "HonorificPrefix",
    "HonorificSuffix",
    "JobTitle",
    "MiddleName",
    "Nationality",
    "PhoneNumber",
    "Sex",
    "StreetAddress",
    "Surname",
    "VALUE_TYPES",
    "Website",
    "value_type_of",
    "IDENTITY_ATTRIBUTE_TYPE",
    "CreateAttributeRequest",
    "IdentityAttribute",
    "IdentityAttributeQuery",
    "LocalAttribute",
    "ShareInfo",
    "CreateAttributeRequestItem",
    "ReadAttributeRequestItem",
    "Request",
    "RequestItem",
    "RequestItemGroup",
    "ShareAttributeRequestItem",
    "AcceptResponseItem",
    "CreateAttributeAcceptResponseItem",
    "ErrorResponseItem",
    "FreeTextAcceptResponseItem",
    "ReadAttributeAcceptResponseItem",
    "RejectResponseItem",
    "Response",
    "ResponseItem",
    "ResponseItemGroup",
    "ResponseItemResult",
    "ResponseResult",
    "ShareAttributeAcceptResponseItem",
    "RelationshipTemplate",
    "RelationshipTemplateContent",
    "RelationshipTemplateCreation",
    "Relationship",
    "RelationshipChange",
    "RelationshipChangeRequest",
    "RelationshipChangeStatus",
    "RelationshipChangeType",
    "RelationshipCreationChangeRequestContent",
    "RelationshipStatus",
    "RegistrationData",
    "RegistrationResult",
    "APIError",
    "AuthenticationError",
    "ConnectionError",
    "EnmeshedError",
    "ErrorCode",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitError",
    "TimeoutError",
    "ValidationError",
]
