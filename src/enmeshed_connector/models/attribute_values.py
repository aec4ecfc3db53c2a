"""
Identity attribute values.

Every value carries an ``@type`` tag. The tag is the stable key used to
look values up after extraction, e.g. ``attributes[GivenName.value_type()]``.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import EnmeshedModel


class AttributeValueBase(EnmeshedModel):
    """Common base for all identity attribute values."""

    type: str = Field(alias="@type")

    @classmethod
    def value_type(cls) -> str:
        """The ``@type`` tag of this value class."""
        return cls.model_fields["type"].default


class DisplayName(AttributeValueBase):
    type: Literal["DisplayName"] = Field("DisplayName", alias="@type")
    value: str


class GivenName(AttributeValueBase):
    type: Literal["GivenName"] = Field("GivenName", alias="@type")
    value: str


class MiddleName(AttributeValueBase):
    type: Literal["MiddleName"] = Field("MiddleName", alias="@type")
    value: str


class Surname(AttributeValueBase):
    type: Literal["Surname"] = Field("Surname", alias="@type")
    value: str


class HonorificPrefix(AttributeValueBase):
    type: Literal["HonorificPrefix"] = Field("HonorificPrefix", alias="@type")
    value: str


class HonorificSuffix(AttributeValueBase):
    type: Literal["HonorificSuffix"] = Field("HonorificSuffix", alias="@type")
    value: str


class Nationality(AttributeValueBase):
    """ISO 3166-1 alpha-2 country code."""

    type: Literal["Nationality"] = Field("Nationality", alias="@type")
    value: str


class CommunicationLanguage(AttributeValueBase):
    """ISO 639-1 language code."""

    type: Literal["CommunicationLanguage"] = Field("CommunicationLanguage", alias="@type")
    value: str


class EMailAddress(AttributeValueBase):
    type: Literal["EMailAddress"] = Field("EMailAddress", alias="@type")
    value: str


class PhoneNumber(AttributeValueBase):
    type: Literal["PhoneNumber"] = Field("PhoneNumber", alias="@type")
    value: str


class Website(AttributeValueBase):
    type: Literal["Website"] = Field("Website", alias="@type")
    value: str


class JobTitle(AttributeValueBase):
    type: Literal["JobTitle"] = Field("JobTitle", alias="@type")
    value: str


class Sex(AttributeValueBase):
    """One of ``female``, ``male`` or ``intersex``."""

    type: Literal["Sex"] = Field("Sex", alias="@type")
    value: str


class BirthDay(AttributeValueBase):
    type: Literal["BirthDay"] = Field("BirthDay", alias="@type")
    value: int = Field(ge=1, le=31)


class BirthMonth(AttributeValueBase):
    type: Literal["BirthMonth"] = Field("BirthMonth", alias="@type")
    value: int = Field(ge=1, le=12)


class BirthYear(AttributeValueBase):
    type: Literal["BirthYear"] = Field("BirthYear", alias="@type")
    value: int


class BirthDate(AttributeValueBase):
    type: Literal["BirthDate"] = Field("BirthDate", alias="@type")
    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int


class StreetAddress(AttributeValueBase):
    type: Literal["StreetAddress"] = Field("StreetAddress", alias="@type")
    recipient: str
    street: str
    house_no: str = Field(alias="houseNo")
    zip_code: str = Field(alias="zipCode")
    city: str
    country: str
    state: Optional[str] = None


AttributeValue = Annotated[
    Union[
        DisplayName,
        GivenName,
        MiddleName,
        Surname,
        HonorificPrefix,
        HonorificSuffix,
        Nationality,
        CommunicationLanguage,
        EMailAddress,
        PhoneNumber,
        Website,
        JobTitle,
        Sex,
        BirthDay,
        BirthMonth,
        BirthYear,
        BirthDate,
        StreetAddress,
    ],
    Field(discriminator="type"),
]

VALUE_TYPES: dict[str, type[AttributeValueBase]] = {
    cls.value_type(): cls
    for cls in (
        DisplayName,
        GivenName,
        MiddleName,
        Surname,
        HonorificPrefix,
        HonorificSuffix,
        Nationality,
        CommunicationLanguage,
        EMailAddress,
        PhoneNumber,
        Website,
        JobTitle,
        Sex,
        BirthDay,
        BirthMonth,
        BirthYear,
        BirthDate,
        StreetAddress,
    )
}


def value_type_of(value_type: Union[str, type[AttributeValueBase]]) -> str:
    """Normalize a value class or tag to its tag, rejecting unknown tags."""
    tag = value_type if isinstance(value_type, str) else value_type.value_type()
    if tag not in VALUE_TYPES:
        raise ValueError(f"Unknown attribute value type: {tag}")
    return tag
