from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ContentTypeKind",
    "BaseAttribute",
    "StringAttribute",
    "TextAttribute",
    "EmailAttribute",
    "EnumerationAttribute",
    "IntegerAttribute",
    "BigIntegerAttribute",
    "FloatAttribute",
    "DecimalAttribute",
    "UidAttribute",
    "BooleanAttribute",
    "Attribute",
    "ContentTypeSchema",
]


class ContentTypeKind(str, Enum):
    CONTENT_TYPE = "contentType"
    COMPONENT = "component"


class BaseAttribute(BaseModel):
    """Fields shared by every attribute descriptor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    required: bool = False
    unique: bool = False
    private: bool = False


class _SizedAttribute(BaseAttribute):
    min_length: Optional[int] = Field(default=None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(default=None, alias="maxLength", ge=0)


class StringAttribute(_SizedAttribute):
    type: Literal["string"] = "string"
    regex: Optional[str] = None


class TextAttribute(_SizedAttribute):
    type: Literal["text"] = "text"
    regex: Optional[str] = None


class EmailAttribute(_SizedAttribute):
    type: Literal["email"] = "email"


class EnumerationAttribute(BaseAttribute):
    type: Literal["enumeration"] = "enumeration"
    enum: list[str] = Field(default_factory=list)


class IntegerAttribute(BaseAttribute):
    type: Literal["integer"] = "integer"
    min: Optional[int] = None
    max: Optional[int] = None


class BigIntegerAttribute(BaseAttribute):
    # Bounds may exceed 64 bits, the loader hands them over as strings
    type: Literal["biginteger"] = "biginteger"
    min: Optional[Union[int, str]] = None
    max: Optional[Union[int, str]] = None


class FloatAttribute(BaseAttribute):
    type: Literal["float"] = "float"
    min: Optional[float] = None
    max: Optional[float] = None


class DecimalAttribute(BaseAttribute):
    type: Literal["decimal"] = "decimal"
    min: Optional[float] = None
    max: Optional[float] = None


class UidAttribute(_SizedAttribute):
    type: Literal["uid"] = "uid"
    target_field: Optional[str] = Field(default=None, alias="targetField")
    regex: Optional[str] = None


class BooleanAttribute(BaseAttribute):
    type: Literal["boolean"] = "boolean"


Attribute = Annotated[
    Union[
        StringAttribute,
        TextAttribute,
        EmailAttribute,
        EnumerationAttribute,
        IntegerAttribute,
        BigIntegerAttribute,
        FloatAttribute,
        DecimalAttribute,
        UidAttribute,
        BooleanAttribute,
    ],
    Field(discriminator="type"),
]


class ContentTypeSchema(BaseModel):
    """
    Content type (or component) definition as produced by the schema loader.

    Accepts the loader's camelCase keys (`modelName`, `privateAttributes`) as well
    as the snake_case field names. Instances are immutable for the duration of a
    validation pass.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", protected_namespaces=())

    uid: str
    model_name: str = Field(alias="modelName")
    kind: ContentTypeKind = ContentTypeKind.CONTENT_TYPE
    attributes: dict[str, Attribute] = Field(default_factory=dict)
    private_attributes: list[str] = Field(default_factory=list, alias="privateAttributes")
    options: dict[str, Any] = Field(default_factory=dict)

    @property
    def collection_name(self) -> str:
        return self.options.get("collectionName") or self.model_name.replace("-", "_")

    @property
    def draft_and_publish(self) -> bool:
        return bool(self.options.get("draftAndPublish", False))

    def attribute(self, name: str) -> Attribute:
        return self.attributes[name]
