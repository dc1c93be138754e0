"""Custom file properties and the templates describing them."""
from typing import ClassVar, List, Optional

from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class PropertyType(TaggedUnion):
    STRING: ClassVar[str] = "string"
    OTHER: ClassVar[str] = "other"


class PropertyField(Struct):
    name: str
    value: str


class PropertyFieldTemplate(Struct):
    name: str
    description: str
    type: PropertyType


class PropertyGroup(Struct):
    """Values of the fields of one template attached to a file"""
    template_id: str
    fields: List[PropertyField]


class PropertyGroupTemplate(Struct):
    name: str
    description: str
    fields: List[PropertyFieldTemplate]


class GetPropertyTemplateArg(Struct):
    template_id: str


class GetPropertyTemplateResult(PropertyGroupTemplate):
    pass


class ListPropertyTemplateIds(Struct):
    template_ids: List[str]


class PropertyTemplateError(TaggedUnion):
    TEMPLATE_NOT_FOUND: ClassVar[str] = "template_not_found"
    RESTRICTED_CONTENT: ClassVar[str] = "restricted_content"
    OTHER: ClassVar[str] = "other"

    template_not_found: Optional[str] = None


class ModifyPropertyTemplateError(PropertyTemplateError):
    CONFLICTING_PROPERTY_NAMES: ClassVar[str] = "conflicting_property_names"
    TOO_MANY_PROPERTIES: ClassVar[str] = "too_many_properties"
    TOO_MANY_TEMPLATES: ClassVar[str] = "too_many_templates"
    TEMPLATE_ATTRIBUTE_TOO_LARGE: ClassVar[str] = "template_attribute_too_large"
