"""Base classes for the Dropbox wire models.

Dropbox describes its API in the Stone IDL. Two kinds of types reach the
wire: structs (plain JSON objects) and tagged unions (JSON objects carrying
a ``.tag`` discriminator). Both are pydantic models here; the union codec
lives in ``TaggedUnion``'s validator/serializer pair.
"""
import json
from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated, Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin

from pydantic import (  # type: ignore
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    TypeAdapter,
    model_serializer,
    model_validator,
)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

M = TypeVar("M", bound="StoneModel")


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


# Dropbox only accepts second precision, UTC, with a literal "Z"
Timestamp = Annotated[datetime, PlainSerializer(_format_timestamp, return_type=str, when_used="json")]


class StoneModel(BaseModel):
    """Shared config and (de)serialization helpers"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        """Wire JSON object for this value"""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls: Type[M], data: Any) -> M:
        return cls.model_validate(data)


class Struct(StoneModel):
    """A Stone struct. Fields holding None are left out of the wire form."""

    @model_serializer(mode="wrap")
    def _omit_none(self, handler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def is_struct_type(annotation: Any) -> bool:
    annotation = _unwrap_optional(annotation)
    return isinstance(annotation, type) and issubclass(annotation, Struct)


class TaggedUnion(StoneModel):
    """A Stone union.

    Each variant carrying a payload is declared as an optional field named
    after its tag (or aliased to it). Void variants need no field. After
    decoding, only the field named by ``tag`` is set.

    Wire shapes::

        {".tag": "other"}                        void variant ("other" also accepted)
        {".tag": "file", "name": "a.txt", ...}   struct payload, fields inlined
        {".tag": "path", "path": {...}}          any other payload, under its tag
    """
    tag: str = Field(alias=".tag")

    def __init__(self, tag: Optional[str] = None, value: Any = None, /, **data: Any) -> None:
        if tag is not None:
            data["tag"] = tag
            if value is not None:
                field_name = type(self).variant_field(tag)
                if field_name is None:
                    raise ValueError(f"{type(self).__name__} variant {tag!r} carries no value")
                data[field_name] = value
        super().__init__(**data)

    @classmethod
    def variant_field(cls, tag: str) -> Optional[str]:
        """Name of the field holding the payload of `tag`, None for void or unknown tags"""
        for name, info in cls.model_fields.items():
            if name == "tag":
                continue
            if name == tag or info.alias == tag:
                return name
        return None

    @model_validator(mode="before")
    @classmethod
    def _decode_variant(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"tag": data}
        if not isinstance(data, dict):
            return data

        tag = data.get(".tag", data.get("tag"))
        if not isinstance(tag, str):
            return data
        field_name = cls.variant_field(tag)
        if field_name is None:
            return {"tag": tag}

        info = cls.model_fields[field_name]
        keys = (tag, field_name)
        if is_struct_type(info.annotation):
            rest = {k: v for k, v in data.items() if k not in (".tag", "tag")}
            for key in keys:
                if set(rest) == {key} and isinstance(rest[key], (dict, BaseModel)):
                    return {"tag": tag, field_name: rest[key]}
            return {"tag": tag, field_name: rest}

        for key in keys:
            if key in data:
                return {"tag": tag, field_name: data[key]}
        return {"tag": tag}

    @model_serializer(mode="wrap")
    def _encode_variant(self, handler):
        out: Dict[str, Any] = {".tag": self.tag}
        field_name = self.variant_field(self.tag)
        if field_name is None or getattr(self, field_name) is None:
            return out

        serialized = handler(self)
        alias = type(self).model_fields[field_name].alias
        payload = serialized[alias] if alias in serialized else serialized.get(field_name)
        if is_struct_type(type(self).model_fields[field_name].annotation) and isinstance(payload, dict):
            out.update(payload)
        else:
            out[self.tag] = payload
        return out

    @property
    def value(self) -> Any:
        """The active variant's payload, None for void variants"""
        field_name = self.variant_field(self.tag)
        return getattr(self, field_name) if field_name else None

    def is_(self, tag: str) -> bool:
        return self.tag == tag

    def __str__(self) -> str:
        return self.tag


@lru_cache(maxsize=None)
def type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode(tp: Any, data: Any) -> Any:
    """Decode `data` (a parsed JSON value) into `tp`"""
    if tp is None:
        return None
    return type_adapter(tp).validate_python(data)


def encode(value: Any) -> Any:
    """Encode a model (or a list of models) into its wire JSON value"""
    if isinstance(value, StoneModel):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    return value
