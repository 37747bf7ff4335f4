"""Struct descriptor construction and tag authoring.

Usage:
    @struct
    @dataclass
    class User:
        name: str = tagged('json:"name" orm:"name"', default="")
        age: int = tagged('json:"age"', default=0)
        is_man: bool = False          # untagged

    # Pydantic models carry the tag in json_schema_extra:
    class Account(BaseModel):
        id: int = Field(0, json_schema_extra={"tag": 'orm:"id"'})
"""

from __future__ import annotations

import dataclasses
from typing import Any, get_type_hints

from typereflect.config import ReflectSettings, get_settings
from typereflect.core.fields.models import FieldDescriptor, TypeDescriptor
from typereflect.core.fields.tags import parse_tag
from typereflect.core.kind import Kind, is_struct_type, kind_of_type


def tagged(tag: str, **field_kwargs: Any) -> Any:
    """Declare a dataclass field carrying a tag string.

    Thin wrapper over ``dataclasses.field`` that stores ``tag`` in the field
    metadata, under the configured tag metadata key.

    Args:
        tag: Tag string of key:"value" pairs.
        **field_kwargs: Forwarded to dataclasses.field (default, default_factory, ...).

    Returns:
        A dataclasses.Field.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[get_settings().tag_metadata_key] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)


def _resolved_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        # Forward references that cannot be resolved: fall back per field.
        return {}


def _dataclass_fields(cls: type, tag_key: str) -> list[tuple[str, Any, str]]:
    hints = _resolved_hints(cls)
    result = []
    for f in dataclasses.fields(cls):
        annotation = hints.get(f.name, f.type)
        result.append((f.name, annotation, f.metadata.get(tag_key, "")))
    return result


def _pydantic_fields(cls: Any, tag_key: str) -> list[tuple[str, Any, str]]:
    result = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        result.append((name, info.annotation, extra.get(tag_key, "")))
    return result


def is_frozen_type(cls: type) -> bool:
    """Check if instances of a struct type reject attribute assignment."""
    if dataclasses.is_dataclass(cls):
        return bool(cls.__dataclass_params__.frozen)  # type: ignore[attr-defined]
    return bool(getattr(cls, "model_config", {}).get("frozen", False))


def build_type_descriptor(cls: type, settings: ReflectSettings | None = None) -> TypeDescriptor:
    """Walk a struct type's declared fields.

    Args:
        cls: Dataclass or Pydantic model class.
        settings: Settings override; defaults to get_settings().

    Returns:
        TypeDescriptor with one FieldDescriptor per field, in declaration order.

    Raises:
        TypeError: If cls is neither a dataclass nor a Pydantic model.
    """
    if not is_struct_type(cls):
        raise TypeError(f"{getattr(cls, '__name__', cls)!r} is not a dataclass or Pydantic model")
    tag_key = (settings or get_settings()).tag_metadata_key

    if dataclasses.is_dataclass(cls):
        declared = _dataclass_fields(cls, tag_key)
    else:
        declared = _pydantic_fields(cls, tag_key)

    fields = []
    for index, (name, annotation, raw_tag) in enumerate(declared):
        kind = Kind.UNSUPPORTED if isinstance(annotation, str) else kind_of_type(annotation)
        fields.append(
            FieldDescriptor(
                name=name,
                kind=kind,
                tags=parse_tag(raw_tag, owner=f"{cls.__name__}.{name}"),
                raw_tag=raw_tag,
                index=index,
            )
        )

    return TypeDescriptor(
        name=cls.__name__,
        fields=tuple(fields),
        type=cls,
        frozen=is_frozen_type(cls),
    )
