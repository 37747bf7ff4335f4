"""Struct walker: descriptors and lock-step field values.

Usage:
    descriptor = describe(user)              # or describe(Pointer.to(user))
    for field, value in iter_fields(Pointer.to(user)):
        if field.kind is Kind.STRING:
            value.set_string(value.as_string().upper())
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from typereflect.core.errors import NotAStructError
from typereflect.core.fields.models import FieldDescriptor, TypeDescriptor
from typereflect.core.kind import Kind, is_struct_type
from typereflect.core.registry import get_registry
from typereflect.core.value import ReflectedValue, indirect


def _struct_handle(value: Any) -> ReflectedValue:
    handle = indirect(value)
    if handle.kind is not Kind.STRUCT:
        raise NotAStructError(f"Expected a struct or pointer to struct, got {handle.kind.name}")
    return handle


def describe_type(cls: type) -> TypeDescriptor:
    """Describe a struct class.

    Args:
        cls: Dataclass or Pydantic model class.

    Returns:
        The cached TypeDescriptor, built on first use.

    Raises:
        NotAStructError: If cls is not a struct type.
    """
    if not is_struct_type(cls):
        raise NotAStructError(f"{getattr(cls, '__name__', cls)!r} is not a struct type")
    return get_registry().ensure(cls).descriptor


def describe(value: Any) -> TypeDescriptor:
    """Describe a struct value, a Pointer to one, or a handle of either.

    Repeated calls for the same type return fields in the same declaration
    order.

    Args:
        value: Struct instance, Pointer, or ReflectedValue.

    Returns:
        TypeDescriptor of the (pointed-to) struct.

    Raises:
        NotAStructError: If value is not a struct after one dereference.
    """
    return describe_type(_struct_handle(value).type)


def iter_fields(value: Any) -> Iterator[tuple[FieldDescriptor, ReflectedValue]]:
    """Walk field descriptors and field values in lock-step.

    Field handles are addressable when value was supplied through a Pointer
    (and the type is not frozen).

    Args:
        value: Struct instance, Pointer, or ReflectedValue.

    Yields:
        (FieldDescriptor, ReflectedValue) pairs at identical positions.

    Raises:
        NotAStructError: If value is not a struct after one dereference.
    """
    handle = _struct_handle(value)
    descriptor = describe_type(handle.type)
    for position, field_descriptor in enumerate(descriptor.fields):
        yield field_descriptor, handle.field(position)


def tag_of(value: Any, field_name: str, key: str) -> str | None:
    """Look up one tag of one field.

    Args:
        value: Struct instance, Pointer, handle, or struct class.
        field_name: Field name.
        key: Tag key.

    Returns:
        The tag value, or None if the field has no such key.

    Raises:
        NotAStructError: If value is not a struct.
        KeyError: If the struct has no such field.
    """
    descriptor = describe_type(value) if isinstance(value, type) else describe(value)
    field_descriptor = descriptor.field(field_name)
    if field_descriptor is None:
        raise KeyError(f"{descriptor.name} has no field {field_name!r}")
    return field_descriptor.lookup(key)
