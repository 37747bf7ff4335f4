"""Entry points for obtaining and dereferencing value handles."""

from __future__ import annotations

from typing import Any

from typereflect.core.kind import Kind
from typereflect.core.pointer import Pointer
from typereflect.core.value.models import ReflectedValue


def wrap(value: Any) -> ReflectedValue:
    """Wrap a value in a handle.

    The handle is addressable iff value is a Pointer. An existing handle is
    returned unchanged.

    Args:
        value: Any value, a Pointer, or a ReflectedValue.

    Returns:
        Handle over value.
    """
    if isinstance(value, ReflectedValue):
        return value
    return ReflectedValue(value, addressable=isinstance(value, Pointer))


def dereference(handle: ReflectedValue | Any) -> ReflectedValue:
    """Dereference a POINTER handle (or a Pointer).

    Args:
        handle: Handle of kind POINTER, or a raw Pointer.

    Returns:
        Addressable, mutable handle over the referenced storage.

    Raises:
        InvalidOperationError: If handle is not a POINTER.
    """
    return wrap(handle).elem()


def indirect(value: Any) -> ReflectedValue:
    """Wrap a value, following one level of Pointer if present.

    Args:
        value: Any value, a Pointer, or a ReflectedValue.

    Returns:
        The pointed-to handle for pointers, otherwise the value's own handle.
    """
    handle = wrap(value)
    if handle.kind is Kind.POINTER:
        return handle.elem()
    return handle
