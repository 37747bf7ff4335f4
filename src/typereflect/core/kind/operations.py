"""Kind classification for values and declared types.

Usage:
    classify("Mike")          # Kind.STRING
    classify(True)            # Kind.BOOL (never INT)
    classify(Pointer.new(1))  # Kind.POINTER
    kind_of_type(list[str])   # Kind.SLICE
"""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any, get_origin

from typereflect.core.kind.models import Kind
from typereflect.core.pointer import Pointer

# Order matters: bool is a subclass of int and must be matched first.
_SCALAR_KINDS: tuple[tuple[type, Kind], ...] = (
    (bool, Kind.BOOL),
    (int, Kind.INT),
    (float, Kind.FLOAT),
    (str, Kind.STRING),
    (Pointer, Kind.POINTER),
    (list, Kind.SLICE),
    (tuple, Kind.SLICE),
)


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def is_struct_type(cls: Any) -> bool:
    """Check if a class describes structured values with named fields.

    Dataclasses and Pydantic models qualify; the BaseModel class itself does not.

    Args:
        cls: Candidate class.

    Returns:
        True if instances of cls classify as Kind.STRUCT.
    """
    if not isinstance(cls, type):
        return False
    if is_dataclass(cls):
        return True
    return _is_pydantic(cls) and cls.__module__.split(".")[0] != "pydantic"


def classify(value: Any) -> Kind:
    """Classify a runtime value.

    Total and side-effect free: every input maps to exactly one Kind, with
    Kind.UNSUPPORTED as the fallback.

    Args:
        value: Any value.

    Returns:
        The value's Kind.
    """
    for python_type, kind in _SCALAR_KINDS:
        if isinstance(value, python_type):
            return kind
    if is_struct_type(type(value)):
        return Kind.STRUCT
    return Kind.UNSUPPORTED


def kind_of_type(annotation: Any) -> Kind:
    """Classify a declared type annotation.

    Handles plain classes and parametrized aliases such as ``list[int]`` or
    ``Pointer[str]``. Unions, Any and unresolved forward references are
    Kind.UNSUPPORTED.

    Args:
        annotation: A type or typing construct.

    Returns:
        The Kind that values of this type classify as.
    """
    origin = get_origin(annotation)
    candidate = origin if origin is not None else annotation
    if not isinstance(candidate, type):
        return Kind.UNSUPPORTED
    for python_type, kind in _SCALAR_KINDS:
        if issubclass(candidate, python_type):
            return kind
    if is_struct_type(candidate):
        return Kind.STRUCT
    return Kind.UNSUPPORTED
