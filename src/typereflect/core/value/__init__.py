"""Value functionality: kind-tagged handles with addressability rules."""

from typereflect.core.value.models import ReflectedValue
from typereflect.core.value.operations import dereference, indirect, wrap

__all__ = [
    "ReflectedValue",
    "wrap",
    "dereference",
    "indirect",
]
