"""Kind functionality: the kind enumeration and classifiers."""

from typereflect.core.kind.models import Kind
from typereflect.core.kind.operations import classify, is_struct_type, kind_of_type

__all__ = [
    "Kind",
    "classify",
    "kind_of_type",
    "is_struct_type",
]
