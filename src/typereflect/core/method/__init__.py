"""Method functionality: decorator, descriptors, resolution and invocation."""

from typereflect.core.method.core import build_method_table, method
from typereflect.core.method.models import (
    BoundMethod,
    MethodDescriptor,
    MethodTable,
    ReceiverKind,
)
from typereflect.core.method.operations import (
    call_method,
    invoke,
    method_by_name,
    methods,
    resolve,
)

__all__ = [
    # Models
    "ReceiverKind",
    "MethodDescriptor",
    "MethodTable",
    "BoundMethod",
    # Core
    "method",
    "build_method_table",
    # Operations
    "resolve",
    "method_by_name",
    "invoke",
    "call_method",
    "methods",
]
