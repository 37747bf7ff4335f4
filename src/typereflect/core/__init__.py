"""Core functionalities: the introspection and dispatch engine.

Architecture Note:
    core/ holds the kind classifier, value handles, the struct walker and the
    method dispatcher. The only state is the process-local type registry that
    caches per-type field descriptors and method tables.
    For the query layer built on top, see orm/.
"""

from typereflect.core.errors import (
    ArgumentKindMismatchError,
    ArityMismatchError,
    InvalidOperationError,
    KindMismatchError,
    MethodNotFoundError,
    NotAddressableError,
    NotAStructError,
    ReflectionError,
)
from typereflect.core.fields import (
    DuplicateTagKeyWarning,
    FieldDescriptor,
    MalformedTagWarning,
    TagWarning,
    TypeDescriptor,
    describe,
    describe_type,
    iter_fields,
    parse_tag,
    tag_of,
    tagged,
)
from typereflect.core.kind import Kind, classify, is_struct_type, kind_of_type
from typereflect.core.method import (
    BoundMethod,
    MethodDescriptor,
    MethodTable,
    ReceiverKind,
    call_method,
    invoke,
    method,
    method_by_name,
    methods,
    resolve,
)
from typereflect.core.pointer import Pointer
from typereflect.core.registry import TypeMeta, TypeRegistry, get_registry, struct
from typereflect.core.value import ReflectedValue, dereference, indirect, wrap

__all__ = [
    # Errors
    "ReflectionError",
    "KindMismatchError",
    "NotAddressableError",
    "InvalidOperationError",
    "NotAStructError",
    "MethodNotFoundError",
    "ArityMismatchError",
    "ArgumentKindMismatchError",
    # Kind
    "Kind",
    "classify",
    "kind_of_type",
    "is_struct_type",
    # Pointer
    "Pointer",
    # Registry
    "struct",
    "get_registry",
    "TypeRegistry",
    "TypeMeta",
    # Value
    "ReflectedValue",
    "wrap",
    "dereference",
    "indirect",
    # Struct
    "FieldDescriptor",
    "TypeDescriptor",
    "tagged",
    "describe",
    "describe_type",
    "iter_fields",
    "tag_of",
    "parse_tag",
    "TagWarning",
    "MalformedTagWarning",
    "DuplicateTagKeyWarning",
    # Method
    "method",
    "ReceiverKind",
    "MethodDescriptor",
    "MethodTable",
    "BoundMethod",
    "resolve",
    "method_by_name",
    "methods",
    "invoke",
    "call_method",
]
