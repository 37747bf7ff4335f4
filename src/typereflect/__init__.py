"""typereflect: runtime type introspection and dynamic dispatch.

Usage:
    from dataclasses import dataclass
    from typereflect import Pointer, call_method, method, select, struct, tagged, wrap

    @struct
    @dataclass
    class User:
        name: str = tagged('json:"name" orm:"name"', default="")
        age: int = tagged('json:"age" orm:"age"', default=0)
        is_man: bool = False

        @method(name="SayHi")
        def say_hi(self, msg: str) -> None:
            print(f"{self.name} says {msg}")

        @method.by_reference(name="SayBye")
        def say_bye(self, msg: str) -> None:
            self.name = msg

    user = User(name="Mike")
    wrap(Pointer.to(user)).elem().field_by_name("name").set_string("Amy")
    call_method(Pointer.to(user), "SayBye", "Bob")
    select(User, "name = ?", "Bob")
"""

__version__ = "0.1.0"

# Configuration
from typereflect.config import ReflectSettings, get_settings

# Core primitives
from typereflect.core import (
    ArgumentKindMismatchError,
    ArityMismatchError,
    BoundMethod,
    FieldDescriptor,
    InvalidOperationError,
    Kind,
    KindMismatchError,
    MethodDescriptor,
    MethodNotFoundError,
    NotAddressableError,
    NotAStructError,
    Pointer,
    ReceiverKind,
    ReflectedValue,
    ReflectionError,
    TypeDescriptor,
    call_method,
    classify,
    dereference,
    describe,
    describe_type,
    invoke,
    iter_fields,
    method,
    method_by_name,
    methods,
    resolve,
    struct,
    tagged,
    wrap,
)

# Mapping layer
from typereflect.orm import (
    ArgumentCountMismatchError,
    EmptyColumnListError,
    QueryCompileError,
    SelectQuery,
    UnsupportedArgumentKindError,
    compile_select,
    select,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "ReflectSettings",
    "get_settings",
    # Kind
    "Kind",
    "classify",
    # Values
    "Pointer",
    "ReflectedValue",
    "wrap",
    "dereference",
    # Structs
    "struct",
    "tagged",
    "describe",
    "describe_type",
    "iter_fields",
    "FieldDescriptor",
    "TypeDescriptor",
    # Methods
    "method",
    "ReceiverKind",
    "MethodDescriptor",
    "BoundMethod",
    "resolve",
    "method_by_name",
    "methods",
    "invoke",
    "call_method",
    # Queries
    "SelectQuery",
    "compile_select",
    "select",
    # Errors
    "ReflectionError",
    "KindMismatchError",
    "NotAddressableError",
    "InvalidOperationError",
    "NotAStructError",
    "MethodNotFoundError",
    "ArityMismatchError",
    "ArgumentKindMismatchError",
    "QueryCompileError",
    "ArgumentCountMismatchError",
    "UnsupportedArgumentKindError",
    "EmptyColumnListError",
]
