"""Type registry and the @struct decorator.

Each struct type gets one TypeMeta holding its field descriptor and method
table. Tables are built once per type, either eagerly by @struct or lazily the
first time an unregistered dataclass or Pydantic model is introspected.

Usage:
    @struct
    @dataclass
    class ClassModel:
        name: str = tagged('orm:"name"', default="")
        id: int = tagged('orm:"id"', default=0)

    get_registry().get_meta(ClassModel).descriptor.field_names()  # ("name", "id")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from typereflect.core.kind import is_struct_type

if TYPE_CHECKING:
    from typereflect.core.method.models import MethodTable
    from typereflect.core.fields.models import TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class TypeMeta:
    """Cached introspection tables for one struct type."""

    descriptor: TypeDescriptor
    methods: MethodTable

    @property
    def type_name(self) -> str:
        return self.descriptor.name


class TypeRegistry:
    """Process-local registry mapping struct types to their introspection tables.

    Registration is idempotent and thread-safe: concurrent first use of the same
    type builds its tables once.
    """

    def __init__(self) -> None:
        """Initialize empty type registry."""
        self._by_type: dict[type, TypeMeta] = {}
        self._lock = threading.Lock()

    def register(self, cls: type) -> TypeMeta:
        """Register a struct type and return its metadata.

        Args:
            cls: Dataclass or Pydantic model class.

        Returns:
            Field descriptor and method table for cls.

        Raises:
            TypeError: If cls is not a struct type, or declares a method with
                non-positional parameters.
        """
        meta = self._by_type.get(cls)
        if meta is not None:
            return meta

        # Late import to avoid circular dependency
        from typereflect.core.method.core import build_method_table
        from typereflect.core.fields.core import build_type_descriptor

        with self._lock:
            if cls in self._by_type:
                return self._by_type[cls]
            meta = TypeMeta(
                descriptor=build_type_descriptor(cls),
                methods=build_method_table(cls),
            )
            self._by_type[cls] = meta

        logger.debug(
            "Registered %s.%s: %d fields, %d methods",
            cls.__module__,
            cls.__qualname__,
            len(meta.descriptor),
            len(meta.methods),
        )
        return meta

    def ensure(self, cls: type) -> TypeMeta:
        """Get metadata for a struct type, registering it on first use.

        Args:
            cls: Dataclass or Pydantic model class.

        Returns:
            The type's metadata.
        """
        return self._by_type.get(cls) or self.register(cls)

    def get_meta(self, cls: type) -> TypeMeta | None:
        """Get metadata for a registered type.

        Args:
            cls: Class to look up.

        Returns:
            Metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a type has been registered, eagerly or by first use."""
        return cls in self._by_type

    def forget(self, cls: type) -> None:
        """Drop cached tables for a type so the next use rebuilds them."""
        with self._lock:
            self._by_type.pop(cls, None)


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the global type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


@overload
def struct(cls: type) -> type: ...


@overload
def struct(cls: None = None) -> Callable[[type], type]: ...


def struct(cls: type | None = None) -> type | Callable[[type], type]:
    """Register a dataclass or Pydantic model as a struct type.

    Builds the field descriptor and method table eagerly, so errors in tags or
    method signatures surface at class definition.

    Args:
        cls: The class to register, or None if called with parentheses.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model.

    Note:
        Apply @struct AFTER @dataclass:

        >>> @struct
        ... @dataclass
        ... class User:
        ...     name: str
    """

    def decorator(c: type) -> type:
        if not is_struct_type(c):
            raise TypeError(
                f"Struct {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        _registry.register(c)
        return c

    if cls is None:
        return decorator
    return decorator(cls)
