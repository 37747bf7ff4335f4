"""ReflectedValue: a kind-tagged handle with addressability rules.

A handle either holds a plain value (not addressable) or a Pointer to the
storage it reads and writes (addressable). The flag is fixed at construction
and every setter is gated on it.

Usage:
    person = Person(name="Mike")

    copy_handle = wrap(person).field_by_name("name")
    copy_handle.set_string("Amy")      # NotAddressableError

    ref_handle = wrap(Pointer.to(person)).elem().field_by_name("name")
    ref_handle.set_string("Amy")       # person.name == "Amy"
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from typereflect.core.errors import (
    InvalidOperationError,
    KindMismatchError,
    NotAddressableError,
)
from typereflect.core.kind import Kind, classify
from typereflect.core.pointer import Pointer
from typereflect.core.registry import get_registry


class ReflectedValue:
    """Handle over a value together with its Kind and addressability.

    Args:
        value: Current contents (used when ref is None).
        addressable: Whether the handle was derived from a reference.
        ref: Storage location for handles that read and write through a Pointer.
    """

    __slots__ = ("_value", "_ref", "_kind", "_type", "_addressable")

    def __init__(self, value: Any, *, addressable: bool = False, ref: Pointer[Any] | None = None):
        self._value = value if ref is None else None
        self._ref = ref
        current = value if ref is None else ref.load()
        self._kind = classify(current)
        self._type: type = type(current)
        self._addressable = addressable

    @property
    def kind(self) -> Kind:
        """Kind of the wrapped value; never changes after construction."""
        return self._kind

    @property
    def type(self) -> type:
        """Python type of the wrapped value at construction."""
        return self._type

    @property
    def addressable(self) -> bool:
        """True if the handle was derived from a reference."""
        return self._addressable

    @property
    def mutable(self) -> bool:
        """True iff addressable; no read-only-through-reference state exists."""
        return self._addressable

    def interface(self) -> Any:
        """Read the current underlying value regardless of kind."""
        if self._ref is not None:
            return self._ref.load()
        return self._value

    # Typed getters

    def _expect(self, kind: Kind, operation: str) -> None:
        if self._kind is not kind:
            raise KindMismatchError(f"{operation} on {self._kind.name} value")

    def _read(self, kind: Kind, operation: str) -> Any:
        self._expect(kind, operation)
        value = self.interface()
        if self._ref is not None and (current := classify(value)) is not kind:
            raise KindMismatchError(
                f"{operation}: storage now holds a {current.name} value, not {kind.name}"
            )
        return value

    def as_string(self) -> str:
        """Read a STRING value.

        Raises:
            KindMismatchError: If the handle, or the storage it reads, is not STRING.
        """
        return self._read(Kind.STRING, "as_string")

    def as_int(self) -> int:
        """Read an INT value.

        Raises:
            KindMismatchError: If the handle, or the storage it reads, is not INT.
        """
        return self._read(Kind.INT, "as_int")

    def as_bool(self) -> bool:
        """Read a BOOL value.

        Raises:
            KindMismatchError: If the handle, or the storage it reads, is not BOOL.
        """
        return self._read(Kind.BOOL, "as_bool")

    def as_float(self) -> float:
        """Read a FLOAT value.

        Raises:
            KindMismatchError: If the handle, or the storage it reads, is not FLOAT.
        """
        return self._read(Kind.FLOAT, "as_float")

    # Setters

    def _assign(self, value: Any, kind: Kind | None, operation: str) -> None:
        if not self._addressable:
            raise NotAddressableError(
                f"{operation} using unaddressable {self._kind.name} value; "
                f"obtain the handle through a Pointer to mutate"
            )
        if kind is not None:
            self._expect(kind, operation)
        source_kind = classify(value)
        if source_kind is not self._kind:
            raise KindMismatchError(
                f"{operation}: cannot assign {source_kind.name} to {self._kind.name} value"
            )
        if self._kind is Kind.STRUCT and type(value) is not self._type:
            raise KindMismatchError(
                f"{operation}: cannot assign {type(value).__name__} to {self._type.__name__} value"
            )
        if self._ref is None:
            raise InvalidOperationError(
                f"{operation}: {self._kind.name} handle has no storage of its own; "
                f"dereference it first"
            )
        self._ref.store(value)

    def set_string(self, value: str) -> None:
        """Overwrite a STRING value in place.

        Raises:
            NotAddressableError: If the handle is not mutable.
            KindMismatchError: If the handle or the source is not STRING.
        """
        self._assign(value, Kind.STRING, "set_string")

    def set_int(self, value: int) -> None:
        """Overwrite an INT value in place.

        Raises:
            NotAddressableError: If the handle is not mutable.
            KindMismatchError: If the handle or the source is not INT.
        """
        self._assign(value, Kind.INT, "set_int")

    def set_bool(self, value: bool) -> None:
        """Overwrite a BOOL value in place.

        Raises:
            NotAddressableError: If the handle is not mutable.
            KindMismatchError: If the handle or the source is not BOOL.
        """
        self._assign(value, Kind.BOOL, "set_bool")

    def set_float(self, value: float) -> None:
        """Overwrite a FLOAT value in place.

        Raises:
            NotAddressableError: If the handle is not mutable.
            KindMismatchError: If the handle or the source is not FLOAT.
        """
        self._assign(value, Kind.FLOAT, "set_float")

    def set(self, value: Any) -> None:
        """Overwrite the value in place, whatever its kind.

        Assigning a struct copies its fields into the referenced instance when
        the handle came from dereferencing Pointer.to().

        Raises:
            NotAddressableError: If the handle is not mutable.
            KindMismatchError: If the source kind (or struct type) differs.
            InvalidOperationError: If the handle wraps a Pointer rather than storage.
        """
        self._assign(value, None, "set")

    # Pointers

    def elem(self) -> ReflectedValue:
        """Dereference a POINTER handle.

        Returns:
            Addressable, mutable handle over the referenced storage.

        Raises:
            InvalidOperationError: If the handle is not a POINTER.
        """
        if self._kind is not Kind.POINTER:
            raise InvalidOperationError(f"elem of non-pointer {self._kind.name} value")
        pointer: Pointer[Any] = self.interface()
        return ReflectedValue(None, addressable=True, ref=pointer)

    # Structs

    def _struct_fields(self, operation: str) -> tuple[str, ...]:
        self._expect(Kind.STRUCT, operation)
        return get_registry().ensure(self._type).descriptor.field_names()

    def num_field(self) -> int:
        """Number of declared fields of a STRUCT value.

        Raises:
            KindMismatchError: If the handle is not a STRUCT.
        """
        return len(self._struct_fields("num_field"))

    def field(self, index: int) -> ReflectedValue:
        """Handle over the index-th declared field of a STRUCT value.

        The field handle is addressable iff this handle is and the struct
        type is not frozen.

        Raises:
            KindMismatchError: If the handle is not a STRUCT.
            IndexError: If index is out of range.
        """
        names = self._struct_fields("field")
        if not 0 <= index < len(names):
            raise IndexError(f"Field index {index} out of range for {self._type.__name__}")
        return self._field_handle(names[index])

    def field_by_name(self, name: str) -> ReflectedValue:
        """Handle over a STRUCT field by name.

        Raises:
            KindMismatchError: If the handle is not a STRUCT.
            KeyError: If the struct has no such field.
        """
        names = self._struct_fields("field_by_name")
        if name not in names:
            raise KeyError(f"{self._type.__name__} has no field {name!r}")
        return self._field_handle(name)

    def _field_handle(self, name: str) -> ReflectedValue:
        obj = self.interface()
        frozen = get_registry().ensure(self._type).descriptor.frozen
        if self._addressable and not frozen:
            return ReflectedValue(None, addressable=True, ref=Pointer.to_field(obj, name))
        return ReflectedValue(getattr(obj, name))

    # Slices

    def len(self) -> int:
        """Number of elements of a SLICE value.

        Raises:
            KindMismatchError: If the handle is not a SLICE.
        """
        self._expect(Kind.SLICE, "len")
        return len(self.interface())

    def index(self, i: int) -> ReflectedValue:
        """Handle over the i-th element of a SLICE value.

        Elements of a list reached through an addressable handle are
        addressable; tuple elements never are.

        Raises:
            KindMismatchError: If the handle is not a SLICE.
            IndexError: If i is out of range.
        """
        self._expect(Kind.SLICE, "index")
        items = self.interface()
        if not 0 <= i < len(items):
            raise IndexError(f"Slice index {i} out of range for length {len(items)}")
        if self._addressable and isinstance(items, MutableSequence):
            return ReflectedValue(None, addressable=True, ref=Pointer.to_item(items, i))
        return ReflectedValue(items[i])

    def __repr__(self) -> str:
        return (
            f"ReflectedValue(kind={self._kind.name}, addressable={self._addressable}, "
            f"value={self.interface()!r})"
        )
