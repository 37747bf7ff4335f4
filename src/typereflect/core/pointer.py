"""Explicit references to caller-owned storage.

Python has no address-of operator, so a Pointer is how a caller hands out a
reference instead of a copy. Handles derived from a Pointer are addressable and
may mutate the storage it refers to; handles derived from plain values never can.

Usage:
    person = Person(name="Mike")
    p = Pointer.to(person)                 # reference to the whole struct
    name = Pointer.to_field(person, "name")
    name.store("Amy")                      # person.name == "Amy"

    counter = Pointer.new(0)               # fresh boxed variable
    counter.store(counter.load() + 1)
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typereflect.core.errors import KindMismatchError, NotAddressableError


@dataclass(slots=True)
class _Box:
    """Storage cell backing Pointer.new()."""

    value: Any


T = TypeVar("T")


class Pointer(Generic[T]):
    """Reference to a storage location, read through load() and written through store()."""

    __slots__ = ("_load", "_store", "_label")

    def __init__(self, load: Callable[[], T], store: Callable[[T], None], label: str = "") -> None:
        self._load = load
        self._store = store
        self._label = label

    @classmethod
    def to(cls, obj: T) -> Pointer[T]:
        """Reference a struct instance.

        Storing through the pointer copies every field of the new value into
        the referenced instance, so other holders of ``obj`` observe the change.

        Args:
            obj: Dataclass or Pydantic model instance.

        Returns:
            Pointer whose load() returns obj itself.

        Raises:
            TypeError: If obj is not a struct; use Pointer.new() for scalars.
        """
        # Late import to avoid circular dependency
        from typereflect.core.kind import is_struct_type

        if not is_struct_type(type(obj)):
            raise TypeError(
                f"Pointer.to() needs a struct instance, got {type(obj).__name__}. "
                f"Use Pointer.new() or Pointer.to_field() for scalar storage."
            )

        def store(value: T) -> None:
            _assign_fields(obj, value)

        return cls(lambda: obj, store, label=type(obj).__name__)

    @classmethod
    def to_field(cls, obj: Any, name: str) -> Pointer[Any]:
        """Reference one attribute of an object.

        Args:
            obj: Object owning the attribute.
            name: Attribute name.

        Returns:
            Pointer reading and writing obj.<name>.

        Raises:
            AttributeError: If obj has no such attribute.
        """
        if not hasattr(obj, name):
            raise AttributeError(f"{type(obj).__name__} has no field {name!r}")
        return cls(
            lambda: getattr(obj, name),
            lambda value: setattr(obj, name, value),
            label=f"{type(obj).__name__}.{name}",
        )

    @classmethod
    def to_item(cls, items: MutableSequence[Any], index: int) -> Pointer[Any]:
        """Reference one element of a mutable sequence.

        Args:
            items: A list or other mutable sequence.
            index: Element position.

        Returns:
            Pointer reading and writing items[index].

        Raises:
            TypeError: If items is immutable (e.g. a tuple).
            IndexError: If index is out of range.
        """
        if not isinstance(items, MutableSequence):
            raise TypeError(f"Cannot reference an element of immutable {type(items).__name__}")
        if not -len(items) <= index < len(items):
            raise IndexError(f"Index {index} out of range for length {len(items)}")
        return cls(
            lambda: items[index],
            lambda value: items.__setitem__(index, value),
            label=f"[{index}]",
        )

    @classmethod
    def new(cls, value: T) -> Pointer[T]:
        """Allocate a fresh variable holding value and reference it.

        Args:
            value: Initial contents.

        Returns:
            Pointer to a new storage cell.
        """
        box = _Box(value)
        return cls(lambda: box.value, lambda v: setattr(box, "value", v), label="new")

    def load(self) -> T:
        """Read the referenced storage."""
        return self._load()

    def store(self, value: T) -> None:
        """Write the referenced storage."""
        self._store(value)

    def __repr__(self) -> str:
        return f"Pointer<{self._label}>({self._load()!r})"


def _assign_fields(target: Any, source: Any) -> None:
    """Copy every declared field of source into target, in declaration order."""
    # Late import to avoid circular dependency
    from typereflect.core.registry import get_registry

    if type(source) is not type(target):
        raise KindMismatchError(
            f"Cannot assign {type(source).__name__} through a pointer to {type(target).__name__}"
        )
    descriptor = get_registry().ensure(type(target)).descriptor
    if descriptor.frozen:
        raise NotAddressableError(f"{descriptor.name} is frozen and cannot be assigned in place")
    for field_descriptor in descriptor.fields:
        setattr(target, field_descriptor.name, getattr(source, field_descriptor.name))
