"""Method models: receiver shapes, descriptors, per-type tables and bound methods."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from typereflect.core.kind import Kind

if TYPE_CHECKING:
    from typereflect.core.value import ReflectedValue


class ReceiverKind(Enum):
    """What a method operates on."""

    BY_VALUE = auto()  # Receives a copy; reachable from copies and references
    BY_REFERENCE = auto()  # Receives the original; reachable only through a reference


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """A named operation registered on a struct type."""

    name: str
    receiver: ReceiverKind
    params: tuple[Kind, ...]
    function: Callable[..., Any]

    @property
    def arity(self) -> int:
        """Number of positional arguments the method takes, excluding the receiver."""
        return len(self.params)


@dataclass(frozen=True, slots=True, eq=False)
class MethodTable:
    """Per-type mapping of method name to descriptor, in declaration order.

    Names are unique across both receiver shapes.
    """

    methods: Mapping[str, MethodDescriptor]

    def __iter__(self) -> Iterator[MethodDescriptor]:
        return iter(self.methods.values())

    def __len__(self) -> int:
        return len(self.methods)

    def get(self, name: str) -> MethodDescriptor | None:
        return self.methods.get(name)

    def reachable(self, addressable: bool) -> tuple[MethodDescriptor, ...]:
        """Methods callable for a receiver of the given addressability.

        Args:
            addressable: Whether the receiver was supplied by reference.

        Returns:
            All methods if addressable, otherwise only BY_VALUE ones.
        """
        if addressable:
            return tuple(self.methods.values())
        return tuple(m for m in self.methods.values() if m.receiver is ReceiverKind.BY_VALUE)


@dataclass(frozen=True, slots=True, eq=False)
class BoundMethod:
    """A method descriptor paired with the receiver it will run on.

    For BY_VALUE methods the receiver is a copy taken at resolution time.
    """

    descriptor: MethodDescriptor
    receiver: Any

    @property
    def name(self) -> str:
        return self.descriptor.name

    def __call__(self, *args: Any) -> ReflectedValue | None:
        """Invoke with positional arguments; see typereflect.core.method.invoke."""
        # Late import to avoid circular dependency
        from typereflect.core.method.operations import invoke

        return invoke(self, args)
