"""Name-based method resolution and invocation.

Resolution mirrors how method sets work for values and references: by-value
methods are reachable from anything, by-reference methods only when the
receiver was supplied through a reference.

Usage:
    user = User(name="Mike")

    resolve(user, "SayHi")                 # BoundMethod
    resolve(user, "SayBye")                # None: a bare copy cannot reach it
    resolve(Pointer.to(user), "SayBye")    # BoundMethod bound to user itself

    call_method(Pointer.to(user), "SayBye", "Amy")
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from typereflect.core.errors import (
    ArgumentKindMismatchError,
    ArityMismatchError,
    MethodNotFoundError,
)
from typereflect.core.kind import Kind, classify
from typereflect.core.method.models import BoundMethod, MethodDescriptor, MethodTable, ReceiverKind
from typereflect.core.registry import get_registry
from typereflect.core.value import ReflectedValue, indirect, wrap

logger = logging.getLogger(__name__)


def _receiver(obj: Any) -> tuple[Any, bool]:
    """Normalize obj to (target, addressable), following one Pointer."""
    handle = indirect(obj)
    return handle.interface(), handle.addressable


def _method_table(target: Any) -> MethodTable | None:
    if classify(target) is not Kind.STRUCT:
        return None  # Only struct types carry method tables
    return get_registry().ensure(type(target)).methods


def resolve(obj: Any, name: str) -> BoundMethod | None:
    """Resolve a named method on an object.

    A BY_VALUE method is bound to a shallow copy of the receiver. A
    BY_REFERENCE method is bound to the receiver itself, and only when obj is a
    Pointer or an addressable handle. Resolution never mutates obj.

    Args:
        obj: Struct instance, Pointer to one, or ReflectedValue.
        name: Dispatch name of the method.

    Returns:
        The bound method, or None if no reachable method has that name.
    """
    target, addressable = _receiver(obj)
    table = _method_table(target)
    if table is None:
        return None

    descriptor = table.get(name)
    if descriptor is None:
        return None

    if descriptor.receiver is ReceiverKind.BY_VALUE:
        return BoundMethod(descriptor, copy.copy(target))
    if descriptor.receiver is ReceiverKind.BY_REFERENCE:
        if not addressable:
            logger.debug(
                "%s.%s needs a reference receiver; got a copy", type(target).__name__, name
            )
            return None
        return BoundMethod(descriptor, target)
    raise AssertionError(f"Unhandled receiver kind {descriptor.receiver}")


def method_by_name(obj: Any, name: str) -> BoundMethod:
    """Resolve a named method, failing if it is unreachable.

    Raises:
        MethodNotFoundError: If resolve() finds nothing.
    """
    bound = resolve(obj, name)
    if bound is None:
        target, _ = _receiver(obj)
        raise MethodNotFoundError(f"{type(target).__name__} has no reachable method {name!r}")
    return bound


def methods(obj: Any) -> tuple[MethodDescriptor, ...]:
    """List methods reachable from obj, in declaration order.

    Args:
        obj: Struct instance, Pointer to one, or ReflectedValue.

    Returns:
        Descriptors callable for obj's receiver shape; empty for non-structs.
    """
    target, addressable = _receiver(obj)
    table = _method_table(target)
    if table is None:
        return ()
    return table.reachable(addressable)


def _check_argument(descriptor: MethodDescriptor, position: int, expected: Kind, arg: Any) -> Any:
    handle = wrap(arg)
    if expected is Kind.UNSUPPORTED:
        # Unannotated or unmodelled parameter type: no kind constraint.
        return handle.interface()
    if handle.kind is not expected:
        raise ArgumentKindMismatchError(
            f"{descriptor.name} argument {position}: expected {expected.name}, "
            f"got {handle.kind.name}"
        )
    return handle.interface()


def invoke(bound: BoundMethod, args: Sequence[Any] = ()) -> ReflectedValue | None:
    """Call a bound method synchronously with positional arguments.

    Each argument is wrapped as a value and checked against the declared
    parameter kind. ReflectedValue arguments are passed by their current value.
    A BY_VALUE method runs on its own copy of the receiver on every call.

    Args:
        bound: Result of resolve().
        args: Positional arguments.

    Returns:
        Handle over the return value, or None if the method returned None.

    Raises:
        ArityMismatchError: If len(args) differs from the method's arity.
        ArgumentKindMismatchError: If an argument's kind differs from its
            parameter's declared kind.
    """
    descriptor = bound.descriptor
    if len(args) != descriptor.arity:
        raise ArityMismatchError(
            f"{descriptor.name} takes {descriptor.arity} argument(s), got {len(args)}"
        )
    values = [
        _check_argument(descriptor, position, expected, arg)
        for position, (expected, arg) in enumerate(zip(descriptor.params, args, strict=True))
    ]
    receiver = bound.receiver
    if descriptor.receiver is ReceiverKind.BY_VALUE:
        receiver = copy.copy(receiver)  # Each call sees a fresh copy
    result = descriptor.function(receiver, *values)
    if result is None:
        return None
    return wrap(result)


def call_method(obj: Any, name: str, *args: Any) -> ReflectedValue | None:
    """Resolve and invoke a named method in one step.

    Raises:
        MethodNotFoundError: If no reachable method has that name.
        ArityMismatchError: If the argument count is wrong.
        ArgumentKindMismatchError: If an argument has the wrong kind.
    """
    return invoke(method_by_name(obj, name), args)
