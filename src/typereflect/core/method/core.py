"""Method decorator and per-type method table construction.

Usage:
    @struct
    @dataclass
    class User:
        name: str

        @method(name="SayHi")
        def say_hi(self, msg: str) -> None:
            print(f"{self.name} says {msg}")

        @method.by_reference(name="SayBye")
        def say_bye(self, msg: str) -> None:
            self.name = msg

Only decorated functions enter the method table; ordinary methods stay
invisible to name-based dispatch.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar, get_type_hints, overload

from typereflect.core.kind import Kind, kind_of_type
from typereflect.core.method.models import MethodDescriptor, MethodTable, ReceiverKind

F = TypeVar("F", bound=Callable[..., Any])

_RECEIVER_ATTR = "__method_receiver__"
_NAME_ATTR = "__method_name__"


def _mark(fn: F, receiver: ReceiverKind, name: str | None) -> F:
    if not callable(fn) or isinstance(fn, (staticmethod, classmethod)):
        raise TypeError(f"@method expects a plain function, got {type(fn).__name__}")
    setattr(fn, _RECEIVER_ATTR, receiver)
    setattr(fn, _NAME_ATTR, name or fn.__name__)
    return fn


class _MethodDecorator:
    """Method decorator factory. Used as @method, @method(name=...) or @method.by_reference."""

    @overload
    def __call__(self, fn: F) -> F: ...

    @overload
    def __call__(self, fn: None = None, *, name: str | None = None) -> Callable[[F], F]: ...

    def __call__(self, fn: F | None = None, *, name: str | None = None) -> F | Callable[[F], F]:
        """Register a by-value method.

        By-value methods run on a shallow copy of the receiver, so they are
        reachable from both copies and references, and assignments to self
        inside them never reach the caller's object.

        Args:
            fn: The function, when used bare.
            name: Dispatch name; defaults to the function name.

        Returns:
            The function, marked, or a decorator.
        """
        if fn is None:
            return lambda f: _mark(f, ReceiverKind.BY_VALUE, name)
        return _mark(fn, ReceiverKind.BY_VALUE, name)

    @overload
    def by_reference(self, fn: F) -> F: ...

    @overload
    def by_reference(self, fn: None = None, *, name: str | None = None) -> Callable[[F], F]: ...

    def by_reference(
        self, fn: F | None = None, *, name: str | None = None
    ) -> F | Callable[[F], F]:
        """Register a by-reference method.

        By-reference methods run on the caller's object itself and can only be
        resolved when the object was supplied through a reference.

        Usage:
            @method.by_reference
            def rename(self, name: str) -> None: ...
        """
        if fn is None:
            return lambda f: _mark(f, ReceiverKind.BY_REFERENCE, name)
        return _mark(fn, ReceiverKind.BY_REFERENCE, name)


method = _MethodDecorator()


def _param_kinds(fn: Callable[..., Any], owner: str) -> tuple[Kind, ...]:
    """Derive positional parameter kinds from annotations, skipping the receiver."""
    signature = inspect.signature(fn)
    try:
        hints = get_type_hints(fn)
    except (NameError, TypeError):
        hints = {}

    kinds = []
    for param in list(signature.parameters.values())[1:]:
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            raise TypeError(
                f"Method {owner}.{fn.__name__} has {param.kind.description} parameter "
                f"{param.name!r}; only positional parameters can be dispatched"
            )
        annotation = hints.get(param.name, inspect.Parameter.empty)
        if annotation is inspect.Parameter.empty:
            kinds.append(Kind.UNSUPPORTED)  # Unannotated: accepts any argument
        else:
            kinds.append(kind_of_type(annotation))
    return tuple(kinds)


def build_method_table(cls: type) -> MethodTable:
    """Collect decorated methods along the MRO; subclasses override bases by name.

    Args:
        cls: Struct class.

    Returns:
        MethodTable in declaration order (base classes first).

    Raises:
        TypeError: If a decorated method has non-positional parameters.
    """
    methods: dict[str, MethodDescriptor] = {}
    for klass in reversed(cls.__mro__):
        for attr in vars(klass).values():
            receiver = getattr(attr, _RECEIVER_ATTR, None)
            if not isinstance(receiver, ReceiverKind):
                continue
            name = getattr(attr, _NAME_ATTR)
            methods[name] = MethodDescriptor(
                name=name,
                receiver=receiver,
                params=_param_kinds(attr, cls.__name__),
                function=attr,
            )
    return MethodTable(methods=methods)
