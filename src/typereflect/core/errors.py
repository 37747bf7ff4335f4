"""Error taxonomy for introspection and dispatch.

Every failure is raised at the call that misused the API. Method lookup is the
exception: ``resolve()`` reports a missing method by returning None, and only
``method_by_name()`` turns that into ``MethodNotFoundError``.
"""


class ReflectionError(Exception):
    """Base class for all typereflect errors."""

    pass


class KindMismatchError(ReflectionError):
    """Raised when an operation is requested on a value of the wrong kind."""

    pass


class NotAddressableError(ReflectionError):
    """Raised when mutation is attempted through a handle not derived from a reference."""

    pass


class InvalidOperationError(ReflectionError):
    """Raised for operations that make no sense for a handle, e.g. dereferencing a non-pointer."""

    pass


class NotAStructError(ReflectionError):
    """Raised when structural introspection is requested on a non-struct value."""

    pass


class MethodNotFoundError(ReflectionError):
    """Raised by strict lookups when no reachable method has the requested name."""

    pass


class ArityMismatchError(ReflectionError):
    """Raised when a method is invoked with the wrong number of arguments."""

    pass


class ArgumentKindMismatchError(ReflectionError):
    """Raised when an argument's kind differs from the declared parameter kind."""

    pass
