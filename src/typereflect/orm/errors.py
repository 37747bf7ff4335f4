"""Query compilation errors. A failing compile never yields a partial query."""

from typereflect.core.errors import ReflectionError


class QueryCompileError(ReflectionError):
    """Base class for query compilation failures."""

    pass


class ArgumentCountMismatchError(QueryCompileError):
    """Raised when placeholder count differs from the number of condition arguments."""

    pass


class UnsupportedArgumentKindError(QueryCompileError):
    """Raised when a condition argument is neither a string nor a number."""

    pass


class EmptyColumnListError(QueryCompileError):
    """Raised when no field of the type carries the requested tag key."""

    pass
