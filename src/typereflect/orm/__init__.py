"""Minimal mapping layer: tag-driven SELECT compilation.

Usage:
    from typereflect.orm import select

    select(ClassModel, "name = ?", "三年一班")
"""

from typereflect.orm.compiler import (
    build_select,
    columns_for,
    compile_select,
    render_literal,
    select,
    substitute,
    table_name,
)
from typereflect.orm.errors import (
    ArgumentCountMismatchError,
    EmptyColumnListError,
    QueryCompileError,
    UnsupportedArgumentKindError,
)
from typereflect.orm.models import SelectQuery

__all__ = [
    # Models
    "SelectQuery",
    # Compiler
    "compile_select",
    "build_select",
    "select",
    "table_name",
    "columns_for",
    "render_literal",
    "substitute",
    # Errors
    "QueryCompileError",
    "ArgumentCountMismatchError",
    "UnsupportedArgumentKindError",
    "EmptyColumnListError",
]
