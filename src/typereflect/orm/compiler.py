"""Tag-driven SELECT compilation.

Column names come from one tag key on each field; the table name is the
lower-cased type name plus a fixed suffix. Condition templates use positional
placeholders filled left to right with literal arguments.

Usage:
    @struct
    @dataclass
    class ClassModel:
        name: str = tagged('orm:"name"', default="")
        id: int = tagged('orm:"id"', default=0)

    select(ClassModel)
    # "SELECT name,id FROM classmodels;"
    select(ClassModel, "name = ?", "三年一班")
    # "SELECT name,id FROM classmodels WHERE name = '三年一班';"

Note:
    String literals are wrapped in single quotes with no escaping of embedded
    quotes. The output is not safe against SQL injection.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from typereflect.config import ReflectSettings, get_settings
from typereflect.core.fields import TypeDescriptor, describe, describe_type
from typereflect.core.kind import Kind
from typereflect.core.value import wrap
from typereflect.orm.errors import (
    ArgumentCountMismatchError,
    EmptyColumnListError,
    UnsupportedArgumentKindError,
)
from typereflect.orm.models import SelectQuery


def _quote(value: str) -> str:
    return f"'{value}'"


def _integer(value: int) -> str:
    return str(int(value))


def _decimal(value: float) -> str:
    if not math.isfinite(value):
        raise UnsupportedArgumentKindError(
            f"Cannot render non-finite float {value!r} as a literal"
        )
    # Shortest round-trip digits, never in exponent form
    return format(Decimal(repr(float(value))), "f")


# Kinds missing here (BOOL, STRUCT, POINTER, SLICE, UNSUPPORTED) are rejected.
_LITERAL_RENDERERS: dict[Kind, Callable[[Any], str]] = {
    Kind.STRING: _quote,
    Kind.INT: _integer,
    Kind.FLOAT: _decimal,
}


def table_name(descriptor: TypeDescriptor, settings: ReflectSettings | None = None) -> str:
    """Derive a table name: lower-cased type name plus the configured suffix.

    Args:
        descriptor: Struct descriptor.
        settings: Settings override.

    Returns:
        Table name, e.g. "classmodels" for ClassModel.
    """
    return descriptor.name.lower() + (settings or get_settings()).table_suffix


def columns_for(descriptor: TypeDescriptor, tag_key: str) -> tuple[str, ...]:
    """Collect column names from one tag key, in field declaration order.

    Fields without the tag key are skipped.

    Args:
        descriptor: Struct descriptor.
        tag_key: Tag key naming the column, e.g. "orm".

    Returns:
        Column names.
    """
    return tuple(
        column for f in descriptor.fields if (column := f.lookup(tag_key)) is not None
    )


def render_literal(arg: Any) -> str:
    """Render one condition argument as a SQL literal.

    Args:
        arg: String, int or float (or a handle over one).

    Returns:
        Quoted string or decimal number.

    Raises:
        UnsupportedArgumentKindError: For any other kind, including bool, and
            for NaN or infinite floats.
    """
    handle = wrap(arg)
    renderer = _LITERAL_RENDERERS.get(handle.kind)
    if renderer is None:
        raise UnsupportedArgumentKindError(
            f"Cannot render {handle.kind.name} argument {handle.interface()!r} as a literal"
        )
    return renderer(handle.interface())


def substitute(template: str, args: Sequence[Any], placeholder: str = "?") -> str:
    """Replace placeholders in template with literal arguments, left to right.

    Args:
        template: Condition text, e.g. "name = ? AND id = ?".
        args: One argument per placeholder.
        placeholder: Placeholder marker.

    Returns:
        The substituted condition.

    Raises:
        ArgumentCountMismatchError: If placeholder and argument counts differ.
        UnsupportedArgumentKindError: If an argument cannot be rendered.
    """
    pieces = template.split(placeholder)
    expected = len(pieces) - 1
    if expected != len(args):
        raise ArgumentCountMismatchError(
            f"Condition {template!r} has {expected} placeholder(s), got {len(args)} argument(s)"
        )
    literals = [render_literal(arg) for arg in args]
    return pieces[0] + "".join(
        literal + piece for literal, piece in zip(literals, pieces[1:], strict=True)
    )


def build_select(
    descriptor: TypeDescriptor,
    tag_key: str,
    condition: str | None = None,
    args: Sequence[Any] = (),
    *,
    settings: ReflectSettings | None = None,
) -> SelectQuery:
    """Compile a descriptor into a SelectQuery.

    Args:
        descriptor: Struct descriptor.
        tag_key: Tag key naming columns.
        condition: Optional template; None or "" omits the WHERE clause.
        args: Arguments for the template's placeholders.
        settings: Settings override.

    Returns:
        The compiled query.

    Raises:
        EmptyColumnListError: If no field carries tag_key.
        ArgumentCountMismatchError: If placeholders and args disagree.
        UnsupportedArgumentKindError: If an argument is not a string or number.
    """
    settings = settings or get_settings()
    columns = columns_for(descriptor, tag_key)
    if not columns:
        raise EmptyColumnListError(f"No field of {descriptor.name} is tagged with {tag_key!r}")

    where = None
    if condition:
        where = substitute(condition, args, settings.placeholder)
    elif args:
        raise ArgumentCountMismatchError(f"No condition given but got {len(args)} argument(s)")

    return SelectQuery(
        table=table_name(descriptor, settings),
        columns=columns,
        condition=where,
    )


def compile_select(
    descriptor: TypeDescriptor,
    tag_key: str,
    condition: str | None = None,
    args: Sequence[Any] = (),
    *,
    settings: ReflectSettings | None = None,
) -> str:
    """Compile a descriptor into a SELECT string.

    See build_select() for arguments and errors.

    Returns:
        ``SELECT <cols> FROM <table>[ WHERE <condition>];``
    """
    return build_select(descriptor, tag_key, condition, args, settings=settings).render()


def select(
    model: Any,
    condition: str | None = None,
    *args: Any,
    tag_key: str | None = None,
    settings: ReflectSettings | None = None,
) -> str:
    """Describe a model and compile a SELECT for it in one step.

    Args:
        model: Struct class, instance, Pointer, or handle.
        condition: Optional template with placeholders.
        *args: Placeholder arguments.
        tag_key: Tag key naming columns; defaults to settings.default_tag_key.
        settings: Settings override.

    Returns:
        The SELECT string.

    Raises:
        NotAStructError: If model is not a struct.
        QueryCompileError: See build_select().
    """
    settings = settings or get_settings()
    descriptor = describe_type(model) if isinstance(model, type) else describe(model)
    return compile_select(
        descriptor,
        tag_key or settings.default_tag_key,
        condition,
        args,
        settings=settings,
    )
