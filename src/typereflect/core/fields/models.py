"""Struct descriptor models."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from typereflect.core.kind import Kind


@dataclass(frozen=True, slots=True, eq=False)
class FieldDescriptor:
    """One declared field of a struct type.

    ``tags`` is a read-only side table parsed from ``raw_tag``.
    """

    name: str
    kind: Kind
    tags: Mapping[str, str]
    raw_tag: str = ""
    index: int = 0

    def lookup(self, key: str) -> str | None:
        """Get a tag value.

        Args:
            key: Tag key, e.g. "json".

        Returns:
            The tag value (possibly empty), or None if the field has no such key.
        """
        return self.tags.get(key)

    def has_tag(self, key: str) -> bool:
        """Check if the field carries a tag key, even one with an empty value."""
        return key in self.tags


@dataclass(frozen=True, slots=True, eq=False)
class TypeDescriptor:
    """Field layout of a struct type, in declaration order."""

    name: str
    fields: tuple[FieldDescriptor, ...]
    type: type
    frozen: bool = False

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def field_names(self) -> tuple[str, ...]:
        """Names of all fields, in declaration order."""
        return tuple(f.name for f in self.fields)

    def field(self, name: str) -> FieldDescriptor | None:
        """Look up a field by name.

        Args:
            name: Field name.

        Returns:
            The FieldDescriptor, or None if the type has no such field.
        """
        for f in self.fields:
            if f.name == name:
                return f
        return None
