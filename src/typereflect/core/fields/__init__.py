"""Struct functionality: descriptors, tag parsing and the field walker."""

from typereflect.core.fields.core import build_type_descriptor, is_frozen_type, tagged
from typereflect.core.fields.models import FieldDescriptor, TypeDescriptor
from typereflect.core.fields.operations import describe, describe_type, iter_fields, tag_of
from typereflect.core.fields.tags import (
    DuplicateTagKeyWarning,
    MalformedTagWarning,
    TagWarning,
    parse_tag,
)

__all__ = [
    # Models
    "FieldDescriptor",
    "TypeDescriptor",
    # Core
    "tagged",
    "build_type_descriptor",
    "is_frozen_type",
    # Operations
    "describe",
    "describe_type",
    "iter_fields",
    "tag_of",
    # Tags
    "parse_tag",
    "TagWarning",
    "MalformedTagWarning",
    "DuplicateTagKeyWarning",
]
