"""Tests for kind classification."""

from dataclasses import dataclass
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from typereflect import Kind, Pointer, classify
from typereflect.core.kind import is_struct_type, kind_of_type


@dataclass
class Plain:
    value: int


class Model(BaseModel):
    value: int = 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Mike", Kind.STRING),
        ("", Kind.STRING),
        (18, Kind.INT),
        (True, Kind.BOOL),
        (False, Kind.BOOL),
        (1.5, Kind.FLOAT),
        (Pointer.new(1), Kind.POINTER),
        ([1, 2], Kind.SLICE),
        ((1, 2), Kind.SLICE),
        (Plain(1), Kind.STRUCT),
        (Model(), Kind.STRUCT),
        (None, Kind.UNSUPPORTED),
        ({"a": 1}, Kind.UNSUPPORTED),
        (object(), Kind.UNSUPPORTED),
        (Plain, Kind.UNSUPPORTED),
    ],
    ids=[
        "str",
        "empty-str",
        "int",
        "true",
        "false",
        "float",
        "pointer",
        "list",
        "tuple",
        "dataclass",
        "pydantic",
        "none",
        "dict",
        "object",
        "class",
    ],
)
def test_classify(value, expected) -> None:
    assert classify(value) is expected


def test_bool_is_never_int():
    """bool subclasses int; classification must still say BOOL."""
    assert classify(True) is Kind.BOOL
    assert classify(1) is Kind.INT


@given(st.one_of(st.text(), st.integers(), st.booleans(), st.floats()))
def test_classify_is_idempotent_and_matches_type(value) -> None:
    expected = {str: Kind.STRING, int: Kind.INT, bool: Kind.BOOL, float: Kind.FLOAT}[type(value)]
    assert classify(value) is expected
    assert classify(value) is classify(value)


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (str, Kind.STRING),
        (int, Kind.INT),
        (bool, Kind.BOOL),
        (float, Kind.FLOAT),
        (list[int], Kind.SLICE),
        (tuple[int, ...], Kind.SLICE),
        (Pointer[str], Kind.POINTER),
        (Plain, Kind.STRUCT),
        (Model, Kind.STRUCT),
        (Any, Kind.UNSUPPORTED),
        (int | None, Kind.UNSUPPORTED),
        (dict[str, int], Kind.UNSUPPORTED),
    ],
)
def test_kind_of_type(annotation, expected) -> None:
    assert kind_of_type(annotation) is expected


def test_struct_types():
    assert is_struct_type(Plain)
    assert is_struct_type(Model)
    assert not is_struct_type(BaseModel)
    assert not is_struct_type(Plain(1))
    assert not is_struct_type(int)


def test_kind_helpers():
    assert Kind.INT.is_numeric()
    assert Kind.FLOAT.is_numeric()
    assert not Kind.BOOL.is_numeric()
    assert Kind.STRING.is_primitive()
    assert not Kind.STRUCT.is_primitive()
    assert not Kind.UNSUPPORTED.is_primitive()
