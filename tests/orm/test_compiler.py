"""Tests for tag-driven SELECT compilation.

Critical Invariants:
- Columns follow field declaration order; untagged fields are skipped
- Placeholder count must equal argument count exactly
- A failing compile produces no query string
"""

import math
from dataclasses import dataclass
from enum import IntEnum

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typereflect import (
    ArgumentCountMismatchError,
    EmptyColumnListError,
    NotAStructError,
    Pointer,
    ReflectSettings,
    SelectQuery,
    UnsupportedArgumentKindError,
    compile_select,
    describe_type,
    select,
    struct,
    tagged,
)
from typereflect.orm import build_select, columns_for, render_literal, substitute, table_name


@struct
@dataclass
class ClassModel:
    name: str = tagged('orm:"name" json:"className"', default="")
    size: int = 0
    id: int = tagged('orm:"id"', default=0)


@struct
@dataclass
class Untagged:
    value: int = 0


@pytest.fixture
def descriptor():
    return describe_type(ClassModel)


def test_compile_without_condition(descriptor, settings):
    sql = compile_select(descriptor, "orm", settings=settings)
    assert sql == "SELECT name,id FROM classmodels;"


def test_compile_with_condition(descriptor, settings):
    sql = compile_select(descriptor, "orm", "name = ?", ["三年一班"], settings=settings)
    assert sql == "SELECT name,id FROM classmodels WHERE name = '三年一班';"


def test_placeholder_argument_count_mismatch(descriptor, settings):
    with pytest.raises(ArgumentCountMismatchError, match="2 placeholder"):
        compile_select(descriptor, "orm", "name = ? AND id = ?", ["三年一班"], settings=settings)


def test_arguments_without_condition_fail(descriptor, settings):
    with pytest.raises(ArgumentCountMismatchError):
        compile_select(descriptor, "orm", None, [1], settings=settings)


def test_empty_condition_omits_where(descriptor, settings):
    assert compile_select(descriptor, "orm", "", settings=settings) == (
        "SELECT name,id FROM classmodels;"
    )


def test_numeric_arguments_render_in_decimal(descriptor, settings):
    sql = compile_select(descriptor, "orm", "id = ? OR id > ?", [3, 1.5], settings=settings)
    assert sql == "SELECT name,id FROM classmodels WHERE id = 3 OR id > 1.5;"


def test_placeholders_substitute_left_to_right(descriptor, settings):
    sql = compile_select(
        descriptor, "orm", "name = ? AND id = ?", ["a", 2], settings=settings
    )
    assert sql.endswith("WHERE name = 'a' AND id = 2;")


def test_string_quotes_are_not_escaped():
    assert render_literal("O'Brien") == "'O'Brien'"


@pytest.mark.parametrize(
    "arg",
    [True, None, [1], Pointer.new(1), {"a": 1}],
    ids=["bool", "none", "list", "pointer", "dict"],
)
def test_unsupported_argument_kinds(descriptor, settings, arg) -> None:
    with pytest.raises(UnsupportedArgumentKindError):
        compile_select(descriptor, "orm", "name = ?", [arg], settings=settings)


class Level(IntEnum):
    HIGH = 3


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        (Level.HIGH, "3"),
        (-7, "-7"),
        (1.5, "1.5"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
    ],
    ids=["int-enum", "negative-int", "float", "large-float", "small-float"],
)
def test_numbers_render_in_plain_decimal(arg, expected) -> None:
    assert render_literal(arg) == expected


@pytest.mark.parametrize("arg", [math.nan, math.inf, -math.inf], ids=["nan", "inf", "-inf"])
def test_non_finite_floats_are_rejected(descriptor, settings, arg) -> None:
    with pytest.raises(UnsupportedArgumentKindError, match="non-finite"):
        compile_select(descriptor, "orm", "id = ?", [arg], settings=settings)


def test_no_tagged_columns(settings):
    with pytest.raises(EmptyColumnListError, match="orm"):
        compile_select(describe_type(Untagged), "orm", settings=settings)


def test_other_tag_key(descriptor, settings):
    assert compile_select(descriptor, "json", settings=settings) == (
        "SELECT className FROM classmodels;"
    )
    assert columns_for(descriptor, "orm") == ("name", "id")


def test_table_name_is_lowercase_plus_suffix(descriptor, settings):
    assert table_name(descriptor, settings) == "classmodels"
    assert table_name(descriptor, ReflectSettings(_env_file=None, table_suffix="_tbl")) == (
        "classmodel_tbl"
    )


def test_custom_placeholder(descriptor):
    settings = ReflectSettings(_env_file=None, placeholder="$")
    sql = compile_select(descriptor, "orm", "id = $", [9], settings=settings)
    assert sql == "SELECT name,id FROM classmodels WHERE id = 9;"


def test_build_select_returns_model(descriptor, settings):
    query = build_select(descriptor, "orm", "id = ?", [1], settings=settings)

    assert query == SelectQuery(table="classmodels", columns=("name", "id"), condition="id = 1")
    assert str(query) == "SELECT name,id FROM classmodels WHERE id = 1;"


def test_select_accepts_class_instance_and_pointer(settings):
    model = ClassModel(name="三年一班", id=1)
    expected = "SELECT name,id FROM classmodels WHERE name = '三年一班';"

    assert select(ClassModel, "name = ?", "三年一班", settings=settings) == expected
    assert select(model, "name = ?", "三年一班", settings=settings) == expected
    assert select(Pointer.to(model), "name = ?", "三年一班", settings=settings) == expected


def test_select_uses_default_tag_key_from_settings():
    settings = ReflectSettings(_env_file=None, default_tag_key="json")
    assert select(ClassModel, settings=settings) == "SELECT className FROM classmodels;"


def test_select_rejects_non_structs(settings):
    with pytest.raises(NotAStructError):
        select(5, settings=settings)


@given(
    placeholders=st.integers(min_value=0, max_value=6),
    args=st.lists(st.integers(), max_size=6),
)
def test_substitute_requires_exact_placeholder_count(placeholders, args) -> None:
    template = " AND ".join(["c = ?"] * placeholders)

    if placeholders != len(args):
        with pytest.raises(ArgumentCountMismatchError):
            substitute(template, args)
    else:
        result = substitute(template, args)
        assert "?" not in result
        for arg in args:
            assert f"c = {arg}" in result
