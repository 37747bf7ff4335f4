"""Tests for value handles and addressability.

Critical Invariants:
- Only handles derived from a Pointer can mutate storage
- Setters never coerce between kinds
- A handle's kind never changes
"""

from dataclasses import dataclass

import pytest

from typereflect import (
    InvalidOperationError,
    Kind,
    KindMismatchError,
    NotAddressableError,
    Pointer,
    ReflectedValue,
    dereference,
    wrap,
)


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


def test_wrap_plain_value_is_not_addressable():
    handle = wrap("Mike")

    assert handle.kind is Kind.STRING
    assert not handle.addressable
    assert not handle.mutable


def test_wrap_pointer_is_addressable():
    handle = wrap(Pointer.new("Mike"))

    assert handle.kind is Kind.POINTER
    assert handle.addressable
    assert handle.mutable


def test_wrap_returns_existing_handle():
    handle = wrap(3)
    assert wrap(handle) is handle


def test_mutation_round_trip_through_reference(user):
    """CRITICAL: a field reached through a Pointer can be set and read back."""
    handle = wrap(Pointer.to(user)).elem().field_by_name("name")

    handle.set_string("Amy")

    assert handle.as_string() == "Amy"
    assert user.name == "Amy"


def test_mutation_through_copy_fails_and_leaves_value(user):
    """CRITICAL: a handle obtained without a reference can never mutate."""
    handle = wrap(user).field_by_name("name")

    with pytest.raises(NotAddressableError):
        handle.set_string("Amy")

    assert user.name == "Mike"
    assert handle.as_string() == "Mike"


def test_new_pointer_round_trip():
    pointer = Pointer.new("Mike")
    handle = dereference(pointer)

    handle.set_string("Amy")

    assert pointer.load() == "Amy"
    assert handle.addressable and handle.mutable


@pytest.mark.parametrize(
    ("initial", "setter", "value", "getter"),
    [
        ("a", "set_string", "b", "as_string"),
        (1, "set_int", 2, "as_int"),
        (False, "set_bool", True, "as_bool"),
        (1.5, "set_float", 2.5, "as_float"),
    ],
    ids=["string", "int", "bool", "float"],
)
def test_typed_setters_and_getters(initial, setter, value, getter) -> None:
    pointer = Pointer.new(initial)
    handle = dereference(pointer)

    assert getattr(handle, setter)(value) is None
    assert getattr(handle, getter)() == value
    assert pointer.load() == value


@pytest.mark.parametrize(
    ("initial", "setter", "value"),
    [
        (1, "set_string", "x"),
        (1, "set_int", True),
        (1.0, "set_float", 1),
        (True, "set_bool", 1),
        ("x", "set_int", 1),
    ],
    ids=["str-into-int", "bool-into-int", "int-into-float", "int-into-bool", "int-into-str"],
)
def test_setters_reject_kind_mismatch(initial, setter, value) -> None:
    pointer = Pointer.new(initial)

    with pytest.raises(KindMismatchError):
        getattr(dereference(pointer), setter)(value)

    assert pointer.load() == initial
    assert type(pointer.load()) is type(initial)


def test_not_addressable_is_reported_before_kind_mismatch():
    with pytest.raises(NotAddressableError):
        wrap("x").set_int(1)


def test_getters_reject_kind_mismatch():
    handle = wrap("Mike")

    with pytest.raises(KindMismatchError):
        handle.as_int()
    with pytest.raises(KindMismatchError):
        handle.as_bool()
    with pytest.raises(KindMismatchError):
        wrap(1).as_float()


def test_kind_never_changes_after_set():
    handle = dereference(Pointer.new(1))
    handle.set_int(5)
    handle.set(7)

    assert handle.kind is Kind.INT
    assert handle.as_int() == 7


def test_dereference_non_pointer_fails():
    with pytest.raises(InvalidOperationError):
        dereference(wrap(5))
    with pytest.raises(InvalidOperationError):
        wrap("x").elem()


def test_pointer_handle_has_no_storage_to_assign():
    with pytest.raises(InvalidOperationError):
        wrap(Pointer.new(1)).set(Pointer.new(2))


def test_struct_assignment_copies_fields_into_target(user, user_cls):
    pointer = Pointer.to(user)
    replacement = user_cls(name="Bob", age=3, is_man=False)

    dereference(pointer).set(replacement)

    assert pointer.load() is user
    assert (user.name, user.age, user.is_man) == ("Bob", 3, False)


def test_struct_assignment_rejects_other_type(user):
    with pytest.raises(KindMismatchError):
        dereference(Pointer.to(user)).set(FrozenPoint(1, 2))
    assert user.name == "Mike"


def test_frozen_struct_fields_are_not_addressable():
    point = FrozenPoint(1, 2)
    struct_handle = dereference(Pointer.to(point))
    field = struct_handle.field(0)

    assert not field.addressable
    with pytest.raises(NotAddressableError):
        field.set_int(5)
    with pytest.raises(NotAddressableError):
        struct_handle.set(FrozenPoint(3, 4))
    assert point == FrozenPoint(1, 2)


def test_struct_field_access(user):
    handle = wrap(user)

    assert handle.num_field() == 3
    assert handle.field(1).as_int() == 18
    assert handle.field_by_name("is_man").as_bool() is True

    with pytest.raises(IndexError):
        handle.field(3)
    with pytest.raises(KeyError):
        handle.field_by_name("missing")
    with pytest.raises(KindMismatchError):
        wrap(5).num_field()


def test_list_elements_are_addressable_through_reference():
    items = [1, 2, 3]
    handle = dereference(Pointer.new(items))

    assert handle.kind is Kind.SLICE
    assert handle.len() == 3

    element = handle.index(1)
    element.set_int(20)

    assert items == [1, 20, 3]


def test_slice_elements_of_copies_and_tuples_are_not_addressable():
    assert not wrap([1, 2]).index(0).addressable
    assert not dereference(Pointer.new((1, 2))).index(0).addressable

    with pytest.raises(IndexError):
        wrap([1]).index(1)
    with pytest.raises(KindMismatchError):
        wrap("abc").len()


def test_pointer_factories_validate_targets():
    with pytest.raises(TypeError):
        Pointer.to(5)
    with pytest.raises(TypeError):
        Pointer.to_item((1, 2), 0)
    with pytest.raises(IndexError):
        Pointer.to_item([1], 4)
    with pytest.raises(AttributeError):
        Pointer.to_field(FrozenPoint(1, 2), "z")


def test_pointer_to_field_reads_live_storage(user):
    pointer = Pointer.to_field(user, "age")
    user.age = 40

    assert pointer.load() == 40
    pointer.store(41)
    assert user.age == 41


def test_handle_repr_mentions_kind():
    assert "STRING" in repr(ReflectedValue("x"))


def test_getter_rejects_storage_changed_behind_handle(user):
    """Why: a ref-backed handle reads live storage, which may no longer match its kind."""
    handle = wrap(Pointer.to(user)).elem().field_by_name("name")
    user.name = None

    with pytest.raises(KindMismatchError, match="storage now holds"):
        handle.as_string()
