from typereflect import (
    Pointer,
    call_method,
    classify,
    iter_fields,
    resolve,
    select,
    wrap,
)

from .models import ClassModel, User


def inspect_user(user: User) -> None:
    """Print every field with its kind and json tag."""
    print(f"{type(user).__name__} is a {classify(user).name}")
    for field, value in iter_fields(user):
        tag = field.lookup("json")
        print(f"  {field.name} ({field.kind.name}) json={tag!r} = {value.interface()!r}")


def rename(user: User, new_name: str) -> None:
    """Mutating needs a reference; a copy handle refuses."""
    wrap(Pointer.to(user)).elem().field_by_name("name").set_string(new_name)


def dispatch(user: User) -> None:
    call_method(user, "SayHi", "hello")
    if resolve(user, "SayBye") is None:
        print("SayBye needs a reference receiver")
    call_method(Pointer.to(user), "SayBye", "bye")


if __name__ == "__main__":
    mike = User(name="Mike", age=18, is_man=True)
    inspect_user(mike)
    rename(mike, "Amy")
    dispatch(mike)
    inspect_user(mike)

    print(select(ClassModel))
    print(select(ClassModel, "name = ?", "三年一班"))
