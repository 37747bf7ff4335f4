"""Example struct types demonstrating tags and methods."""

from dataclasses import dataclass

from typereflect import method, struct, tagged


@struct
@dataclass
class User:
    """Example: tagged fields plus one method of each receiver shape."""

    name: str = tagged('json:"name"', default="")
    age: int = tagged('json:"age"', default=0)
    is_man: bool = tagged('json:"isMan"', default=False)

    @method(name="SayHi")
    def say_hi(self, msg: str) -> None:
        print(f"{self.name} says: {msg}")

    @method.by_reference(name="SayBye")
    def say_bye(self, msg: str) -> None:
        print(f"{self.name} says: {msg}")
        self.name = f"{self.name} (gone)"


@struct
@dataclass
class ClassModel:
    """Example: a table row mapped through orm tags."""

    name: str = tagged('orm:"name"', default="")
    id: int = tagged('orm:"id"', default=0)
