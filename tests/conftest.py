"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from typereflect import ReflectSettings, method, struct, tagged


@struct
@dataclass
class FixtureUser:
    name: str = tagged('json:"name"', default="")
    age: int = tagged('json:"age"', default=0)
    is_man: bool = False

    @method(name="SayHi")
    def say_hi(self, msg: str) -> str:
        return f"{self.name} says {msg}"

    @method.by_reference(name="SayBye")
    def say_bye(self, msg: str) -> None:
        self.name = msg


@pytest.fixture
def user_cls():
    return FixtureUser


@pytest.fixture
def user():
    """Fresh user named Mike."""
    return FixtureUser(name="Mike", age=18, is_man=True)


@pytest.fixture
def settings():
    """Default settings, ignoring any .env file."""
    return ReflectSettings(_env_file=None)
