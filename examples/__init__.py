"""Example structs and scripts for typereflect.

This package demonstrates library usage but is not part of the core API.
"""

from .models import ClassModel, User

__all__ = [
    "ClassModel",
    "User",
]
