"""Configuration module using Pydantic Settings.

Usage:
    from typereflect.config import ReflectSettings

    settings = ReflectSettings(default_tag_key="db")
"""

from typereflect.config.settings import ReflectSettings, get_settings, reset_settings

__all__ = [
    "ReflectSettings",
    "get_settings",
    "reset_settings",
]
