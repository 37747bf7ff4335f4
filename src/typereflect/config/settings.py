"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the tag
reader and the query compiler.

Usage:
    from typereflect.config import ReflectSettings, get_settings

    # Load from environment variables (TYPEREFLECT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = ReflectSettings(table_suffix="_tbl", placeholder="$")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for tag lookup and query compilation.

    Attributes:
        tag_metadata_key: Key under which dataclass field metadata (or Pydantic
            json_schema_extra) stores the raw tag string.
        default_tag_key: Tag key the query compiler reads column names from
            when none is given.
        table_suffix: Fixed suffix appended to the lower-cased type name to
            form a table name. No irregular plural handling.
        placeholder: Positional placeholder marker in condition templates.

    Environment Variables:
        TYPEREFLECT_TAG_METADATA_KEY
        TYPEREFLECT_DEFAULT_TAG_KEY
        TYPEREFLECT_TABLE_SUFFIX
        TYPEREFLECT_PLACEHOLDER
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEREFLECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tag_metadata_key: str = "tag"
    default_tag_key: str = "orm"
    table_suffix: str = "s"
    placeholder: str = Field(default="?", min_length=1)


_settings: ReflectSettings | None = None


def get_settings() -> ReflectSettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The shared ReflectSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = ReflectSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
