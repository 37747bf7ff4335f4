"""Tests for configuration settings."""

import pytest

from typereflect.config import ReflectSettings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    settings = ReflectSettings(_env_file=None)

    assert settings.tag_metadata_key == "tag"
    assert settings.default_tag_key == "orm"
    assert settings.table_suffix == "s"
    assert settings.placeholder == "?"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TYPEREFLECT_TABLE_SUFFIX", "_rows")
    monkeypatch.setenv("TYPEREFLECT_DEFAULT_TAG_KEY", "db")

    settings = ReflectSettings(_env_file=None)

    assert settings.table_suffix == "_rows"
    assert settings.default_tag_key == "db"


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("TYPEREFLECT_PLACEHOLDER", "$")
    assert ReflectSettings(_env_file=None, placeholder="%").placeholder == "%"


def test_placeholder_must_not_be_empty():
    with pytest.raises(ValueError):
        ReflectSettings(_env_file=None, placeholder="")


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("TYPEREFLECT_TABLE_SUFFIX", "_x")
    assert get_settings().table_suffix == first.table_suffix

    reset_settings()
    assert get_settings().table_suffix == "_x"
