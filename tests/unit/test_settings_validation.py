"""Tests for settings loading and validation."""

from __future__ import annotations

import json

import pytest

from potranslate.settings import (
    DEFAULT_DELAY,
    DEFAULT_FAST_DELAY,
    AppSettings,
    CatalogSettings,
    TranslationSettings,
    load_app_settings,
)

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.translation.delay == DEFAULT_DELAY == 1.0
    assert settings.translation.fast_delay == DEFAULT_FAST_DELAY == 0.1
    assert settings.translation.api_key is None
    assert settings.catalog.domain == "default"
    assert settings.catalog.source_language is None
    assert settings.log_dir is None


def test_load_toml(tmp_path):
    file = tmp_path / "settings.toml"
    file.write_text(
        '[translation]\ndelay = 2.5\nfast_delay = 0\napi_key = "  "\n'
        '[catalog]\ndomain = "admin"\nsource_language = "en"\n',
        encoding="utf-8",
    )
    settings = load_app_settings(file)
    assert settings.translation.delay == 2.5
    assert settings.translation.fast_delay == 0.0
    assert settings.translation.api_key is None
    assert settings.catalog.domain == "admin"
    assert settings.catalog.source_language == "en"


def test_load_json(tmp_path):
    file = tmp_path / "settings.json"
    file.write_text(json.dumps({"translation": {"timeout": 3}, "log_dir": "/tmp/logs"}))
    settings = load_app_settings(file)
    assert settings.translation.timeout == 3
    assert settings.log_dir == "/tmp/logs"
    assert settings.to_dict()["catalog"]["domain"] == "default"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, DEFAULT_DELAY), ("", DEFAULT_DELAY), (" 0.3 ", 0.3), (-1, DEFAULT_DELAY), (0, 0.0)],
)
def test_delay_normalisation(value, expected) -> None:
    assert TranslationSettings(delay=value).delay == expected


def test_boolean_delay_is_rejected() -> None:
    with pytest.raises((TypeError, ValueError)):
        TranslationSettings(delay=True)


def test_blank_domain_falls_back_to_default() -> None:
    assert CatalogSettings(domain="  ").domain == "default"


@pytest.mark.parametrize(
    "payload",
    [{"translation": {"timeout": 0}}, {"translation": {"delay": "soon"}}],
)
def test_invalid_settings_raises(tmp_path, payload):
    file = tmp_path / "settings.json"
    file.write_text(json.dumps(payload))
    with pytest.raises(ValueError):
        load_app_settings(file)


def test_malformed_toml_raises_value_error(tmp_path):
    file = tmp_path / "settings.toml"
    file.write_text("[translation\n", encoding="utf-8")
    with pytest.raises(ValueError, match="settings.toml"):
        load_app_settings(file)
