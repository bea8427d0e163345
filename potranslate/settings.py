"""Typed settings with Pydantic validation."""

from __future__ import annotations

import json
from pathlib import Path

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_DELAY = 1.0
DEFAULT_FAST_DELAY = 0.1
DEFAULT_DOMAIN = "default"
DEFAULT_ENDPOINT = "https://translate.googleapis.com/translate_a/single"
DEFAULT_CLOUD_ENDPOINT = "https://translation.googleapis.com/language/translate/v2"


def _normalize_delay(value: float | str | None, default: float) -> float | str:
    if value is None:
        return default
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return default
        try:
            parsed = float(raw)
        except ValueError:  # pragma: no cover - delegated to Pydantic
            return value
    else:
        if isinstance(value, bool):
            raise TypeError("Boolean is not a valid delay")
        parsed = float(value)
    if parsed < 0:
        return default
    return parsed


class TranslationSettings(BaseModel):
    """Settings for the translation backend and rate limiting."""

    model_config = ConfigDict(validate_assignment=True)

    delay: float = DEFAULT_DELAY
    fast_delay: float = DEFAULT_FAST_DELAY
    endpoint: str = DEFAULT_ENDPOINT
    cloud_endpoint: str = DEFAULT_CLOUD_ENDPOINT
    api_key: str | None = None
    timeout: float = Field(10.0, gt=0)

    @field_validator("delay", mode="before")
    @classmethod
    def _normalize_regular_delay(cls, value: float | str | None) -> float:
        """Fall back to the default for empty or negative delays."""
        return _normalize_delay(value, DEFAULT_DELAY)

    @field_validator("fast_delay", mode="before")
    @classmethod
    def _normalize_fast_delay(cls, value: float | str | None) -> float:
        return _normalize_delay(value, DEFAULT_FAST_DELAY)

    @field_validator("api_key", mode="before")
    @classmethod
    def _normalize_api_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class CatalogSettings(BaseModel):
    """Settings selecting which catalogs a run operates on."""

    model_config = ConfigDict(validate_assignment=True)

    domain: str = DEFAULT_DOMAIN
    source_language: str | None = None

    @field_validator("domain", mode="before")
    @classmethod
    def _normalize_domain(cls, value: str | None) -> str:
        if value is None:
            return DEFAULT_DOMAIN
        text = str(value).strip()
        return text or DEFAULT_DOMAIN

    @field_validator("source_language", mode="before")
    @classmethod
    def _normalize_source_language(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class AppSettings(BaseModel):
    """Aggregate settings for a potranslate run."""

    model_config = ConfigDict(validate_assignment=True)

    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    log_dir: str | None = None

    @field_validator("log_dir", mode="before")
    @classmethod
    def _normalize_log_dir(cls, value: str | Path | None) -> str | None:
        """Convert empty strings to ``None``."""
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def to_dict(self) -> dict:
        """Return settings as a plain dictionary."""
        return self.model_dump()


def load_app_settings(path: str | Path) -> AppSettings:
    """Load :class:`AppSettings` from *path* with validation.

    Format is detected by file extension: ``.toml`` uses :mod:`tomllib`,
    everything else is treated as JSON.  Parse and validation errors are
    wrapped into :class:`ValueError` with a human-friendly message.
    """
    p = Path(path)
    with p.open("rb") as fh:
        try:
            data = tomllib.load(fh) if p.suffix.lower() == ".toml" else json.load(fh)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
            raise ValueError(f"{p}: {exc}") from exc
    try:
        return AppSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
