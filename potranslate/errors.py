"""Exception types raised by potranslate."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ConfigurationError",
    "DestinationExistsError",
    "PotranslateError",
    "TranslationError",
]


class PotranslateError(Exception):
    """Base class for potranslate failures."""


class ConfigurationError(PotranslateError):
    """Raised when a run cannot start because its inputs are unusable."""


class DestinationExistsError(ConfigurationError):
    """Raised when a new language file would overwrite an existing one."""

    def __init__(self, path: Path) -> None:
        """Remember the conflicting ``path``."""
        self.path = path
        super().__init__(f"PO file '{path}' already exists")


class TranslationError(PotranslateError):
    """Raised by a translation backend when a single call fails."""

    def __init__(self, text: str, reason: str) -> None:
        """Record the source ``text`` and a human readable ``reason``."""
        self.text = text
        self.reason = reason
        super().__init__(f"translation failed for {text!r}: {reason}")
