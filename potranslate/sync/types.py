"""Shared result types for the synchronisation modes."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..translation.orchestrator import TranslationOutcome

__all__ = ["SyncResult", "TranslateStep"]

TranslateStep = Callable[[Sequence[str]], TranslationOutcome]
"""Translate the given keys in order and report what was resolved."""


@dataclass(slots=True)
class SyncResult:
    """Summary of one target file's synchronisation."""

    path: Path | None = None
    added: int = 0
    removed: int = 0
    translated: int = 0
    failed: int = 0
    cancelled: bool = False
    written: bool = False

    def absorb(self, outcome: TranslationOutcome) -> None:
        """Copy counters from a translation ``outcome``."""
        self.translated = outcome.count
        self.failed = len(outcome.failed)
        self.cancelled = outcome.cancelled
