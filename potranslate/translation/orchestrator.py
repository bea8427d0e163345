"""Sequential resolution of untranslated strings through a backend."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..errors import TranslationError
from ..telemetry import log_event
from ..util.cancellation import CancellationEvent
from .backend import Translator

__all__ = ["ProgressCallback", "TranslationOutcome", "translate_keys"]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass(slots=True)
class TranslationOutcome:
    """Result of one orchestrated translation pass."""

    translations: dict[str, str] = field(default_factory=dict)
    failed: list[str] = field(default_factory=list)
    cancelled: bool = False

    @property
    def count(self) -> int:
        """Return the number of keys translated successfully."""
        return len(self.translations)


def translate_keys(
    keys: Sequence[str],
    translator: Translator,
    source_language: str,
    target_language: str,
    *,
    delay: float = 0.0,
    cancellation: CancellationEvent | None = None,
    progress: ProgressCallback | None = None,
) -> TranslationOutcome:
    """Translate ``keys`` one at a time, in order.

    Cancellation is checked before every call; a pending request stops the
    pass and leaves the remaining keys untranslated. A failed call is logged
    and skipped without retry. After every successful call except the last,
    the pass pauses for ``delay`` seconds, waking early if cancelled.
    """
    outcome = TranslationOutcome()
    last_index = len(keys) - 1
    for index, key in enumerate(keys):
        if cancellation is not None and cancellation.cancelled:
            outcome.cancelled = True
            logger.info(
                "Translation stopped, %d of %d string(s) left untranslated",
                len(keys) - index,
                len(keys),
            )
            break
        try:
            result = translator.translate(key, source_language, target_language)
        except TranslationError as exc:
            outcome.failed.append(key)
            log_event(
                "TRANSLATION_FAILED",
                {
                    "text": key,
                    "source": source_language,
                    "target": target_language,
                    "reason": exc.reason,
                },
                level=logging.WARNING,
            )
            if progress is not None:
                progress(1)
            continue

        outcome.translations[key] = result
        if progress is not None:
            progress(1)
        if delay > 0 and index < last_index:
            if cancellation is not None:
                cancellation.wait(delay)
            else:
                time.sleep(delay)
    return outcome
