"""Incremental synchronisation: add missing entries, fill empty translations.

Lines that are neither appended nor part of a translated ``msgstr`` block
are written back exactly as they were read.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from ..catalog.model import Catalog, Entry
from ..catalog.parser import parse_lines
from ..catalog.render import entry_lines, string_lines
from ..telemetry import log_event
from ..translation.orchestrator import TranslationOutcome
from .files import read_lines, write_lines
from .plan import plan_incremental
from .types import SyncResult, TranslateStep

__all__ = ["append_entries", "apply_translations", "sync_file", "sync_lines"]

logger = logging.getLogger(__name__)


def append_entries(lines: Sequence[str], entries: Iterable[Entry]) -> list[str]:
    """Return ``lines`` with ``entries`` appended, untranslated.

    Each entry is preceded by a blank line and carries its template comments.
    The result always ends with a newline.
    """
    result = list(lines)
    entries = list(entries)
    if not entries:
        return result
    while result and not result[-1].strip():
        result.pop()
    for entry in entries:
        if result:
            result.append("")
        result.extend(entry_lines(entry.key, "", entry.comments, placeholder=True))
    result.append("")
    return result


def apply_translations(lines: Sequence[str], translations: Mapping[str, str]) -> list[str]:
    """Replace the ``msgstr`` block of every entry whose key is in ``translations``."""
    return _patch_msgstr(lines, translations)[0]


def _patch_msgstr(
    lines: Sequence[str], translations: Mapping[str, str]
) -> tuple[list[str], int]:
    """Return the patched lines and the number of ``msgstr`` blocks replaced."""
    result = list(lines)
    if not translations:
        return result, 0
    spans: list[tuple[int, int, str]] = []
    for entry in parse_lines(result):
        location = entry.location
        if entry.key not in translations or location is None:
            continue
        if location.msgstr_start is None or location.msgstr_end is None:
            logger.debug("Entry %r has no msgstr line, leaving it alone", entry.key)
            continue
        spans.append((location.msgstr_start, location.msgstr_end, entry.key))
    for start, end, key in sorted(spans, reverse=True):
        result[start:end] = string_lines("msgstr", translations[key])
    return result, len(spans)


def sync_lines(
    lines: Sequence[str],
    template: Catalog,
    translate: TranslateStep,
) -> tuple[list[str], SyncResult]:
    """Synchronise target ``lines`` with ``template``.

    Returns the new lines and a result whose ``written`` flag tells whether
    the content changed.
    """
    result = SyncResult()
    plan = plan_incremental(template, parse_lines(lines))
    if plan.is_empty:
        return list(lines), result

    updated = append_entries(lines, plan.to_add)
    result.added = len(plan.to_add)
    if result.added:
        logger.info("Added %d missing entry/entries from POT file", result.added)

    outcome = translate(plan.to_translate) if plan.to_translate else TranslationOutcome()
    result.absorb(outcome)
    updated, result.translated = _patch_msgstr(updated, outcome.translations)
    result.written = result.added > 0 or result.translated > 0
    return updated, result


def sync_file(path: Path, template: Catalog, translate: TranslateStep) -> SyncResult:
    """Synchronise the target catalog at ``path`` in place.

    Translations obtained before a cancellation are still written.
    """
    start = time.monotonic()
    lines = read_lines(path)
    updated, result = sync_lines(lines, template, translate)
    result.path = path
    if result.written:
        write_lines(path, updated)
    log_event(
        "FILE_SYNCED",
        {
            "file": path.name,
            "added": result.added,
            "translated": result.translated,
            "failed": result.failed,
            "cancelled": result.cancelled,
            "written": result.written,
        },
        start_time=start,
        level=logging.DEBUG,
    )
    return result
