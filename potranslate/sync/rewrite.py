"""Full rewrite of a target catalog from the template.

The output keeps the target's header block verbatim, lists every template
entry in template order with the template's comments, and drops entries the
template no longer has.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from ..catalog.model import Catalog
from ..catalog.parser import parse_lines
from ..catalog.render import entry_lines
from ..telemetry import log_event
from ..translation.orchestrator import TranslationOutcome
from .files import read_lines, write_lines
from .types import SyncResult, TranslateStep

__all__ = ["extract_header_block", "rewrite_file", "rewrite_lines"]

logger = logging.getLogger(__name__)


def extract_header_block(lines: Sequence[str], catalog: Catalog) -> list[str]:
    """Return the leading lines up to and including the blank line after the header.

    Returns an empty list when the file has no header entry. When no blank
    line follows the header, every line up to the end of the file is kept.
    """
    header = catalog.header
    if header is None or header.location is None:
        return []
    index = header.location.end
    while index < len(lines) and lines[index].strip():
        index += 1
    return list(lines[: index + 1])


def rewrite_lines(
    lines: Sequence[str],
    template: Catalog,
    translate: TranslateStep,
) -> tuple[list[str], SyncResult]:
    """Regenerate target ``lines`` from ``template``."""
    result = SyncResult()
    target = parse_lines(lines)
    existing = target.translations()

    to_translate = [entry.key for entry in template if not existing.get(entry.key)]
    outcome = translate(to_translate) if to_translate else TranslationOutcome()
    result.absorb(outcome)
    result.removed = sum(1 for key in existing if key not in template)
    result.added = sum(1 for entry in template if entry.key not in existing)

    output = extract_header_block(lines, target)
    while output and not output[-1].strip():
        output.pop()
    for entry in template:
        translation = outcome.translations.get(entry.key) or existing.get(entry.key, "")
        if output:
            output.append("")
        output.extend(entry_lines(entry.key, translation, entry.comments))
    output.append("")
    result.written = True
    return output, result


def rewrite_file(path: Path, template: Catalog, translate: TranslateStep) -> SyncResult:
    """Rewrite the target catalog at ``path`` from ``template``."""
    start = time.monotonic()
    lines = read_lines(path)
    updated, result = rewrite_lines(lines, template, translate)
    result.path = path
    write_lines(path, updated)
    if result.removed:
        logger.info("Removed %d obsolete entry/entries", result.removed)
    log_event(
        "FILE_REWRITTEN",
        {
            "file": path.name,
            "entries": len(template),
            "removed": result.removed,
            "translated": result.translated,
            "failed": result.failed,
            "cancelled": result.cancelled,
        },
        start_time=start,
        level=logging.DEBUG,
    )
    return result
