"""Creation of a new target catalog from the template."""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from ..catalog.header import (
    LANGUAGE,
    LANGUAGE_TEAM,
    REVISION_DATE,
    format_header_line,
    header_field_lines,
    set_header_field,
)
from ..catalog.parser import parse_lines
from ..errors import ConfigurationError, DestinationExistsError
from ..telemetry import log_event
from ..util.time import revision_timestamp
from .files import read_lines, write_lines

__all__ = ["clone_template", "localize_header", "validate_language_code"]

logger = logging.getLogger(__name__)

_LANGUAGE_CODE_RE = re.compile(r"[A-Za-z]{2}")


def validate_language_code(code: str) -> str:
    """Return ``code`` stripped, raising :class:`ConfigurationError` unless it has two letters."""
    value = code.strip()
    if not _LANGUAGE_CODE_RE.fullmatch(value):
        raise ConfigurationError(
            f"Language code must be 2 letters (e.g. 'es', 'fr', 'de'), got {code!r}"
        )
    return value


def localize_header(
    lines: Sequence[str],
    language: str,
    *,
    now: datetime.datetime | None = None,
) -> list[str]:
    """Return template ``lines`` with header fields rewritten for ``language``.

    ``Language`` becomes ``language``, ``Language-Team`` its upper-cased form
    and ``PO-Revision-Date`` the current time. A missing ``Language`` field is
    inserted after ``Content-Type``. Every other line is kept unchanged.
    """
    result = list(lines)
    header = parse_lines(result).header
    positions = header_field_lines(result, header)
    replacements = {
        LANGUAGE: language,
        LANGUAGE_TEAM: language.upper(),
        REVISION_DATE: revision_timestamp(now),
    }
    for name, value in replacements.items():
        if name in positions:
            result[positions[name]] = format_header_line(name, value)
    if LANGUAGE not in positions and not set_header_field(result, header, LANGUAGE, language):
        logger.warning("Template header has no Language field to set")
    return result


def clone_template(
    template_path: Path,
    destination: Path,
    language: str,
    *,
    now: datetime.datetime | None = None,
) -> Path:
    """Create ``destination`` as a copy of the template localised for ``language``.

    Raises :class:`DestinationExistsError` instead of overwriting.
    """
    language = validate_language_code(language)
    if destination.exists():
        raise DestinationExistsError(destination)
    lines = localize_header(read_lines(template_path), language, now=now)
    write_lines(destination, lines)
    log_event(
        "LANGUAGE_ADDED",
        {"file": destination.name, "language": language, "template": template_path.name},
    )
    return destination
