"""Loading the template and resolving its source language."""

from __future__ import annotations

import logging
from pathlib import Path

from ..catalog.header import LANGUAGE, set_header_field
from ..catalog.model import Catalog
from ..catalog.parser import parse_lines
from ..errors import ConfigurationError
from .files import read_lines, write_lines

__all__ = ["load_template", "resolve_source_language", "update_template_language"]

logger = logging.getLogger(__name__)


def load_template(path: Path) -> Catalog:
    """Parse the template at ``path``, failing with :class:`ConfigurationError`."""
    if not path.is_file():
        raise ConfigurationError(f"POT file '{path}' not found")
    try:
        return parse_lines(read_lines(path))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read POT file '{path}': {exc}") from exc


def update_template_language(path: Path, language: str) -> bool:
    """Record ``language`` in the header of the template at ``path``.

    Returns ``False`` when the header has neither a ``Language`` nor a
    ``Content-Type`` field to anchor the value.
    """
    lines = read_lines(path)
    if not set_header_field(lines, parse_lines(lines).header, LANGUAGE, language):
        return False
    write_lines(path, lines)
    return True


def resolve_source_language(
    template: Catalog,
    template_path: Path,
    override: str | None,
) -> str:
    """Return the source language for a run.

    The template's own ``Language`` wins over ``override``. Without one,
    ``override`` is required and is written into the template.
    """
    detected = template.language
    if detected:
        if override and override != detected:
            logger.warning(
                "Using source language from POT file (%s) instead of provided flag (%s)",
                detected,
                override,
            )
        return detected
    if not override:
        raise ConfigurationError(
            "Source language not detected in POT file and not provided via --source-lang"
        )
    try:
        updated = update_template_language(template_path, override)
    except OSError as exc:
        logger.warning("Could not update POT file metadata: %s", exc)
    else:
        if updated:
            logger.info("Updated POT file with source language: %s", override)
        else:
            logger.warning(
                "Could not update POT file metadata: no place to insert the Language header"
            )
    return override
