"""Locating a domain's template and target catalogs."""

from __future__ import annotations

from pathlib import Path

from .catalog.parser import parse_lines
from .sync.files import read_lines

__all__ = [
    "find_po_files",
    "language_from_filename",
    "po_path",
    "template_path",
    "target_language",
]


def template_path(directory: Path, domain: str) -> Path:
    """Return ``<directory>/<domain>.pot``."""
    return directory / f"{domain}.pot"


def po_path(directory: Path, domain: str, language: str) -> Path:
    """Return ``<directory>/<domain>_<language>.po``."""
    return directory / f"{domain}_{language}.po"


def find_po_files(directory: Path, domain: str) -> list[Path]:
    """Return the ``<domain>_*.po`` files of ``directory`` sorted by name."""
    return sorted(path for path in directory.glob(f"{domain}_*.po") if path.is_file())


def language_from_filename(path: Path) -> str | None:
    """Return the part of the file stem after its last underscore."""
    stem = path.name.removesuffix(".po")
    _prefix, sep, language = stem.rpartition("_")
    if not sep or not language:
        return None
    return language


def target_language(path: Path) -> str | None:
    """Return the target language of the catalog at ``path``.

    The header's ``Language`` field is preferred; the file name suffix is the
    fallback. ``None`` means neither source yields a value.
    """
    language = parse_lines(read_lines(path)).language
    return language or language_from_filename(path)
