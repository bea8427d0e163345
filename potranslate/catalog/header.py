"""Structured access to the catalog header block.

Header fields are only ever read from, and written to, the lines that belong
to the header entry itself. A ``Language:`` string elsewhere in the file is
ordinary content.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .escape import decode, encode
from .model import Header

__all__ = [
    "format_header_line",
    "header_field_lines",
    "parse_header_fields",
    "set_header_field",
]

LANGUAGE = "Language"
LANGUAGE_TEAM = "Language-Team"
REVISION_DATE = "PO-Revision-Date"
CONTENT_TYPE = "Content-Type"


def parse_header_fields(body: str) -> dict[str, str]:
    """Split a decoded header ``body`` into ``field -> value`` pairs."""
    fields: dict[str, str] = {}
    for raw in body.split("\n"):
        name, sep, value = raw.partition(":")
        name = name.strip()
        if not sep or not name:
            continue
        fields.setdefault(name, value.strip())
    return fields


def format_header_line(name: str, value: str) -> str:
    """Return the quoted continuation line carrying ``name: value``."""
    return f'"{encode(f"{name}: {value}")}\\n"'


def header_field_lines(lines: Sequence[str], header: Header | None) -> dict[str, int]:
    """Map header field names to the index of the line that carries them.

    Only continuation lines of the header ``msgstr`` are considered.
    """
    if header is None or header.location is None:
        return {}
    start = header.location.msgstr_start
    end = header.location.msgstr_end
    if start is None or end is None:
        return {}
    found: dict[str, int] = {}
    for index in range(start + 1, end):
        trimmed = lines[index].strip()
        if not trimmed.startswith('"'):
            continue
        name, sep, _value = decode(trimmed).partition(":")
        if sep and name.strip():
            found.setdefault(name.strip(), index)
    return found


def set_header_field(
    lines: MutableSequence[str],
    header: Header | None,
    name: str,
    value: str,
    *,
    insert_after: str | None = CONTENT_TYPE,
) -> bool:
    """Rewrite or insert header field ``name`` in ``lines``.

    An existing field line is replaced. Otherwise a new line is inserted right
    after the ``insert_after`` field line. Returns ``False`` when neither is
    possible; ``lines`` is then left untouched. Inserting shifts line indices,
    so any parsed locations for later lines become stale.
    """
    positions = header_field_lines(lines, header)
    if name in positions:
        lines[positions[name]] = format_header_line(name, value)
        return True
    if insert_after is not None and insert_after in positions:
        lines.insert(positions[insert_after] + 1, format_header_line(name, value))
        return True
    return False
