"""Conversion between quoted catalog literals and their text values.

Only four escape sequences are understood: ``\\\\``, ``\\"``, ``\\n`` and
``\\t``. Any other backslash sequence is kept as written.
"""

from __future__ import annotations

import re

__all__ = ["decode", "encode"]

_ESCAPE_RE = re.compile(r'\\(["\\nt])')
_UNESCAPED = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


def decode(literal: str) -> str:
    """Return the text value of the quoted ``literal``.

    A literal wrapped in quotes loses surrounding whitespace and one pair of
    enclosing quotes. Anything else is unescaped as-is, whitespace included.
    """
    value = literal
    stripped = literal.strip()
    if len(stripped) >= 2 and stripped.startswith('"') and stripped.endswith('"'):
        value = stripped[1:-1]
    # single left-to-right pass so "\\n" decodes to backslash + n
    return _ESCAPE_RE.sub(lambda match: _UNESCAPED[match.group(1)], value)


def encode(text: str) -> str:
    """Return ``text`` escaped for use between catalog quotes."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
