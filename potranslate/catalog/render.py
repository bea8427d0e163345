"""Serialise catalog strings and entries back into PO lines."""

from __future__ import annotations

from collections.abc import Sequence

from .escape import encode

__all__ = ["PLACEHOLDER_COMMENT", "entry_lines", "string_lines"]

PLACEHOLDER_COMMENT = "#: (added from POT)"


def string_lines(marker: str, text: str) -> list[str]:
    """Return the lines for ``marker`` (``msgid``/``msgstr``) holding ``text``.

    Text containing newlines is written as an empty first literal followed by
    one continuation line per newline-terminated segment.
    """
    if "\n" not in text:
        return [f'{marker} "{encode(text)}"']
    lines = [f'{marker} ""']
    parts = text.split("\n")
    for part in parts[:-1]:
        lines.append(f'"{encode(part)}\\n"')
    if parts[-1]:
        lines.append(f'"{encode(parts[-1])}"')
    return lines


def entry_lines(
    key: str,
    translation: str = "",
    comments: Sequence[str] = (),
    *,
    placeholder: bool = False,
) -> list[str]:
    """Return a complete entry block without surrounding blank lines.

    With ``placeholder`` set an entry lacking comments receives
    :data:`PLACEHOLDER_COMMENT` so its origin stays visible in the file.
    """
    lines = list(comments)
    if not lines and placeholder:
        lines.append(PLACEHOLDER_COMMENT)
    lines.extend(string_lines("msgid", key))
    lines.extend(string_lines("msgstr", translation))
    return lines
