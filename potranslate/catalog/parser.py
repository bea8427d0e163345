"""Line based parser recovering a :class:`Catalog` from PO/POT text.

The parser is tolerant: it never raises on malformed input and instead
produces the closest structural reading of the lines it is given.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from pathlib import Path

from .escape import decode
from .header import parse_header_fields
from .model import HEADER_KEY, Catalog, Entry, EntryLocation, Header

__all__ = ["load_catalog", "parse_lines", "parse_text", "split_lines"]

logger = logging.getLogger(__name__)

KEY_MARKER = "msgid "
VALUE_MARKER = "msgstr "
COMMENT_MARKER = "#"


class _Mode(enum.Enum):
    OUTSIDE = "outside"
    KEY = "key"
    VALUE = "value"


class _ParseState:
    """Transient state of a single parse."""

    def __init__(self) -> None:
        self.mode = _Mode.OUTSIDE
        self.key: str | None = None
        self.value = ""
        self.comments: list[str] = []
        self.pending: list[str] = []
        self.msgid_line = 0
        self.msgstr_start: int | None = None
        self.msgstr_end: int | None = None

    def start_entry(self, index: int, key: str) -> None:
        self.key = key
        self.value = ""
        self.comments = self.pending
        self.pending = []
        self.msgid_line = index
        self.msgstr_start = None
        self.msgstr_end = None
        self.mode = _Mode.KEY

    def start_value(self, index: int, value: str) -> None:
        self.value = value
        self.msgstr_start = index
        self.msgstr_end = index + 1
        self.mode = _Mode.VALUE

    def continue_literal(self, index: int, text: str) -> None:
        if self.mode is _Mode.KEY and self.key is not None:
            self.key += text
        elif self.mode is _Mode.VALUE:
            self.value += text
            self.msgstr_end = index + 1

    def take_entry(self) -> Entry | None:
        if self.key is None:
            return None
        entry = Entry(
            key=self.key,
            translation=self.value,
            comments=self.comments,
            location=EntryLocation(
                msgid_line=self.msgid_line,
                msgstr_start=self.msgstr_start,
                msgstr_end=self.msgstr_end,
            ),
        )
        self.key = None
        self.value = ""
        self.comments = []
        return entry


def split_lines(text: str) -> list[str]:
    """Split file ``text`` on ``\\n`` so that ``"\\n".join`` restores it exactly."""
    return text.split("\n")


def parse_text(text: str) -> Catalog:
    """Parse catalog ``text``."""
    return parse_lines(split_lines(text))


def load_catalog(path: str | Path) -> Catalog:
    """Read and parse the catalog stored at ``path``."""
    return parse_text(Path(path).read_text(encoding="utf-8"))


def parse_lines(lines: Sequence[str]) -> Catalog:
    """Parse ``lines`` into a catalog.

    Entry locations refer to indices in ``lines`` so callers can patch the
    original text in place.
    """
    catalog = Catalog()
    state = _ParseState()

    def store(entry: Entry | None) -> None:
        if entry is None:
            return
        if entry.key == HEADER_KEY:
            if catalog.header is None:
                catalog.header = Header(
                    fields=parse_header_fields(entry.translation),
                    comments=entry.comments,
                    location=entry.location,
                )
            return
        if not catalog.add(entry):
            logger.debug("Ignoring duplicate msgid %r", entry.key)

    for index, line in enumerate(lines):
        trimmed = line.strip()
        if trimmed.startswith(KEY_MARKER):
            store(state.take_entry())
            state.start_entry(index, decode(trimmed[len(KEY_MARKER):]))
        elif trimmed.startswith(VALUE_MARKER):
            if state.key is not None:
                state.start_value(index, decode(trimmed[len(VALUE_MARKER):]))
            else:
                state.mode = _Mode.OUTSIDE
        elif trimmed.startswith('"'):
            if state.mode is not _Mode.OUTSIDE:
                state.continue_literal(index, decode(trimmed))
        elif trimmed.startswith(COMMENT_MARKER):
            if state.mode is _Mode.OUTSIDE:
                state.pending.append(line)
            state.mode = _Mode.OUTSIDE
        elif not trimmed:
            state.mode = _Mode.OUTSIDE
            state.pending = []
        else:
            # msgctxt, msgid_plural and anything else this parser does not model
            state.mode = _Mode.OUTSIDE
            state.pending = []

    store(state.take_entry())
    return catalog
