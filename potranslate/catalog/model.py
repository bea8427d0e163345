"""Catalog data structures shared by the parser and the synchronizers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["Catalog", "Entry", "EntryLocation", "Header", "HEADER_KEY"]

HEADER_KEY = ""


@dataclass(frozen=True, slots=True)
class EntryLocation:
    """Line indices of an entry inside the text it was parsed from.

    ``msgstr_start``/``msgstr_end`` delimit the ``msgstr`` line and its
    continuation lines as a half-open range. Both are ``None`` when the entry
    has no ``msgstr`` line.
    """

    msgid_line: int
    msgstr_start: int | None = None
    msgstr_end: int | None = None

    @property
    def end(self) -> int:
        """Return the index just past the last line owned by the entry."""
        if self.msgstr_end is not None:
            return self.msgstr_end
        return self.msgid_line + 1


@dataclass(slots=True)
class Entry:
    """One translatable string with its translation and attached comments."""

    key: str
    translation: str = ""
    comments: list[str] = field(default_factory=list)
    location: EntryLocation | None = None

    @property
    def is_translated(self) -> bool:
        return self.translation != ""


@dataclass(slots=True)
class Header:
    """The metadata pseudo-entry of a catalog."""

    fields: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)
    location: EntryLocation | None = None

    def get(self, name: str) -> str | None:
        """Return the stripped value of field ``name`` or ``None`` when empty."""
        value = self.fields.get(name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def language(self) -> str | None:
        return self.get("Language")


class Catalog:
    """Ordered collection of entries keyed by their source string."""

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        *,
        header: Header | None = None,
    ) -> None:
        """Build a catalog from ``entries`` keeping the first of any duplicates."""
        self.header = header
        self._entries: dict[str, Entry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: Entry) -> bool:
        """Append ``entry`` unless its key is already present.

        Returns ``True`` when the entry was stored. The header key is never
        stored as an ordinary entry.
        """
        if entry.key == HEADER_KEY or entry.key in self._entries:
            return False
        self._entries[entry.key] = entry
        return True

    def get(self, key: str) -> Entry | None:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """Return entry keys in catalog order."""
        return list(self._entries)

    def translations(self) -> dict[str, str]:
        """Return a ``key -> translation`` mapping in catalog order."""
        return {key: entry.translation for key, entry in self._entries.items()}

    @property
    def language(self) -> str | None:
        return self.header.language if self.header is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog(entries={len(self)}, language={self.language!r})"
