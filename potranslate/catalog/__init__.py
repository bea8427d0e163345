"""Catalog model, parser and serializer."""

from .escape import decode, encode
from .model import HEADER_KEY, Catalog, Entry, EntryLocation, Header
from .parser import load_catalog, parse_lines, parse_text, split_lines
from .render import entry_lines, string_lines

__all__ = [
    "HEADER_KEY",
    "Catalog",
    "Entry",
    "EntryLocation",
    "Header",
    "decode",
    "encode",
    "entry_lines",
    "load_catalog",
    "parse_lines",
    "parse_text",
    "split_lines",
    "string_lines",
]
