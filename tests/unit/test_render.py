"""Tests for entry rendering."""

import pytest

from potranslate.catalog.render import PLACEHOLDER_COMMENT, entry_lines, string_lines

pytestmark = pytest.mark.unit


def test_single_line_string() -> None:
    assert string_lines("msgid", 'Say "hi"') == [r'msgid "Say \"hi\""']


def test_multi_line_string_is_split_after_newlines() -> None:
    assert string_lines("msgstr", "first\nsecond\nthird") == [
        'msgstr ""',
        r'"first\n"',
        r'"second\n"',
        '"third"',
    ]


def test_trailing_newline_has_no_empty_tail_literal() -> None:
    assert string_lines("msgstr", "line\n") == ['msgstr ""', r'"line\n"']


def test_entry_lines_keeps_comments_in_order() -> None:
    lines = entry_lines("Hello", "Hola", ["#. note", "#: app.py:1"])
    assert lines == ["#. note", "#: app.py:1", 'msgid "Hello"', 'msgstr "Hola"']


def test_placeholder_only_when_comments_missing() -> None:
    assert entry_lines("x", placeholder=True)[0] == PLACEHOLDER_COMMENT
    assert entry_lines("x", comments=["#: a.py:1"], placeholder=True)[0] == "#: a.py:1"
    assert entry_lines("x") == ['msgid "x"', 'msgstr ""']
