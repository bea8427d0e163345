"""Pytest configuration for the potranslate test suite."""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest

from potranslate.errors import TranslationError
from potranslate.log import LOG_DIR_ENV, logger

TEMPLATE_TEXT = textwrap.dedent(
    """\
    # Test POT file
    msgid ""
    msgstr ""
    "Project-Id-Version: Test 1.0\\n"
    "Language: en\\n"
    "Language-Team: English\\n"
    "PO-Revision-Date: 2024-01-01 12:00+0000\\n"
    "Content-Type: text/plain; charset=UTF-8\\n"

    #: app.py:1
    msgid "a"
    msgstr ""

    #: app.py:2
    msgid "b"
    msgstr ""

    #: app.py:3
    msgid "c"
    msgstr ""
    """
)


class FakeTranslator:
    """In-memory translator recording every call."""

    def __init__(
        self,
        mapping: Mapping[str, str] | None = None,
        *,
        fail: Iterable[str] = (),
        on_call: Callable[[str], None] | None = None,
    ) -> None:
        self.mapping = dict(mapping or {})
        self.fail = set(fail)
        self.on_call = on_call
        self.calls: list[tuple[str, str, str]] = []

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        self.calls.append((text, source_language, target_language))
        if self.on_call is not None:
            self.on_call(text)
        if text in self.fail:
            raise TranslationError(text, "backend unavailable")
        return self.mapping.get(text, f"{target_language}:{text}")

    @property
    def texts(self) -> list[str]:
        return [text for text, _source, _target in self.calls]


@pytest.fixture
def fake_translator() -> type[FakeTranslator]:
    """Return the :class:`FakeTranslator` class for building test doubles."""

    return FakeTranslator


@pytest.fixture
def template_text() -> str:
    return TEMPLATE_TEXT


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Directory holding ``default.pot`` built from :data:`TEMPLATE_TEXT`."""

    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "default.pot").write_text(TEMPLATE_TEXT, encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Keep log files out of the home directory and drop handlers between tests."""

    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path_factory.mktemp("logs")))
    prev_handlers = list(logger.handlers)
    prev_level = logger.level
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    try:
        yield
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.handlers.extend(prev_handlers)
        logger.setLevel(prev_level)
