"""Logging setup for potranslate.

Console output is meant for people watching a sync run: event records such
as ``FILE_SYNCED`` or ``TRANSLATION_FAILED`` are rendered as one line of
``key=value`` pairs. The two log files keep everything at DEBUG level, the
JSONL one with the full structured payload.
"""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Any

from .util.time import utc_now_iso

LOG_DIR_ENV = "POTRANSLATE_LOG_DIR"
TEXT_LOG_NAME = "potranslate.log"
JSON_LOG_NAME = "potranslate.jsonl"
_ROTATION_BACKUPS = 5
_TEXT_LOG_MAX_BYTES = 5 * 1024 * 1024
_JSON_LOG_MAX_BYTES = 5 * 1024 * 1024

logger = logging.getLogger("potranslate")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, str):
        if value and not any(ch.isspace() or ch in '"=' for ch in value):
            return value
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(value, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Render ``LEVEL: message`` and spell out the fields of event records.

    ``WARNING: TRANSLATION_FAILED text="Save file" target=de reason=timeout``
    """

    def __init__(self) -> None:
        super().__init__("%(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        event = _event_of(record)
        if event is None:
            return base
        payload = event.get("payload", {})
        parts = [f"{key}={_format_value(value)}" for key, value in payload.items()]
        duration = event.get("duration_ms")
        if duration is not None:
            parts.append(f"({duration} ms)")
        return " ".join([base, *parts]) if parts else base


def _event_of(record: logging.LogRecord) -> dict[str, Any] | None:
    """Return the event data of a record logged by ``log_event``."""
    data = getattr(record, "json", None)
    if not isinstance(data, dict) or not isinstance(data.get("payload", {}), dict):
        return None
    if data.get("event") != record.msg:
        return None
    return data


class JsonFormatter(logging.Formatter):
    """One JSON object per record; event records keep their own fields."""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        event = getattr(record, "json", None)
        if isinstance(event, dict):
            data = dict(event)
            data.setdefault("message", record.message)
        else:
            data = {"message": record.message, "logger": record.name}
        data.setdefault("level", record.levelname)
        data.setdefault("timestamp", utc_now_iso())
        if record.exc_info:
            data.setdefault("exc_info", self.formatException(record.exc_info))
        return json.dumps(data, ensure_ascii=False, default=str)


class JsonlHandler(RotatingFileHandler):
    """Append :class:`JsonFormatter` lines to ``filename``, rotating at 5 MiB."""

    def __init__(self, filename: Path | str) -> None:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(
            path,
            maxBytes=_JSON_LOG_MAX_BYTES,
            backupCount=_ROTATION_BACKUPS,
            encoding="utf-8",
        )
        self.setFormatter(JsonFormatter())


def _resolve_log_dir(log_dir: str | Path | None) -> Path:
    """Pick the explicit directory, then ``$POTRANSLATE_LOG_DIR``, then ``~/.potranslate/logs``."""
    if log_dir is None:
        log_dir = os.environ.get(LOG_DIR_ENV) or Path.home() / ".potranslate" / "logs"
    path = Path(log_dir).expanduser().resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def _add_file_handler(handler: RotatingFileHandler, existing_size: int) -> None:
    # a log left full by the previous run starts a fresh file
    if 0 < handler.maxBytes <= existing_size:
        handler.doRollover()
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)


def _size(path: Path) -> int:
    return path.stat().st_size if path.exists() else 0


def configure_logging(level: int = logging.INFO, *, log_dir: str | Path | None = None) -> None:
    """Configure the application logger once.

    Console output honours *level*; the text and JSONL files always receive
    DEBUG records. Later calls are no-ops.
    """
    if logger.handlers:
        return

    directory = _resolve_log_dir(log_dir)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stream_handler)

    text_path = directory / TEXT_LOG_NAME
    text_size = _size(text_path)
    text_handler = RotatingFileHandler(
        text_path,
        encoding="utf-8",
        maxBytes=_TEXT_LOG_MAX_BYTES,
        backupCount=_ROTATION_BACKUPS,
    )
    text_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    _add_file_handler(text_handler, text_size)

    json_path = directory / JSON_LOG_NAME
    json_size = _size(json_path)
    _add_file_handler(JsonlHandler(json_path), json_size)

    logger.setLevel(logging.DEBUG)


__all__ = [
    "ConsoleFormatter",
    "JSON_LOG_NAME",
    "JsonlHandler",
    "LOG_DIR_ENV",
    "TEXT_LOG_NAME",
    "configure_logging",
    "logger",
]
