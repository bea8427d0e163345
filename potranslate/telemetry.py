"""Structured event logging helpers."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from .log import logger

# Keys that should be redacted when logging
SENSITIVE_KEYS = {
    "api_key",
    "authorization",
    "key",
    "token",
}

REDACTED = "[REDACTED]"


def _sanitize_value(value: Any) -> Any:
    """Recursively sanitize ``value``."""

    if isinstance(value, Mapping):
        return {
            k: (REDACTED if str(k).lower() in SENSITIVE_KEYS else _sanitize_value(v))
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(v) for v in value]
    return value


def sanitize(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a deep copy of *data* with sensitive keys replaced by ``[REDACTED]``."""

    return _sanitize_value(dict(data))


def log_event(
    event: str,
    payload: Mapping[str, Any] | None = None,
    *,
    start_time: float | None = None,
    level: int = logging.INFO,
) -> None:
    """Log *event* with a redacted structured *payload*.

    When *start_time* (a :func:`time.monotonic` value) is given the elapsed
    time in milliseconds is recorded as ``duration_ms``.
    """

    data: dict[str, Any] = {"event": event}
    safe_payload = sanitize(payload) if payload else {}
    data["payload"] = safe_payload
    data["size_bytes"] = len(
        json.dumps(safe_payload, ensure_ascii=False, default=str).encode("utf-8")
    )
    if start_time is not None:
        data["duration_ms"] = int((time.monotonic() - start_time) * 1000)
    logger.log(level, event, extra={"json": data})


__all__ = ["REDACTED", "log_event", "sanitize"]
