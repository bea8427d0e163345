"""Time helpers."""

from __future__ import annotations

import datetime

REVISION_DATE_FORMAT = "%Y-%m-%d %H:%M%z"


def utc_now_iso() -> str:
    """Return current UTC time in ISO format without sub-second precision."""
    return datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds")


def revision_timestamp(now: datetime.datetime | None = None) -> str:
    """Return ``now`` (default: current local time) as ``YYYY-MM-DD HH:MM+ZZZZ``.

    Naive values are interpreted as local time.
    """
    moment = now if now is not None else datetime.datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.strftime(REVISION_DATE_FORMAT)
