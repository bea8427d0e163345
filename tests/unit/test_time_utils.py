"""Tests for time helpers."""

import datetime

import pytest

from potranslate.util.time import revision_timestamp, utc_now_iso

pytestmark = pytest.mark.unit


def test_utc_now_iso_has_seconds_precision() -> None:
    value = utc_now_iso()
    parsed = datetime.datetime.fromisoformat(value)
    assert parsed.tzinfo is not None
    assert parsed.microsecond == 0


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (datetime.timedelta(hours=2), "2024-05-06 07:08+0200"),
        (datetime.timedelta(hours=-5, minutes=-30), "2024-05-06 07:08-0530"),
        (datetime.timedelta(0), "2024-05-06 07:08+0000"),
    ],
)
def test_revision_timestamp_format(offset: datetime.timedelta, expected: str) -> None:
    moment = datetime.datetime(2024, 5, 6, 7, 8, 59, tzinfo=datetime.timezone(offset))
    assert revision_timestamp(moment) == expected


def test_revision_timestamp_defaults_to_local_time() -> None:
    value = revision_timestamp()
    parsed = datetime.datetime.strptime(value, "%Y-%m-%d %H:%M%z")
    assert abs(parsed - datetime.datetime.now(datetime.UTC)) < datetime.timedelta(minutes=2)


def test_naive_value_gets_local_offset() -> None:
    value = revision_timestamp(datetime.datetime(2024, 1, 2, 3, 4))
    assert value.startswith("2024-01-02 03:04")
    assert value[-5] in "+-"
