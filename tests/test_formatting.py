from datetime import datetime, timedelta, timezone

import pytest

from eostui.formatting import (
    entry_size,
    entry_type_label,
    fallback,
    format_duration,
    format_time,
    format_time_short,
    human_bytes,
    human_bytes_rate,
    usage_percent,
)
from eostui.records import Entry, EntryKind


@pytest.mark.parametrize(
    "value, default, expected",
    [("", "default", "default"), ("value", "default", "value"), ("", "", "")],
)
def test_fallback(value, default, expected):
    assert fallback(value, default) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1.0 KiB"),
        (1536, "1.5 KiB"),
        (1024**2, "1.0 MiB"),
        (1024**3, "1.0 GiB"),
        (1024**4, "1.0 TiB"),
        (1024**5, "1.0 PiB"),
        (2 * 1024**5, "2.0 PiB"),
    ],
)
def test_human_bytes(value, expected):
    assert human_bytes(value) == expected


@pytest.mark.parametrize(
    "bps, expected",
    [
        (500, "500 B/s"),
        (1500, "1.50 KB/s"),
        (2.5e6, "2.50 MB/s"),
        (1.5e9, "1.50 GB/s"),
    ],
)
def test_human_bytes_rate(bps, expected):
    assert human_bytes_rate(bps) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(0), "-"),
        (timedelta(seconds=-1), "-"),
        (timedelta(seconds=1), "1s"),
        (timedelta(minutes=1), "1m0s"),
        (timedelta(hours=3, minutes=25, seconds=10), "3h25m10s"),
        (timedelta(milliseconds=1500), "2s"),
    ],
)
def test_format_duration(value, expected):
    assert format_duration(value) == expected


def test_format_time_zero():
    assert format_time(None) == "-"


def test_format_time_is_rfc3339():
    ts = datetime(2024, 6, 15, 12, 30, 45, tzinfo=timezone.utc)
    got = format_time(ts)
    assert got != "-"
    parsed = datetime.fromisoformat(got.replace("Z", "+00:00"))
    assert parsed == ts


def test_format_time_short_zero():
    assert format_time_short(None) == "-"


def test_format_time_short_length():
    ts = datetime(2024, 6, 15, 12, 30, tzinfo=timezone.utc)
    got = format_time_short(ts)
    assert got != "-"
    assert len(got) == 16


@pytest.mark.parametrize(
    "used, capacity, expected",
    [(50, 100, 50.0), (100, 100, 100.0), (50, 0, 0.0), (0, 100, 0.0), (1, 2, 50.0)],
)
def test_usage_percent(used, capacity, expected):
    assert usage_percent(used, capacity) == expected


def test_entry_type_label():
    assert entry_type_label(Entry(kind=EntryKind.CONTAINER)) == "DIR"
    assert entry_type_label(Entry(kind=EntryKind.FILE)) == "FILE"


def test_entry_size():
    assert entry_size(Entry(kind=EntryKind.CONTAINER)) == "-"
    assert entry_size(Entry(kind=EntryKind.FILE, size=2048)) == "2.0 KiB"
    assert entry_size(Entry(kind=EntryKind.FILE, size=0)) == "0 B"