"""Formatting of sizes, rates, durations and timestamps for display."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from eostui.records import Entry

_BYTE_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def fallback(value: str, default: str) -> str:
    """Return value, or default when value is empty."""
    return value if value else default


def human_bytes(value: int) -> str:
    """Format a byte count with binary units and one decimal."""
    if value < 1024:
        return f"{value} B"
    size = float(value)
    unit = -1
    while size >= 1024 and unit < len(_BYTE_UNITS) - 1:
        size /= 1024
        unit += 1
    if unit < 0:
        return f"{value} B"
    return f"{size:.1f} {_BYTE_UNITS[unit]}"


def human_bytes_rate(bps: float) -> str:
    """Format a byte rate with decimal units."""
    if bps >= 1e9:
        return f"{bps / 1e9:.2f} GB/s"
    if bps >= 1e6:
        return f"{bps / 1e6:.2f} MB/s"
    if bps >= 1e3:
        return f"{bps / 1e3:.2f} KB/s"
    return f"{bps:.0f} B/s"


def format_duration(value: timedelta) -> str:
    """Format a positive duration rounded to seconds, e.g. ``3h25m10s``."""
    micros = value // timedelta(microseconds=1)
    if micros <= 0:
        return "-"
    seconds = (micros + 500_000) // 1_000_000
    if seconds == 0:
        return "0s"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def format_time(value: Optional[datetime]) -> str:
    """Format a timestamp in local time as RFC 3339, or ``-`` when unset."""
    if value is None:
        return "-"
    text = value.astimezone().isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_time_short(value: Optional[datetime]) -> str:
    """Format a timestamp in local time as ``YYYY-MM-DD HH:MM``."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def usage_percent(used: int, capacity: int) -> float:
    """Return used as a percentage of capacity; zero capacity gives 0."""
    if capacity == 0:
        return 0.0
    return used / capacity * 100


def entry_type_label(entry: Entry) -> str:
    """Return ``DIR`` for containers and ``FILE`` otherwise."""
    return "DIR" if entry.is_container() else "FILE"


def entry_size(entry: Entry) -> str:
    """Return the human-readable size, or ``-`` for containers."""
    if entry.is_container():
        return "-"
    return human_bytes(entry.size)