"""Inspector statistics: layout, cost and age-bucket records and their display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Sequence

from eostui.formatting import fallback, format_duration, human_bytes

_YEAR = 31536000
_DAY = 86400
_HOUR = 3600


@dataclass(frozen=True)
class InspectorLayoutSummary:
    """Volume and placement statistics for one file layout."""

    layout: str = ""
    type: str = ""
    volume_bytes: int = 0
    physical_bytes: int = 0
    locations: int = 0


@dataclass(frozen=True)
class InspectorCostRecord:
    """Storage cost attributed to one user or group."""

    name: str = ""
    id: int = 0
    cost: float = 0.0
    tb_years: float = 0.0


@dataclass(frozen=True)
class InspectorBin:
    """One age bucket: its upper bound in seconds and the value counted in it."""

    bin_seconds: int = 0
    value: int = 0


def inspector_error_summary(error: Optional[BaseException]) -> str:
    """Classify an inspector error as unavailable, disabled or a plain error."""
    if error is None:
        return ""
    lower = str(error).lower()
    if "permission denied" in lower or "unavailable" in lower:
        return "unavailable"
    if "disabled" in lower:
        return "disabled"
    return "error"


def format_inspector_bin_label(seconds: int) -> str:
    """Return a short label for an age bucket, such as ``now``, ``1y`` or ``3h``."""
    if seconds == 0:
        return "now"
    if seconds % _YEAR == 0:
        return f"{seconds // _YEAR}y"
    if seconds % _DAY == 0:
        return f"{seconds // _DAY}d"
    if seconds % _HOUR == 0:
        return f"{seconds // _HOUR}h"
    return format_duration(timedelta(seconds=seconds)).removesuffix("0s")


def format_inspector_layout(layout: InspectorLayoutSummary) -> str:
    """Return ``layout type volume``, or ``-`` when no layout is set."""
    if not layout.layout:
        return "-"
    return f"{layout.layout} {fallback(layout.type, '-')} {human_bytes(layout.volume_bytes)}"


def format_inspector_cost(record: InspectorCostRecord) -> str:
    """Return ``name cost``, or ``-`` when the record has no name."""
    if not record.name:
        return "-"
    return f"{record.name} {record.cost:.2f}"


def inspector_bin_summary(
    files: Sequence[InspectorBin], volume: Sequence[InspectorBin]
) -> str:
    """Summarise the last file-count and volume buckets on one line."""
    file_label = "-"
    if files:
        last = files[-1]
        file_label = f"{format_inspector_bin_label(last.bin_seconds)}={last.value} files"
    volume_label = "-"
    if volume:
        last = volume[-1]
        volume_label = f"{format_inspector_bin_label(last.bin_seconds)}={human_bytes(last.value)}"
    return f"{file_label} • {volume_label}"


def inspector_bins_rows(
    files: Sequence[InspectorBin], volume: Sequence[InspectorBin]
) -> list[list[str]]:
    """Return age-bucket table rows: label, file count and volume.

    Rows follow the file buckets, matched to volumes by bucket; without file
    buckets the volume buckets are listed with ``-`` for the file count.
    """
    volumes = {item.bin_seconds: item.value for item in volume}
    rows = [
        [
            format_inspector_bin_label(item.bin_seconds),
            str(item.value),
            human_bytes(volumes.get(item.bin_seconds, 0)),
        ]
        for item in files
    ]
    if not rows:
        rows = [
            [format_inspector_bin_label(item.bin_seconds), "-", human_bytes(item.value)]
            for item in volume
        ]
    return rows


def layout_rows(layouts: Sequence[InspectorLayoutSummary]) -> list[list[str]]:
    """Return layout table rows: layout, type, volume, physical and locations."""
    return [
        [
            layout.layout,
            fallback(layout.type, "-"),
            human_bytes(layout.volume_bytes),
            human_bytes(layout.physical_bytes),
            str(layout.locations),
        ]
        for layout in layouts
    ]


def cost_rows(costs: Sequence[InspectorCostRecord]) -> list[list[str]]:
    """Return cost table rows: name, id, cost and TB-years."""
    return [
        [record.name, str(record.id), f"{record.cost:.2f}", f"{record.tb_years:.2f}"]
        for record in costs
    ]