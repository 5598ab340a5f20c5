"""General statistics view: detail tables, pane widths and horizontal scrolling."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from wcwidth import wcwidth

from eostui.inspector import (
    InspectorBin,
    InspectorCostRecord,
    InspectorLayoutSummary,
    cost_rows,
    inspector_bins_rows,
    layout_rows,
)
from eostui.layout import TableColumn, content_aware_columns, format_table_row, text_width

STATS_LIST_SUMMARY_WIDTH_CAP = 40
MIN_LIST_WIDTH = 58
MIN_DETAIL_WIDTH = 44

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


@dataclass
class StatsTable:
    """A detail table of the statistics view: labels, sized columns and rows."""

    labels: list[str]
    columns: list[TableColumn]
    rows: list[list[str]] = field(default_factory=list)

    def row_lines(self) -> list[str]:
        """Return the header and every row rendered with the table's columns."""
        lines = [format_table_row(self.columns, self.labels)]
        lines.extend(format_table_row(self.columns, row) for row in self.rows)
        return lines


def layouts_table(layouts: Sequence[InspectorLayoutSummary]) -> StatsTable:
    """Build the table of inspector layouts."""
    rows = layout_rows(layouts)
    columns = content_aware_columns(
        [
            TableColumn("layout", min_width=8, weight=2),
            TableColumn("type", min_width=7, weight=1),
            TableColumn("volume", min_width=10, weight=1, right=True),
            TableColumn("physical", min_width=10, weight=1, right=True),
            TableColumn("locations", min_width=9, weight=0, right=True),
        ],
        rows,
    )
    return StatsTable(["layout", "type", "volume", "physical", "locations"], columns, rows)


def costs_table(kind: str, costs: Sequence[InspectorCostRecord]) -> StatsTable:
    """Build the table of user or group costs; kind names the first column."""
    rows = cost_rows(costs)
    columns = content_aware_columns(
        [
            TableColumn(kind, min_width=10, weight=2),
            TableColumn("id", min_width=6, weight=0, right=True),
            TableColumn("cost", min_width=8, weight=1, right=True),
            TableColumn("tbyears", min_width=8, weight=1, right=True),
        ],
        rows,
    )
    return StatsTable([kind, "id", "cost", "tbyears"], columns, rows)


def bins_table(files: Sequence[InspectorBin], volume: Sequence[InspectorBin]) -> StatsTable:
    """Build the age-bucket table from file-count and volume buckets."""
    rows = inspector_bins_rows(files, volume)
    columns = content_aware_columns(
        [
            TableColumn("age bucket", min_width=10, weight=2),
            TableColumn("files", min_width=7, weight=1, right=True),
            TableColumn("volume", min_width=8, weight=1, right=True),
        ],
        rows,
    )
    return StatsTable(["age bucket", "files", "volume"], columns, rows)


def stats_list_natural_width(section_titles: Sequence[str]) -> int:
    """Return the panel width the section list needs to show titles and summaries."""
    section_width = max([text_width("section")] + [text_width(title) for title in section_titles])
    content_width = (
        max(text_width("General Statistics"), section_width + 1 + STATS_LIST_SUMMARY_WIDTH_CAP) + 2
    )
    return content_width + 4


def stats_pane_widths(total_width: int, section_titles: Sequence[str]) -> tuple[int, int]:
    """Split total_width between the section list and the detail pane."""
    list_natural = max(MIN_LIST_WIDTH, stats_list_natural_width(section_titles))

    if total_width <= MIN_LIST_WIDTH + MIN_DETAIL_WIDTH:
        detail_width = max(MIN_DETAIL_WIDTH, total_width // 2)
        list_width = max(MIN_LIST_WIDTH, total_width - detail_width)
        return list_width, max(MIN_DETAIL_WIDTH, total_width - list_width)

    list_width = max(MIN_LIST_WIDTH, min(list_natural, total_width - MIN_DETAIL_WIDTH))
    return list_width, total_width - list_width


def offset_window(total: int, offset: int, capacity: int) -> tuple[int, int]:
    """Return the (start, end) slice starting at offset, kept within bounds."""
    if total <= 0:
        return 0, 0
    if capacity <= 0 or total <= capacity:
        return 0, total
    offset = min(max(0, offset), max(0, total - capacity))
    return offset, min(total, offset + capacity)


def _cut(line: str, start: int, end: int) -> str:
    """Return the cells [start, end) of line, keeping escape sequences."""
    out: list[str] = []
    position = 0
    index = 0
    while index < len(line):
        match = _ANSI_RE.match(line, index)
        if match:
            out.append(match.group(0))
            index = match.end()
            continue
        char = line[index]
        cells = max(0, wcwidth(char))
        if position >= start and position + cells <= end:
            out.append(char)
        position += cells
        index += 1
    return "".join(out)


def crop_line(line: str, offset: int, width: int) -> str:
    """Return width cells of line starting at offset, padded with spaces."""
    if width <= 0:
        return ""
    start = max(0, offset)
    if start >= text_width(line):
        return " " * width
    cut = _cut(line, start, start + width)
    return cut + " " * max(0, width - text_width(cut))


def _max_offset_x(table: StatsTable, content_width: int) -> int:
    widest = max((text_width(line) for line in table.row_lines()), default=0)
    return max(0, widest - content_width)


def adjusted_offset_x(
    table: Optional[StatsTable], column: int, offset: int, content_width: int
) -> int:
    """Return a horizontal offset that keeps the selected column in view."""
    if table is None or content_width <= 0 or not table.columns:
        return 0
    offset = max(0, offset)
    column = min(max(column, 0), len(table.columns) - 1)
    start = sum(col.min_width + 1 for col in table.columns[:column])
    end = start + table.columns[column].min_width
    if start < offset:
        offset = start
    if end > offset + content_width:
        offset = end - content_width
    return min(max(0, offset), _max_offset_x(table, content_width))