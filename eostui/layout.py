"""Text layout helpers: column allocation, padding, windows and panel sizes."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Sequence

from wcwidth import wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")
_ELLIPSIS = "…"


@dataclass
class TableColumn:
    """A table column: title, minimum and maximum width, weight and alignment."""

    title: str
    min_width: int = 0
    max_width: int = 0
    weight: int = 0
    right: bool = False


def text_width(value: str) -> int:
    """Return the display width of the widest line, ignoring ANSI escapes."""
    stripped = _ANSI_RE.sub("", value)
    return max(
        (sum(max(0, wcwidth(char)) for char in line) for line in stripped.split("\n")),
        default=0,
    )


def truncate(value: str, width: int) -> str:
    """Fit value on one line of at most width cells, ending in an ellipsis."""
    value = value.replace("\n", " ")
    if width <= 0 or text_width(value) <= width:
        return value
    if width <= 1:
        return _ELLIPSIS
    if len(value) >= width:
        return value[: width - 1] + _ELLIPSIS
    return value


def pad_right(value: str, width: int) -> str:
    """Truncate and left-align value in a field of width cells."""
    value = truncate(value, width)
    return value + " " * max(0, width - text_width(value))


def pad_left(value: str, width: int) -> str:
    """Truncate and right-align value in a field of width cells."""
    value = truncate(value, width)
    return " " * max(0, width - text_width(value)) + value


def format_table_row(columns: Sequence[TableColumn], values: Sequence[str]) -> str:
    """Render one table row; missing values are blank."""
    parts = []
    for index, column in enumerate(columns):
        value = values[index] if index < len(values) else ""
        pad = pad_left if column.right else pad_right
        parts.append(pad(value, column.min_width))
    return " ".join(parts)


def allocate_table_columns(width: int, columns: Sequence[TableColumn]) -> list[TableColumn]:
    """Share width between columns by minimum, weight and maximum width."""
    if not columns:
        return []

    available = max(len(columns), width - (len(columns) - 1))
    allocated = [replace(column) for column in columns]

    total_min = 0
    total_weight = 0
    for column in allocated:
        column.min_width = max(1, column.min_width, text_width(column.title))
        if column.max_width > 0:
            column.min_width = min(column.min_width, column.max_width)
        total_min += column.min_width
        # Columns already at their maximum take no part in sharing extra space.
        if column.max_width > 0 and column.min_width >= column.max_width:
            column.weight = 0
        total_weight += max(column.weight, 0)

    if total_min > available:
        overflow = total_min - available
        while overflow > 0:
            changed = False
            for column in allocated:
                if overflow == 0:
                    break
                if column.min_width > 1:
                    column.min_width -= 1
                    overflow -= 1
                    changed = True
            if not changed:
                break
        return allocated

    extra = available - total_min
    if total_weight == 0:
        total_weight = len(allocated)
        for column in allocated:
            if column.max_width == 0 or column.min_width < column.max_width:
                column.weight = 1

    for column in allocated:
        if extra == 0 or total_weight <= 0:
            break
        weight = max(column.weight, 0)
        share = extra * weight // total_weight
        if column.max_width > 0:
            share = min(share, max(0, column.max_width - column.min_width))
        column.min_width += share
        extra -= share
        total_weight -= weight

    for column in allocated:
        if extra == 0:
            break
        if column.max_width == 0 or column.min_width < column.max_width:
            column.min_width += 1
            extra -= 1

    return allocated


def content_aware_columns(
    columns: Sequence[TableColumn], rows: Sequence[Sequence[str]] | None
) -> list[TableColumn]:
    """Widen column minimums to fit titles and cell contents, up to max width."""
    rows = rows or []
    result = []
    for index, column in enumerate(columns):
        widest = max(
            [text_width(column.title)]
            + [text_width(row[index]) for row in rows if index < len(row)]
        )
        if column.max_width > 0:
            widest = min(widest, column.max_width)
        result.append(replace(column, min_width=max(column.min_width, widest)))
    return result


def visible_window(total: int, selected: int, capacity: int) -> tuple[int, int]:
    """Return the (start, end) slice of rows to show, centred on selected."""
    if total <= 0:
        return 0, 0
    if capacity <= 0 or total <= capacity:
        return 0, total
    selected = min(max(selected, 0), total - 1)
    start = max(0, selected - capacity // 2)
    start = min(start, total - capacity)
    return start, min(total, start + capacity)


def render_scroll_summary(start: int, end: int, total: int) -> str:
    """Return ``  [a-b/n]`` when only part of the rows is visible."""
    if total <= 0 or end - start >= total:
        return ""
    return f"  [{start + 1}-{end}/{total}]"


def panel_content_width(width: int) -> int:
    """Width inside a bordered, padded panel."""
    return max(1, width - 4)


def panel_content_height(height: int) -> int:
    """Height inside a bordered panel."""
    return max(1, height - 2)


def fit_lines(lines: Sequence[str], height: int) -> str:
    """Cut or pad lines to exactly height rows and join them."""
    if height <= 0:
        return ""
    fitted = list(lines[:height])
    fitted.extend([""] * (height - len(fitted)))
    return "\n".join(fitted)


def split_view_heights(total: int) -> tuple[int, int]:
    """Split total height into list and detail panels, about two thirds to one."""
    if total <= 3:
        return max(1, total - 1), 1

    available = max(2, total - 1)
    list_height = max(1, available * 2 // 3)
    detail_height = max(1, available - list_height)

    if detail_height < 4:
        shift = min(list_height - 1, 4 - detail_height)
        list_height -= shift
        detail_height += shift
    if list_height < 4:
        shift = min(detail_height - 1, 4 - list_height)
        detail_height -= shift
        list_height += shift

    if list_height + detail_height > available:
        overflow = list_height + detail_height - available
        if list_height >= detail_height:
            list_height = max(1, list_height - overflow)
        else:
            detail_height = max(1, detail_height - overflow)

    return list_height, detail_height


def adaptive_split_heights(
    height: int, natural_list_content: int, natural_detail_content: int
) -> tuple[int, int]:
    """Split height between list and detail panels by their natural content.

    The detail panel keeps its natural size where possible; the list takes
    what is left. Both heights include the panel borders and add up to
    height + 2.
    """
    target = height + 2
    natural_list = natural_list_content + 2
    natural_detail = natural_detail_content + 2
    min_list = 6

    if natural_list + natural_detail <= target:
        return target - natural_detail, natural_detail

    detail_height = natural_detail
    if target - detail_height < min_list:
        detail_height = target - min_list

    list_height = max(4, target - detail_height)
    return list_height, target - list_height


def clamp_index(index: int, length: int) -> int:
    """Clamp index into [0, length); empty sequences give 0."""
    if length <= 0 or index < 0:
        return 0
    return min(index, length - 1)