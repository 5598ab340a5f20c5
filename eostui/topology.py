"""Management and QuarkDB topology: host rows, ordering and popup text."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable

from wcwidth import wcwidth

from eostui.formatting import fallback
from eostui.layout import text_width

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")
_ELLIPSIS = "…"


class TopologyHostKind(enum.Enum):
    """Which table of the topology view a host belongs to."""

    MGM = "mgm"
    QDB = "qdb"


@dataclass
class TopologyHostRow:
    """One host line of the topology view."""

    kind: TopologyHostKind
    host: str
    port: int
    role: str
    status: str
    version: str


@dataclass
class MgmRecord:
    """A management node together with the QuarkDB host that backs it."""

    host: str = ""
    port: int = 0
    role: str = ""
    status: str = ""
    eos_version: str = ""
    qdb_host: str = ""
    qdb_port: int = 0
    qdb_role: str = ""
    qdb_status: str = ""
    qdb_version: str = ""


def sort_topology_rows(rows: list[TopologyHostRow]) -> None:
    """Sort rows in place: leaders first, then by host and port."""
    rows.sort(key=lambda row: (row.role != "leader", row.host, row.port))


def mgm_rows(nodes: Iterable[MgmRecord]) -> list[TopologyHostRow]:
    """Return the sorted management-node rows, skipping nodes without a host."""
    rows = [
        TopologyHostRow(
            kind=TopologyHostKind.MGM,
            host=node.host,
            port=node.port,
            role=node.role.lower(),
            status=node.status.lower(),
            version=fallback(node.eos_version, "-"),
        )
        for node in nodes
        if node.host
    ]
    sort_topology_rows(rows)
    return rows


def qdb_rows(nodes: Iterable[MgmRecord]) -> list[TopologyHostRow]:
    """Return the sorted QuarkDB rows; role and status fall back to the MGM's."""
    rows = [
        TopologyHostRow(
            kind=TopologyHostKind.QDB,
            host=node.qdb_host,
            port=node.qdb_port,
            role=fallback(node.qdb_role, node.role).lower(),
            status=fallback(node.qdb_status, node.status).lower(),
            version=fallback(node.qdb_version, "-"),
        )
        for node in nodes
        if node.qdb_host
    ]
    sort_topology_rows(rows)
    return rows


def qdb_coup_remote_args() -> list[str]:
    """Return the command that asks a QuarkDB node to take raft leadership."""
    return ["redis-cli", "-p", "7777", "raft-attempt-coup"]


def visible_table_indices(total: int, selected: int, max_rows: int) -> list[int]:
    """Return the row indices to show, keeping selected near the middle."""
    if total <= 0 or max_rows <= 0:
        return []
    if total <= max_rows:
        return list(range(total))
    selected = max(selected, 0)
    start = max(0, selected - max_rows // 2)
    if start + max_rows > total:
        start = total - max_rows
    end = min(total, start + max_rows)
    return list(range(start, end))


def _char_width(char: str) -> int:
    return max(0, wcwidth(char))


def _hardwrap(line: str, width: int) -> list[str]:
    """Break line into pieces of at most width cells, keeping every space."""
    if width <= 0:
        return [line]
    parts: list[str] = []
    current: list[str] = []
    used = 0
    for char in line:
        cells = _char_width(char)
        if used + cells > width and current:
            parts.append("".join(current))
            current = []
            used = 0
        current.append(char)
        used += cells
    parts.append("".join(current))
    return parts


def _truncate_cells(value: str, width: int) -> str:
    """Cut value to width cells, ending in an ellipsis when it was cut."""
    if text_width(value) <= width:
        return value
    limit = width - text_width(_ELLIPSIS)
    if limit < 0:
        return ""
    kept: list[str] = []
    used = 0
    for char in value:
        cells = _char_width(char)
        if used + cells > limit:
            break
        kept.append(char)
        used += cells
    return "".join(kept) + _ELLIPSIS


def wrapped_popup_lines(text: str, width: int) -> list[str]:
    """Split text into lines of at most width cells for display in a popup.

    Escape sequences and carriage returns are removed, blank lines stay
    blank, and long lines are broken hard at the width.
    """
    out: list[str] = []
    for line in text.split("\n"):
        line = _ANSI_RE.sub("", line).rstrip("\r")
        if not line.strip():
            out.append("")
            continue
        out.extend(_truncate_cells(part, width) for part in _hardwrap(line, width))
    return out or [""]