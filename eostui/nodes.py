"""FST node and filesystem records, their table rows and node state toggling."""

from __future__ import annotations

from dataclasses import dataclass

from eostui.formatting import fallback, usage_percent

_ON_STATES = frozenset({"on", "online", "enabled", "active"})
_OFF_STATES = frozenset({"off", "offline", "disabled", "inactive"})


@dataclass
class FstRecord:
    """State of one FST node as reported by the node listing."""

    host: str = ""
    port: int = 0
    type: str = ""
    geotag: str = ""
    status: str = ""
    activated: str = ""
    heartbeat_delta: int = 0
    file_system_count: int = 0
    eos_version: str = ""
    disk_load: float = 0.0
    capacity_bytes: int = 0
    used_bytes: int = 0
    free_bytes: int = 0
    used_files: int = 0
    rss_bytes: int = 0
    vsize_bytes: int = 0
    thread_count: int = 0
    read_rate_mb: float = 0.0
    write_rate_mb: float = 0.0
    uptime: str = ""
    kernel: str = ""


@dataclass
class FileSystemRecord:
    """State of one filesystem as reported by the filesystem listing."""

    host: str = ""
    port: int = 0
    id: int = 0
    path: str = ""
    sched_group: str = ""
    geotag: str = ""
    boot: str = ""
    config_status: str = ""
    drain_status: str = ""
    active: str = ""
    health: str = ""
    capacity_bytes: int = 0
    used_bytes: int = 0
    free_bytes: int = 0
    used_files: int = 0
    disk_bw_mb: float = 0.0
    disk_iops: float = 0.0
    read_rate_mb: float = 0.0
    write_rate_mb: float = 0.0


def node_row(node: FstRecord) -> list[str]:
    """Return the table cells for a node, in column order.

    Columns: host, port, geotag, status, activated, heartbeatdelta, nofs,
    eos version.
    """
    return [
        node.host,
        str(node.port),
        node.geotag,
        node.status,
        node.activated,
        str(node.heartbeat_delta),
        str(node.file_system_count),
        node.eos_version,
    ]


def filesystem_row(fs: FileSystemRecord) -> list[str]:
    """Return the table cells for a filesystem, in column order.

    Columns: host, port, id, path, schedgroup, geotag, boot, configstatus,
    drain, usage %, active, health.
    """
    return [
        fs.host,
        str(fs.port),
        str(fs.id),
        fs.path,
        fs.sched_group,
        fs.geotag,
        fs.boot,
        fs.config_status,
        fs.drain_status,
        f"{usage_percent(fs.used_bytes, fs.capacity_bytes):.2f}",
        fs.active,
        fs.health,
    ]


def node_status_toggle_target(node: FstRecord) -> tuple[str, str]:
    """Return the node's current state and the state a toggle would set.

    The current state is the activation flag, or the status when that is
    empty. Raises ValueError when the state is neither on nor off.
    """
    current = fallback(node.activated, node.status).strip()
    normalized = current.lower()
    if normalized in _ON_STATES:
        return current, "off"
    if normalized in _OFF_STATES:
        return current, "on"
    raise ValueError(
        f"Cannot determine whether {node.host}:{node.port} is currently on or off"
    )