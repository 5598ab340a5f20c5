"""Namespace entry records shown in the namespace browser."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class EntryKind(enum.Enum):
    """Whether a namespace entry is a file or a container (directory)."""

    FILE = "file"
    CONTAINER = "container"


@dataclass
class Entry:
    """A single namespace entry: a file or a container."""

    path: str = ""
    name: str = ""
    kind: EntryKind = EntryKind.FILE
    size: int = 0
    uid: int = 0
    gid: int = 0
    id: int = 0
    inode: int = 0
    modified_at: Optional[datetime] = None
    changed_at: Optional[datetime] = None
    files: int = 0
    containers: int = 0
    tree_size: int = 0
    mode: int = 0
    layout_id: int = 0
    locations: int = 0
    flags: int = 0
    etag: str = ""
    link_name: str = ""

    def is_container(self) -> bool:
        """Return True when the entry is a container."""
        return self.kind is EntryKind.CONTAINER