"""Access rules: counting records and deriving the actions a record allows."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

_IDENTITY_CATEGORIES = frozenset({"user", "group", "host", "domain"})


@dataclass(frozen=True)
class AccessRecord:
    """One line of the access listing: a category, a rule and its value."""

    category: str = ""
    rule: str = ""
    value: str = ""
    raw_key: str = ""


class AccessActionKind(enum.Enum):
    """The kinds of change that can be applied to access rules."""

    ALLOW = "allow"
    UNALLOW = "unallow"
    BAN = "ban"
    UNBAN = "unban"
    SET_STALL = "set_stall"


@dataclass(frozen=True)
class AccessAction:
    """An action offered for an access record, with the command it runs."""

    kind: AccessActionKind
    label: str
    command: str = ""


_VERBS = {
    AccessActionKind.ALLOW: "allow",
    AccessActionKind.UNALLOW: "unallow",
    AccessActionKind.BAN: "ban",
    AccessActionKind.UNBAN: "unban",
}


def actions_for_record(record: AccessRecord) -> list[AccessAction]:
    """Return the direct actions available for an allowed or banned identity."""
    category = record.category.strip().lower()
    value = record.value.strip()
    if not value or category not in _IDENTITY_CATEGORIES:
        return []

    def action(kind: AccessActionKind, label: str) -> AccessAction:
        return AccessAction(kind, label, f"eos access {_VERBS[kind]} {category} {value}")

    rule = record.rule.strip().lower()
    if rule == "allowed":
        return [
            action(AccessActionKind.UNALLOW, "Unallow selected identity"),
            action(AccessActionKind.BAN, "Ban selected identity"),
        ]
    if rule == "banned":
        return [
            action(AccessActionKind.UNBAN, "Unban selected identity"),
            action(AccessActionKind.ALLOW, "Allow selected identity"),
        ]
    return []


def available_actions_label(record: AccessRecord) -> str:
    """Return the labels of the record's actions joined with `` / ``."""
    return " / ".join(action.label for action in actions_for_record(record))


def action_verb(kind: AccessActionKind) -> str:
    """Return the command verb for an action kind, or an empty string."""
    return _VERBS.get(kind, "")


def access_count(records: Iterable[AccessRecord], category: str, rule: str) -> int:
    """Count records with exactly the given category and rule."""
    return sum(1 for record in records if record.category == category and record.rule == rule)