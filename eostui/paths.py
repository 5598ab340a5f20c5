"""Namespace path handling: cleaning, parents and user-entered navigation."""

from __future__ import annotations


def _clean(path: str) -> str:
    """Lexically clean a slash-separated path."""
    if path == "":
        return "."
    rooted = path.startswith("/")
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not rooted:
                stack.append("..")
            continue
        stack.append(part)
    joined = "/".join(stack)
    if rooted:
        return "/" + joined
    return joined or "."


def _join(*elements: str) -> str:
    parts = [element for element in elements if element]
    if not parts:
        return ""
    return _clean("/".join(parts))


def _dirname(path: str) -> str:
    head = path[: path.rfind("/") + 1]
    return _clean(head)


def clean_path(raw_path: str) -> str:
    """Return an absolute namespace path; relative input gets a leading slash."""
    if raw_path == "":
        return "/"
    if not raw_path.startswith("/"):
        return "/" + raw_path
    return _clean(raw_path)


def parent_path(current: str) -> str:
    """Return the parent directory; the root is its own parent."""
    if current == "/":
        return "/"
    return _dirname(current)


def resolve_namespace_path(current: str, text: str) -> str:
    """Resolve user input against the current path.

    Absolute input replaces the current path, relative input is joined onto
    it, and empty input keeps the current path.
    """
    trimmed = text.strip()
    if trimmed == "":
        return clean_path(current)
    if trimmed.startswith("/"):
        return clean_path(trimmed)
    base = current or "/"
    return clean_path(_join(base, trimmed))