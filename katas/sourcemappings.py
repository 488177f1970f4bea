"""Decode delta-compressed source mapping strings."""

from __future__ import annotations

from dataclasses import astuple, dataclass

_FIELDS = 5


@dataclass(frozen=True)
class Node:
    """One mapping entry; every field keeps its text form."""

    s: str = ""
    l: str = ""  # noqa: E741
    f: str = ""
    j: str = ""
    m: str = ""

    def __str__(self) -> str:
        return ":".join(astuple(self))


def _parse_node(text: str, previous: Node) -> Node:
    fields = text.split(":")
    if len(fields) > _FIELDS:
        raise ValueError(f"too many fields in node {text!r}")
    values = list(astuple(previous))
    for i, value in enumerate(fields):
        if value:
            values[i] = value
    return Node(*values)


def decompile(text: str) -> list[Node]:
    """Expand a ';'-separated mapping, filling empty fields from the previous node.

    A string without any ';' yields no nodes.
    """
    if ";" not in text:
        return []
    parts = text.split(";")
    if not parts[-1]:
        parts.pop()
    nodes: list[Node] = []
    previous = Node()
    for part in parts:
        previous = _parse_node(part, previous)
        nodes.append(previous)
    return nodes