"""Clockwise spiral traversal of a matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def snail(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of a matrix read clockwise from the top-left corner."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    result: list[T] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result