"""Draw a spiral of ones in an n x n grid of zeros."""

from __future__ import annotations

from collections.abc import Sequence

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiralize(n: int) -> list[list[int]]:
    """Return an n x n grid holding a clockwise spiral of ones (n >= 5)."""
    if n < 5:
        raise ValueError("n must be at least 5")
    grid = [[0] * n for _ in range(n)]

    def inside(r: int, c: int) -> bool:
        return 0 <= r < n and 0 <= c < n

    row = col = direction = turns = 0
    while turns < 2:
        dr, dc = _STEPS[direction]
        next_r, next_c = row + dr, col + dc
        ahead_r, ahead_c = next_r + dr, next_c + dc

        if not inside(next_r, next_c) or (
            inside(ahead_r, ahead_c) and grid[ahead_r][ahead_c]
        ):
            direction = (direction + 1) % 4
            turns += 1
            continue

        neighbours = sum(
            grid[row + sr][col + sc]
            for sr, sc in _STEPS
            if inside(row + sr, col + sc)
        )
        if neighbours > 1:
            break

        grid[row][col] = 1
        turns = 0
        row, col = next_r, next_c

    if turns == 2:
        grid[row][col] = 1
    return grid


def format_spiral(spiral: Sequence[Sequence[int]]) -> str:
    """Render a grid as tab-terminated cells, one line per row."""
    return "".join(
        "".join(f"{value}\t" for value in row) + "\n" for row in spiral
    )