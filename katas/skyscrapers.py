"""Solver for the 7x7 skyscrapers puzzle."""

from __future__ import annotations

from collections.abc import Sequence

SIZE = 7
FULL = (1 << SIZE) - 1

TOP, RIGHT, BOTTOM, LEFT = range(4)


def possibility_mask(clue: int, distance: int) -> int:
    """Bit mask of heights allowed at `distance` cells from a clue.

    Bit k set means height k + 1 is possible. A clue of 0 allows everything.
    """
    mask = FULL
    if clue > distance + 1:
        mask >>= clue - distance - 1
    if clue == 1:
        mask = mask & ~(1 << (SIZE - 1)) if distance else 1 << (SIZE - 1)
    if clue == SIZE:
        mask = 1 << distance
    return mask


def _visible(heights: Sequence[int], partial: bool) -> int:
    """Count buildings seen from the start of the line.

    With `partial`, counting stops at the first empty cell.
    """
    count = 0
    tallest = 0
    for height in heights:
        if height == 0 and partial:
            break
        if height > tallest:
            count += 1
            tallest = height
    return count


def _line_ok(line: list[int], near: int, far: int, full: bool) -> bool:
    for clue, seq in ((near, line), (far, line[::-1])):
        if not clue:
            continue
        seen = _visible(seq, partial=not full)
        if full and seen != clue:
            return False
        if not full and seen > clue:
            return False
    return True


class _Board:
    def __init__(self, clues: Sequence[int]) -> None:
        self.grid = [[0] * SIZE for _ in range(SIZE)]
        self.row_used = [0] * SIZE
        self.col_used = [0] * SIZE
        self.clues = {
            TOP: [clues[i] for i in range(SIZE)],
            RIGHT: [clues[SIZE + i] for i in range(SIZE)],
            BOTTOM: [clues[3 * SIZE - 1 - i] for i in range(SIZE)],
            LEFT: [clues[4 * SIZE - 1 - i] for i in range(SIZE)],
        }
        self.masks = [
            [
                possibility_mask(self.clues[LEFT][y], x)
                & possibility_mask(self.clues[RIGHT][y], SIZE - 1 - x)
                & possibility_mask(self.clues[TOP][x], y)
                & possibility_mask(self.clues[BOTTOM][x], SIZE - 1 - y)
                for x in range(SIZE)
            ]
            for y in range(SIZE)
        ]

        def order(first: int, second: int) -> list[int]:
            near, far = self.clues[first], self.clues[second]
            return sorted(
                range(SIZE),
                key=lambda i: (-(bool(near[i]) + bool(far[i])), i),
            )

        self.row_order = order(LEFT, RIGHT)
        self.col_order = order(TOP, BOTTOM)

    def set_item(self, r: int, c: int, height: int) -> bool:
        bit = 1 << (height - 1)
        if self.col_used[c] & bit or self.row_used[r] & bit:
            return False
        self.col_used[c] |= bit
        self.row_used[r] |= bit
        self.grid[r][c] = height
        return True

    def clear_item(self, r: int, c: int) -> None:
        bit = 1 << (self.grid[r][c] - 1)
        self.col_used[c] &= ~bit
        self.row_used[r] &= ~bit
        self.grid[r][c] = 0

    def check_clues(self, r: int, c: int) -> bool:
        row = self.grid[r]
        if not _line_ok(
            row, self.clues[LEFT][r], self.clues[RIGHT][r], self.row_used[r] == FULL
        ):
            return False
        column = [line[c] for line in self.grid]
        return _line_ok(
            column, self.clues[TOP][c], self.clues[BOTTOM][c], self.col_used[c] == FULL
        )

    def next_value(self, ri: int, ci: int, ceiling: int) -> int:
        """Largest allowed height below `ceiling` (any height if 0), or 0."""
        if ci == SIZE:
            ri, ci = ri + 1, 0
        if ri == SIZE:
            return 0
        mask = self.masks[self.row_order[ri]][self.col_order[ci]]
        if ceiling:
            mask &= (1 << (ceiling - 1)) - 1
        return mask.bit_length()

    def solve(self, ri: int, ci: int, height: int) -> bool:
        if ci == SIZE:
            ri, ci = ri + 1, 0
        if ri == SIZE:
            return True
        r, c = self.row_order[ri], self.col_order[ci]
        while height:
            if self.set_item(r, c, height):
                if self.check_clues(r, c) and self.solve(
                    ri, ci + 1, self.next_value(ri, ci + 1, 0)
                ):
                    return True
                self.clear_item(r, c)
            height = self.next_value(ri, ci, height)
        return False


def solve_puzzle(clues: Sequence[int]) -> list[list[int]]:
    """Solve a 7x7 puzzle from 28 clues, clockwise from the top-left corner."""
    if len(clues) != 4 * SIZE:
        raise ValueError(f"expected {4 * SIZE} clues, got {len(clues)}")
    board = _Board(clues)
    if not board.solve(0, 0, board.next_value(0, 0, 0)):
        raise ValueError("puzzle has no solution")
    return [list(row) for row in board.grid]