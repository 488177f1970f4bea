"""Moves until two counter-rotating rings show the same number."""


def spinning_rings(inner_max: int, outer_max: int) -> int:
    """Return the number of moves until both rings show the same value.

    The inner ring (0..inner_max) turns down, the outer ring
    (0..outer_max) turns up, both starting at 0.
    """
    if inner_max < 0 or outer_max < 0:
        raise ValueError("ring sizes must not be negative")
    inner_n = inner_max + 1
    outer_n = outer_max + 1

    i = inner_n - 1
    o = 1 % outer_n
    moves = 1

    while i != o:
        if o >= inner_n:
            step = outer_n - o
        elif i > outer_n:
            step = i - outer_n
        elif i > o:
            step = (i - o + 1) // 2
        else:
            step = min(outer_n - o, i + 1)

        i = (i - step) % inner_n
        o = (o + step) % outer_n
        moves += step

    return moves