import pytest

from katas.spiral import format_spiral, spiralize


def test_five():
    assert spiralize(5) == [
        [1, 1, 1, 1, 1],
        [0, 0, 0, 0, 1],
        [1, 1, 1, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ]


@pytest.mark.parametrize("n", range(5, 16))
def test_outer_edges(n):
    grid = spiralize(n)
    assert len(grid) == n and all(len(row) == n for row in grid)
    assert grid[0] == [1] * n
    assert grid[-1] == [1] * n
    assert [row[-1] for row in grid] == [1] * n
    assert grid[1][0] == 0


@pytest.mark.parametrize("n", range(5, 16))
def test_path_never_touches_itself(n):
    grid = spiralize(n)
    for r in range(n):
        for c in range(n):
            if not grid[r][c]:
                continue
            around = sum(
                grid[r + dr][c + dc]
                for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0))
                if 0 <= r + dr < n and 0 <= c + dc < n
            )
            assert 1 <= around <= 2


@pytest.mark.parametrize("n", [0, 4])
def test_too_small(n):
    with pytest.raises(ValueError):
        spiralize(n)


def test_format():
    assert format_spiral([[1, 0], [0, 1]]) == "1\t0\t\n0\t1\t\n"


def test_format_spiral_line_count():
    text = format_spiral(spiralize(6))
    lines = text.splitlines()
    assert len(lines) == 6
    assert lines[0] == "1\t" * 6