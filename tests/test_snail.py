import pytest

from katas.snail import snail


def test_three_by_three():
    assert snail([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_empty():
    assert snail([]) == []
    assert snail([[]]) == []


def test_single():
    assert snail([[7]]) == [7]


@pytest.mark.parametrize("n", range(1, 9))
def test_is_permutation_starting_with_first_row(n):
    matrix = [[r * n + c for c in range(n)] for r in range(n)]
    result = snail(matrix)
    assert sorted(result) == list(range(n * n))
    assert result[:n] == matrix[0]
    assert result[n:2 * n - 1] == [row[-1] for row in matrix[1:]]


def test_ragged_rejected():
    with pytest.raises(ValueError):
        snail([[1, 2], [3]])