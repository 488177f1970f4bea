import pytest

from katas.spinning_rings import spinning_rings


def _simulate(inner_max, outer_max):
    moves = 1
    while (-moves) % (inner_max + 1) != moves % (outer_max + 1):
        moves += 1
    return moves


def test_examples():
    assert spinning_rings(2, 3) == 5
    assert spinning_rings(3, 2) == 2


@pytest.mark.parametrize("inner_max", range(1, 13))
@pytest.mark.parametrize("outer_max", range(1, 13))
def test_agrees_with_step_by_step(inner_max, outer_max):
    assert spinning_rings(inner_max, outer_max) == _simulate(inner_max, outer_max)


def test_large_rings_finish_and_match():
    inner_max, outer_max = 2 ** 20, 3 ** 10
    moves = spinning_rings(inner_max, outer_max)
    assert (-moves) % (inner_max + 1) == moves % (outer_max + 1)


def test_negative_rejected():
    with pytest.raises(ValueError):
        spinning_rings(-1, 3)