import pytest

from katas.trench_assault import (
    LEFT_SIDE_LETTERS,
    RELIEF_LETTERS,
    RIGHT_SIDE_LETTERS,
    main,
    profile_weight_functions,
    weight,
    weight_slow,
    zero_byte_index,
)


@pytest.mark.parametrize("position", range(4))
def test_zero_byte_index_finds_single_zero(position):
    word = 0xFFFFFFFF & ~(0xFF << (8 * position))
    assert zero_byte_index(word) == position


def test_zero_byte_index_without_zero():
    assert zero_byte_index(0x11223344) == -1


def test_zero_byte_index_reports_lowest_zero():
    assert zero_byte_index(0x00110000) == zero_byte_index(0xFFFFFF00)


def test_right_side_weights():
    assert [weight(c) for c in RIGHT_SIDE_LETTERS] == [1, 2, 3, 4]


def test_left_side_weights_mirror_right():
    assert [weight(c) for c in LEFT_SIDE_LETTERS] == [
        -weight(c) for c in RIGHT_SIDE_LETTERS
    ]


def test_relief_weighs_nothing():
    assert {weight(c) for c in RELIEF_LETTERS} == {0}


@pytest.mark.parametrize("letter", LEFT_SIDE_LETTERS + RIGHT_SIDE_LETTERS + RELIEF_LETTERS)
def test_fast_and_slow_agree(letter):
    assert weight(letter) == weight_slow(letter)


@pytest.mark.parametrize("func", [weight, weight_slow])
def test_unknown_letter_rejected(func):
    with pytest.raises(ValueError):
        func("x")


@pytest.mark.parametrize("func", [weight, weight_slow])
def test_multi_character_rejected(func):
    with pytest.raises(ValueError):
        func("sb")


def test_profile_reports_both_functions(capsys):
    timings = profile_weight_functions(2)
    assert set(timings) == {"slow", "fast"}
    assert all(t >= 0.0 for t in timings.values())
    out = capsys.readouterr().out
    assert "slow()\ttook" in out
    assert "fast()\ttook" in out


def test_profile_rejects_negative():
    with pytest.raises(ValueError):
        profile_weight_functions(-1)


def test_main_runs(capsys):
    assert main(["--iterations", "1"]) == 0
    assert "fast:" in capsys.readouterr().out