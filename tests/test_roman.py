import pytest

from katas.roman import from_roman, to_roman


@pytest.mark.parametrize("number, numeral", [(4, "IV"), (900, "CM"), (40, "XL")])
def test_table_entries(number, numeral):
    assert to_roman(number) == numeral
    assert from_roman(numeral) == number


def test_zero_is_empty():
    assert to_roman(0) == ""
    assert from_roman("") == 0


def test_round_trip_all_values():
    assert all(from_roman(to_roman(n)) == n for n in range(4000))


def test_numerals_are_unique():
    numerals = [to_roman(n) for n in range(1, 4000)]
    assert len(set(numerals)) == len(numerals)


@pytest.mark.parametrize("number", [-1, 4000])
def test_out_of_range(number):
    with pytest.raises(ValueError):
        to_roman(number)


def test_invalid_letter():
    with pytest.raises(ValueError):
        from_roman("MXZ")