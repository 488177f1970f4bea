import pytest

from katas.palindrome import find_reverse_number


@pytest.mark.parametrize(
    "n, expected",
    [
        (198760, 9876006789),
        (61, 515),
        (9206, 8206028),
        (10230, 9230329),
    ],
)
def test_documented_examples(n, expected):
    assert find_reverse_number(n) == expected


def test_single_digits():
    assert [find_reverse_number(n) for n in range(1, 11)] == list(range(10))


def test_first_values_are_all_palindromes_in_order():
    expected = [k for k in range(2000) if str(k) == str(k)[::-1]]
    assert [find_reverse_number(n) for n in range(1, len(expected) + 1)] == expected


@pytest.mark.parametrize("n", [11, 100, 101, 1000, 12345, 99999])
def test_result_is_palindrome(n):
    text = str(find_reverse_number(n))
    assert text == text[::-1]


def test_strictly_increasing():
    values = [find_reverse_number(n) for n in range(1, 5000)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_rejected(n):
    with pytest.raises(ValueError):
        find_reverse_number(n)