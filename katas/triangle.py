"""Final colour of a reduced row of R/G/B tiles, via Lucas's theorem modulo 3."""

from __future__ import annotations

_COLOURS = "RGB"
_VALUES = {colour: i for i, colour in enumerate(_COLOURS)}


def _base3_digits(n: int) -> list[int]:
    digits = []
    while n > 0:
        n, digit = divmod(n, 3)
        digits.append(digit)
    return digits


def _binom_small(n: int, k: int) -> int:
    if n < k:
        return 0
    if n == 2 and k == 1:
        return 2
    return 1


def _binom_mod3(n_digits: list[int], k: int) -> int:
    k_digits = _base3_digits(k)
    product = 1
    for i, n_i in enumerate(n_digits):
        k_i = k_digits[i] if i < len(k_digits) else 0
        product = (product * _binom_small(n_i, k_i)) % 3
    return product


def triangle(row: str) -> str:
    """Colour left after repeatedly combining neighbours.

    Equal neighbours give the same colour, different ones give the third.
    """
    if not row:
        raise ValueError("row must not be empty")
    n = len(row)
    n_digits = _base3_digits(n - 1)
    total = 0
    for k, colour in enumerate(row):
        try:
            value = _VALUES[colour]
        except KeyError:
            raise ValueError(f"invalid colour {colour!r}") from None
        total = (total + _binom_mod3(n_digits, k) * value) % 3
    sign = 1 if n % 2 else -1
    return _COLOURS[(sign * total) % 3]