"""Conversion between integers and Roman numerals."""

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_TABLE = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def from_roman(text: str) -> int:
    """Return the value of a Roman numeral."""
    last = 1000
    total = 0
    for letter in text:
        try:
            value = _VALUES[letter]
        except KeyError:
            raise ValueError(f"invalid Roman digit {letter!r}") from None
        if last < value:
            total -= 2 * last
        last = value
        total += value
    return total


def to_roman(number: int) -> str:
    """Return the Roman numeral for 0 <= number < 4000 (empty for 0)."""
    if not 0 <= number < 4000:
        raise ValueError("number must be in range 0..3999")
    parts = []
    for value, numeral in _TABLE:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)