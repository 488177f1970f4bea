"""The n-th palindromic number, counting 0 as the first."""


def find_reverse_number(n: int) -> int:
    """Return the n-th non-negative palindrome (1-based)."""
    if n <= 0:
        raise ValueError("n must be positive")
    if n <= 10:
        return n - 1
    digits = str(n)
    if digits[0] != "1" or digits[1] == "0":
        first = int(digits[0]) - 1
        if first == 0:
            half = "9" + digits[2:]
        else:
            half = str(first) + digits[1:]
        return int(half + half[-2::-1])
    half = digits[1:]
    return int(half + half[::-1])