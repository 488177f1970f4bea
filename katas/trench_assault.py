"""Letter weights for the trench assault kata, with a bit-trick lookup and a timing harness."""

from __future__ import annotations

import argparse
import sys
import time

LEFT_SIDE_LETTERS = "sbpw"
RIGHT_SIDE_LETTERS = "zdqm"
RELIEF_LETTERS = " -|"

_MASK32 = 0xFFFFFFFF
_LOW7 = 0x7F7F7F7F
_SAMPLE = "sbpwzdqm -|sbpwzdqm -|sbpwzdqm -|sbpwzdqm -|"


def _pack(letters: str) -> int:
    """Pack up to four letters into a little-endian 32-bit word, zero padded."""
    return int.from_bytes(letters.encode("latin-1")[:4].ljust(4, b"\0"), "little")


_RELIEF_WORD = _pack(RELIEF_LETTERS)
_LEFT_WORD = _pack(LEFT_SIDE_LETTERS)
_RIGHT_WORD = _pack(RIGHT_SIDE_LETTERS)


def zero_byte_index(x: int) -> int:
    """Index of the lowest zero byte of a 32-bit word, or -1 if there is none."""
    x &= _MASK32
    y = ((x & _LOW7) + _LOW7) & _MASK32
    y = ~(y | x | _LOW7) & _MASK32
    if y == 0:
        return -1
    lowest_bit = (y & -y).bit_length() - 1
    return lowest_bit >> 3


def _letter_code(letter: str) -> int:
    if len(letter) != 1:
        raise ValueError(f"expected a single character, got {letter!r}")
    code = ord(letter)
    if code > 0xFF:
        raise ValueError(f"character out of range: {letter!r}")
    return code


def weight(letter: str) -> int:
    """Weight of a letter: negative for the left side, positive for the right, 0 for relief."""
    spread = (_letter_code(letter) * 0x01010101) & _MASK32
    if zero_byte_index(_RELIEF_WORD ^ spread) != -1:
        return 0
    index = zero_byte_index(_RIGHT_WORD ^ spread)
    if index != -1:
        return index + 1
    index = zero_byte_index(_LEFT_WORD ^ spread)
    if index != -1:
        return -index - 1
    raise ValueError(f"unknown letter {letter!r}")


def weight_slow(letter: str) -> int:
    """Same as weight, found by scanning the letter tables."""
    if letter in RELIEF_LETTERS and len(letter) == 1:
        return 0
    if len(letter) == 1:
        index = LEFT_SIDE_LETTERS.find(letter)
        if index != -1:
            return -(index + 1)
        index = RIGHT_SIDE_LETTERS.find(letter)
        if index != -1:
            return index + 1
    raise ValueError(f"unknown letter {letter!r}")


def profile_weight_functions(iterations: int) -> dict[str, float]:
    """Time both weight functions over a sample string; return CPU seconds per function."""
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    timings: dict[str, float] = {}
    for name, func in (("slow", weight_slow), ("fast", weight)):
        print(f"{name}:")
        start = time.process_time()
        for _ in range(iterations):
            for letter in _SAMPLE:
                func(letter)
        elapsed = time.process_time() - start
        print(f"{name}()\ttook {elapsed:.10f} seconds to execute")
        timings[name] = elapsed
    return timings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Profile the letter weight functions.")
    parser.add_argument(
        "--iterations",
        type=int,
        default=10_000_000,
        help="passes over the sample string (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    profile_weight_functions(args.iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())