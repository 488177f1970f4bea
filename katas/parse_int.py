"""Convert English number words into integers."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_WORDS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
    "nineteen": 19, "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
    "hundred": 100, "thousand": 1000, "million": 1000000,
}

_SEPARATORS = re.compile(r"[ -]")


def word_to_number(word: str) -> int:
    """Return the value of a single number word."""
    try:
        return _WORDS[word]
    except KeyError:
        raise ValueError(f"unknown number word {word!r}") from None


def parse_int(text: str) -> int:
    """Parse a number written in words; unknown words such as "and" are skipped."""
    total = 0
    group = 0
    for word in _SEPARATORS.split(text):
        try:
            value = word_to_number(word)
        except ValueError:
            logger.debug("skipping unknown word %r", word)
            continue
        if value == 100:
            group *= 100
        elif value in (1000, 1000000):
            total += group * value
            group = 0
        else:
            group += value
    return total + group