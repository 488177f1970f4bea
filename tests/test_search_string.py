import pytest

from katas.search_string import search_substr

CASES = [
    ("aa_bb_cc_dd_bb_e", "bb"),
    ("aaabbbcccc", "bbb"),
    ("aaa", "aa"),
    ("abababab", "aba"),
    ("mississippi", "issi"),
    ("abcabcabc", "cab"),
    ("xyz", "q"),
]


@pytest.mark.parametrize("text,pattern", CASES)
def test_without_overlap_matches_str_count(text, pattern):
    assert search_substr(text, pattern, False) == text.count(pattern)


@pytest.mark.parametrize("text,pattern", CASES)
def test_with_overlap_counts_every_start(text, pattern):
    starts = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert search_substr(text, pattern, True) == len(starts)


def test_overlap_example():
    assert search_substr("aaa", "aa", True) == 2
    assert search_substr("aaa", "aa", False) == 1


def test_pattern_longer_than_text():
    assert search_substr("ab", "abc", True) == 0


def test_empty_pattern_matches_each_character():
    assert search_substr("hello", "", False) == len("hello")


def test_overlap_never_less_than_without():
    text, pattern = "aaaaaaa", "aaa"
    assert search_substr(text, pattern, True) >= search_substr(text, pattern, False)