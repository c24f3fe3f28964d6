import dataclasses

import pytest
from hypothesis import given, strategies as st
from strategies import find_all, patterns, texts_and_patterns

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet
from strsearch.boyer_moore import (
    ABSENT,
    BoyerMoore,
    bad_character_table,
    boyer_moore_search,
    good_suffix_table,
)


def brute_force_good_suffix(pattern):
    # the smallest shift d which agrees with the matched suffix pattern[i+1:]
    # (wherever the shifted pattern still overlaps it), and which doesn't put
    # pattern[i] back over the symbol that just failed to match.
    m = len(pattern)
    shifts = []
    for i in range(m):
        for d in range(1, m + 1):
            agrees = all(pattern[k - d] == pattern[k] for k in range(max(i + 1, d), m))
            if agrees and (i - d < 0 or pattern[i - d] != pattern[i]):
                shifts.append(d)
                break
    return tuple(shifts)


def encoded(pattern):
    return DEFAULT_ALPHABET.encode(pattern)


def test_bad_character_table_records_rightmost_occurrence():
    table = bad_character_table(encoded("ABCAB"), DEFAULT_ALPHABET)
    assert len(table) == 256
    assert table[ord("A")] == 3
    assert table[ord("B")] == 4
    assert table[ord("C")] == 2
    assert table[ord("Z")] == ABSENT
    assert sum(entry != ABSENT for entry in table) == 3


@given(patterns())
def test_bad_character_table_has_one_entry_per_symbol(pattern):
    alphabet = Alphabet(128)
    table = bad_character_table(alphabet.encode(pattern), alphabet)
    assert len(table) == alphabet.size
    for symbol, index in enumerate(table):
        if index == ABSENT:
            assert chr(symbol) not in pattern
        else:
            assert index == pattern.rindex(chr(symbol))


@given(patterns())
def test_good_suffix_entries_are_in_range(pattern):
    table = good_suffix_table(encoded(pattern))
    assert len(table) == len(pattern)
    assert all(1 <= shift <= len(pattern) for shift in table)


@given(patterns())
def test_good_suffix_table_is_the_strong_shift(pattern):
    assert good_suffix_table(encoded(pattern)) == brute_force_good_suffix(pattern)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("A", (1,)),
        ("AB", (2, 1)),
        ("AABA", (3, 3, 2, 1)),
        ("AAAA", (1, 2, 3, 4)),
        ("XABYAB", (6, 6, 6, 3, 6, 1)),
    ],
)
def test_good_suffix_table_examples(pattern, expected):
    assert good_suffix_table(encoded(pattern)) == expected


def test_good_suffix_table_rejects_empty_pattern():
    with pytest.raises(ValueError):
        good_suffix_table(())


@pytest.mark.parametrize("borders", [(0, 1, 0), (0, 1, 0, 1, 2)])
def test_good_suffix_table_rejects_mismatched_borders(borders):
    with pytest.raises(ValueError, match="border table"):
        good_suffix_table(encoded("AABA"), borders)


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("AABAACAADAABAABA", "AABA", [0, 9, 12]),
        ("AABAACAADAABAABA", "ZZZZ", []),
        ("AAAA", "A", [0, 1, 2, 3]),
        ("AAAA", "AA", [0, 1, 2]),
        # a reoccurring good suffix with no border; taking the shift from the
        # pattern's borders alone would jump straight past offset 3.
        ("QQQXABYAB", "XABYAB", [3]),
        ("ABCABDABCABD", "ABCABD", [0, 6]),
        ("A", "AB", []),
        ("ABC", "", []),
    ],
)
def test_boyer_moore_examples(text, pattern, expected):
    assert boyer_moore_search(text, pattern) == expected


@given(texts_and_patterns())
def test_boyer_moore_finds_exactly_the_occurrences(args):
    text, pattern = args
    assert boyer_moore_search(text, pattern) == find_all(text, pattern)


@given(texts_and_patterns())
def test_heuristics_only_affect_speed(args):
    text, pattern = args
    full = BoyerMoore.prepare(pattern)
    bad_character_only = BoyerMoore.prepare(pattern, good_suffix=False)
    assert bad_character_only.good_suffix == (1,) * len(pattern)
    assert bad_character_only.search(text) == full.search(text)


@given(texts_and_patterns())
def test_prepared_matcher_is_reusable(args):
    text, pattern = args
    matcher = BoyerMoore.prepare(pattern)
    first = matcher.search(text)
    assert matcher.search(text) == first
    assert matcher.search(text + text) == find_all(text + text, pattern)


@given(st.binary(max_size=60), st.binary(min_size=1, max_size=4))
def test_boyer_moore_on_bytes(text, pattern):
    assert boyer_moore_search(text, pattern) == find_all(text, pattern)


def test_period_is_pattern_length_minus_longest_border():
    assert BoyerMoore.prepare("AABA").period == 3
    assert BoyerMoore.prepare("ABAB").period == 2
    assert BoyerMoore.prepare("ABC").period == 3
    assert BoyerMoore.prepare("A").period == 1


def test_out_of_range_good_suffix_entries_are_rejected():
    matcher = BoyerMoore.prepare("AABA")
    with pytest.raises(ValueError):
        dataclasses.replace(matcher, good_suffix=(0, 3, 2, 1))
    with pytest.raises(ValueError):
        dataclasses.replace(matcher, good_suffix=(5, 3, 2, 1))
    with pytest.raises(ValueError):
        dataclasses.replace(matcher, good_suffix=(3, 2, 1))


def test_empty_pattern_prepares_and_matches_nowhere():
    matcher = BoyerMoore.prepare("")
    assert matcher.good_suffix == ()
    assert matcher.period == 0
    assert matcher.search("ABC") == []
