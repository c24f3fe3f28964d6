from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT
from strsearch.borders import border_table


def kmp_search(
    text: SequenceT, pattern: SequenceT, *, alphabet: Alphabet = DEFAULT_ALPHABET
) -> list[int]:
    """
    Knuth-Morris-Pratt search, in O(n + m).

    The text is read strictly left to right. ``j`` counts how many symbols of
    the pattern currently match; on a mismatch it falls back along the border
    chain of the matched prefix instead of re-reading the text.
    """
    haystack = alphabet.encode(text)
    needle = alphabet.encode(pattern)
    n, m = len(haystack), len(needle)
    if m == 0 or m > n:
        return []

    borders = border_table(needle)
    matches = []
    j = 0
    for i, symbol in enumerate(haystack):
        while j > 0 and symbol != needle[j]:
            j = borders[j - 1]
        if symbol == needle[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            # keep the longest border matched, so overlapping occurrences are found.
            j = borders[j - 1]
    return matches
