from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT


def naive_search(
    text: SequenceT, pattern: SequenceT, *, alphabet: Alphabet = DEFAULT_ALPHABET
) -> list[int]:
    # tries every alignment; O(n * m) in the worst case, e.g. "AAAB" in "AAA...A".
    haystack = alphabet.encode(text)
    needle = alphabet.encode(pattern)
    n, m = len(haystack), len(needle)
    if m == 0 or m > n:
        return []

    return [
        s
        for s in range(n - m + 1)
        if all(haystack[s + j] == needle[j] for j in range(m))
    ]
