"""Rabin-Karp search with a polynomial rolling hash."""

from collections.abc import Sequence
from dataclasses import dataclass

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT


@dataclass(frozen=True)
class RollingHash:
    """
    The hash of ``s[0], ..., s[m-1]`` is ``s[0]*base**(m-1) + ... + s[m-1]``,
    reduced modulo ``modulus``.  Sliding the window one symbol to the right
    removes the leading term, multiplies by ``base``, and adds the new symbol.

    A base at least as large as the alphabet makes the hash injective before
    the reduction, so collisions only come from the modulus.
    """

    base: int = 256
    modulus: int = 1_000_000_007

    def __post_init__(self) -> None:
        if self.base < 1:
            raise ValueError(f"base must be at least 1, got {self.base}")
        if self.modulus < 2:
            raise ValueError(f"modulus must be at least 2, got {self.modulus}")

    def power(self, m: int) -> int:
        # the weight of the leading symbol in a window of length m.
        return pow(self.base, m - 1, self.modulus)

    def digest(self, symbols: Sequence[int]) -> int:
        h = 0
        for symbol in symbols:
            h = (h * self.base + symbol) % self.modulus
        return h

    def roll(self, h: int, outgoing: int, incoming: int, high: int) -> int:
        h = (h - outgoing * high) % self.modulus
        return (h * self.base + incoming) % self.modulus


DEFAULT_HASH = RollingHash()


def rabin_karp_search(
    text: SequenceT,
    pattern: SequenceT,
    *,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    rolling_hash: RollingHash = DEFAULT_HASH,
) -> list[int]:
    haystack = alphabet.encode(text)
    needle = alphabet.encode(pattern)
    n, m = len(haystack), len(needle)
    if m == 0 or m > n:
        return []

    high = rolling_hash.power(m)
    target = rolling_hash.digest(needle)
    window = rolling_hash.digest(haystack[:m])

    matches = []
    for s in range(n - m + 1):
        # equal hashes are only a hint; confirm to rule out collisions.
        if window == target and haystack[s : s + m] == needle:
            matches.append(s)
        if s < n - m:
            window = rolling_hash.roll(window, haystack[s], haystack[s + m], high)
    return matches
