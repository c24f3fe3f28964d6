"""Exact substring search: Boyer-Moore with reference engines to check it against."""

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, InvalidSymbolError
from strsearch.boyer_moore import BoyerMoore, boyer_moore_search
from strsearch.kmp import kmp_search
from strsearch.naive import naive_search
from strsearch.rabin_karp import DEFAULT_HASH, RollingHash, rabin_karp_search

__version__ = "26.10.01"
__all__: list[str] = [
    "DEFAULT_ALPHABET",
    "DEFAULT_HASH",
    "Alphabet",
    "BoyerMoore",
    "InvalidSymbolError",
    "RollingHash",
    "boyer_moore_search",
    "kmp_search",
    "naive_search",
    "rabin_karp_search",
]
