from typing import Protocol

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT
from strsearch.boyer_moore import boyer_moore_search
from strsearch.kmp import kmp_search
from strsearch.naive import naive_search
from strsearch.rabin_karp import rabin_karp_search


class SearchFunction(Protocol):
    def __call__(
        self,
        text: SequenceT,
        pattern: SequenceT,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> list[int]: ...


# every engine returns the same ascending offsets for the same inputs; they
# differ only in how fast they get there.
ENGINES: dict[str, SearchFunction] = {
    "naive": naive_search,
    "kmp": kmp_search,
    "boyer-moore": boyer_moore_search,
    "rabin-karp": rabin_karp_search,
}


def get_engine(name: str) -> SearchFunction:
    try:
        return ENGINES[name]
    except KeyError:
        known = ", ".join(map(repr, ENGINES))
        raise KeyError(f"unknown engine {name!r}, expected one of {known}") from None
