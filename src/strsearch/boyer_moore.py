"""Boyer-Moore search with the bad-character and strong good-suffix rules.

Both rules answer the same question after a mismatch: how far can the pattern
slide along the text without sliding past an occurrence?  The bad-character
rule looks at the text symbol which failed to match, and the good-suffix rule
looks at the part of the pattern which already matched.  Each is safe on its
own, so the engine always takes the larger of the two.

All preprocessing lives on |BoyerMoore|, which is built once per pattern and
is immutable afterwards, so a prepared matcher can be reused across texts and
shared between threads.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT, SymbolsT
from strsearch.borders import border_chain, border_table

# bad-character table entry for a symbol which does not occur in the pattern.
ABSENT = -1


def bad_character_table(pattern: Sequence[int], alphabet: Alphabet) -> SymbolsT:
    table = [ABSENT] * alphabet.size
    # later occurrences overwrite earlier ones, leaving the rightmost.
    for index, symbol in enumerate(pattern):
        table[symbol] = index
    return tuple(table)


def good_suffix_table(
    pattern: Sequence[int], borders: Optional[Sequence[int]] = None
) -> SymbolsT:
    """
    Entry ``i`` is the shift to apply after ``pattern[i + 1:]`` matched the text
    but ``pattern[i]`` did not.

    Every entry starts at ``m``, which is always safe, and is then lowered to
    the smallest shift which could still line up an occurrence.  There are two
    ways that can happen:

    * a border of the whole pattern is a suffix of the matched part, so a
      shift of ``m - border`` puts the pattern's prefix over it.
    * the matched part occurs again further left in the pattern, preceded by
      a symbol other than ``pattern[i]`` (otherwise we would mismatch again
      in the same place).

    Candidates are always combined with ``min``; a larger shift than the
    smallest candidate can skip an occurrence.
    """
    m = len(pattern)
    if m == 0:
        raise ValueError("cannot build a good-suffix table for an empty pattern")
    if borders is None:
        borders = border_table(pattern)
    if len(borders) != m:
        raise ValueError(
            f"border table has {len(borders)} entries, expected one per symbol "
            f"of the pattern ({m})"
        )

    table = [m] * m

    # The chain is longest-border-first, i.e. smallest-shift-first. A border of
    # length k fits inside every matched suffix of length >= k, which are the
    # mismatch positions 0 .. m-1-k. Positions already covered by a longer
    # border have a smaller shift, so each position is written at most once.
    start = 0
    for k in border_chain(borders, m):
        for i in range(start, m - k):
            table[i] = min(table[i], m - k)
        start = max(start, m - k)

    # In the reversed pattern, a matched suffix of length g is the prefix
    # reverse[:g] and the symbol which failed to match is reverse[g]. While
    # computing the border of reverse[: q + 1], the border function walks the
    # chain of borders g of reverse[:q], stopping at the first g where
    # reverse[g] == reverse[q]. Every g visited before that is an occurrence of
    # the matched suffix, q - g positions to the left, followed by a different
    # symbol. Walking the same chains again from the finished table costs
    # exactly what building it did, O(m) overall.
    #
    # Borders skipped because the walk stopped early can't lose the minimum:
    # if the walk stops at k > g, then reverse[:g] also occurs at k - g, which
    # is followed by reverse[k] == reverse[q] != reverse[g] and so is a
    # strictly smaller shift already recorded by the time q = k was walked.
    reverse = tuple(reversed(pattern))
    reverse_borders = border_table(reverse)
    for q in range(1, m):
        g = reverse_borders[q - 1]
        while reverse[q] != reverse[g]:
            i = m - 1 - g
            table[i] = min(table[i], q - g)
            if g == 0:
                break
            g = reverse_borders[g - 1]

    return tuple(table)


@dataclass(frozen=True)
class BoyerMoore:
    pattern: SymbolsT
    alphabet: Alphabet
    borders: SymbolsT
    bad_character: SymbolsT
    good_suffix: SymbolsT

    def __post_init__(self) -> None:
        m = len(self.pattern)
        if len(self.bad_character) != self.alphabet.size:
            raise ValueError(
                f"bad-character table has {len(self.bad_character)} entries, "
                f"expected one per symbol of {self.alphabet}"
            )
        if len(self.borders) != m or len(self.good_suffix) != m:
            raise ValueError(
                f"border and good-suffix tables must have {m} entries, got "
                f"{len(self.borders)} and {len(self.good_suffix)}"
            )
        if any(not 1 <= shift <= m for shift in self.good_suffix):
            raise ValueError(
                f"good-suffix shifts must lie in [1, {m}], got {self.good_suffix}"
            )

    @classmethod
    def prepare(
        cls,
        pattern: SequenceT,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        good_suffix: bool = True,
    ) -> "BoyerMoore":
        """Build the preprocessing tables for ``pattern``.

        With ``good_suffix=False`` the good-suffix table is all ones, which
        never wins the ``max`` against the bad-character shift, giving the
        bad-character-only variant of the algorithm.
        """
        symbols = alphabet.encode(pattern)
        if not symbols:
            return cls(symbols, alphabet, (), bad_character_table((), alphabet), ())

        borders = border_table(symbols)
        return cls(
            pattern=symbols,
            alphabet=alphabet,
            borders=borders,
            bad_character=bad_character_table(symbols, alphabet),
            good_suffix=(
                good_suffix_table(symbols, borders)
                if good_suffix
                else (1,) * len(symbols)
            ),
        )

    @property
    def period(self) -> int:
        # the smallest shift which realigns the pattern with itself, and so the
        # smallest distance between two (possibly overlapping) occurrences.
        if not self.pattern:
            return 0
        return len(self.pattern) - self.borders[-1]

    def search(self, text: SequenceT) -> list[int]:
        return self._scan(self.alphabet.encode(text))

    def _scan(self, text: SymbolsT) -> list[int]:
        n = len(text)
        m = len(self.pattern)
        if m == 0 or m > n:
            return []

        pattern = self.pattern
        bad_character = self.bad_character
        good_suffix = self.good_suffix
        period = self.period

        matches = []
        s = 0
        while s <= n - m:
            j = m - 1
            while j >= 0 and pattern[j] == text[s + j]:
                j -= 1

            if j < 0:
                matches.append(s)
                # the full period even without a border: a shorter shift would
                # need an occurrence overlapping this one, i.e. a border.
                s += period
                continue

            rightmost = bad_character[text[s + j]]
            if rightmost == ABSENT:
                bad_character_shift = j + 1
            else:
                bad_character_shift = max(1, j - rightmost)
            shift = max(bad_character_shift, good_suffix[j])
            assert shift >= 1, (s, j, shift)
            s += shift

        return matches


def boyer_moore_search(
    text: SequenceT, pattern: SequenceT, *, alphabet: Alphabet = DEFAULT_ALPHABET
) -> list[int]:
    return BoyerMoore.prepare(pattern, alphabet=alphabet).search(text)
