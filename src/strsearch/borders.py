from collections.abc import Sequence
from typing import Any


def border_table(sequence: Sequence[Any]) -> tuple[int, ...]:
    # entry i is the length of the longest proper prefix of sequence[: i + 1]
    # which is also a suffix of it, aka the KMP failure function.
    #
    # The running border only grows by one per advance of i, and every fallback
    # strictly shrinks it, so the total number of steps is O(len(sequence)).
    if len(sequence) == 0:
        raise ValueError("cannot build a border table for an empty sequence")

    table = [0] * len(sequence)
    border = 0
    i = 1
    while i < len(sequence):
        if sequence[i] == sequence[border]:
            border += 1
            table[i] = border
            i += 1
        elif border > 0:
            # don't advance i; retry against the border of the border.
            border = table[border - 1]
        else:
            table[i] = 0
            i += 1
    return tuple(table)


def border_chain(table: Sequence[int], length: int) -> list[int]:
    """All nonzero border lengths of the prefix of the given length, longest first."""
    chain = []
    border = table[length - 1] if length > 0 else 0
    while border > 0:
        chain.append(border)
        border = table[border - 1]
    return chain
