"""Wall-clock comparison of the search engines on a single input."""

import time
from collections.abc import Sequence
from random import Random

import pandas as pd

from strsearch.alphabet import DEFAULT_ALPHABET, Alphabet, SequenceT
from strsearch.engines import ENGINES, get_engine


def random_text(size: int, *, symbols: str = "ACGT", seed: int = 0) -> str:
    random = Random(seed)
    return "".join(random.choice(symbols) for _ in range(size))


def benchmark(
    text: SequenceT,
    pattern: SequenceT,
    *,
    engines: Sequence[str] = tuple(ENGINES),
    repeat: int = 5,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> pd.DataFrame:
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")
    if not engines:
        raise ValueError("no engines to benchmark")

    rows = []
    expected = None
    for name in engines:
        search = get_engine(name)
        timings = []
        for _ in range(repeat):
            start = time.perf_counter()
            matches = search(text, pattern, alphabet=alphabet)
            timings.append(time.perf_counter() - start)

        if expected is None:
            expected = (name, matches)
        elif matches != expected[1]:
            raise ValueError(
                f"engines disagree: {expected[0]} found {expected[1]}, but "
                f"{name} found {matches}"
            )
        rows.append(
            {
                "engine": name,
                "matches": len(matches),
                "best_seconds": min(timings),
                "mean_seconds": sum(timings) / len(timings),
            }
        )

    return (
        pd.DataFrame(rows, columns=["engine", "matches", "best_seconds", "mean_seconds"])
        .sort_values("best_seconds", kind="stable")
        .reset_index(drop=True)
    )
