"""Command-line interface for the search engines."""

from pathlib import Path
from typing import Optional

import click

from strsearch.alphabet import Alphabet, InvalidSymbolError
from strsearch.boyer_moore import BoyerMoore
from strsearch.engines import ENGINES, get_engine

DEMO_TEXT = "AABAACAADAABAABA"
DEMO_PATTERN = "AABA"


def format_matches(matches: list[int]) -> str:
    # this exact wording is checked by golden-output tests; don't change it.
    if matches:
        return "Pattern found at index " + ", ".join(map(str, matches))
    return "Pattern not found."


@click.group()
@click.version_option(package_name="strsearch")
def main() -> None:
    """[strsearch] finds every occurrence of a pattern in a text."""


@main.command()
@click.argument(
    "engines", nargs=-1, type=click.Choice(list(ENGINES)), metavar="[ENGINE]..."
)
def demo(engines: tuple[str, ...]) -> None:
    """Search the example text with each ENGINE (default: all of them)."""
    for i, name in enumerate(engines or tuple(ENGINES)):
        if i:
            click.echo()
        click.echo(f"Text: {DEMO_TEXT}")
        click.echo(f"Pattern: {DEMO_PATTERN}")
        click.echo(format_matches(get_engine(name)(DEMO_TEXT, DEMO_PATTERN)))


@main.command()
@click.argument("pattern")
@click.argument("text", required=False)
@click.option(
    "-f",
    "--file",
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="search the contents of this file (read as bytes) instead of TEXT",
)
@click.option(
    "-e",
    "--engine",
    type=click.Choice(list(ENGINES)),
    default="boyer-moore",
    show_default=True,
)
@click.option(
    "--alphabet-size",
    type=click.IntRange(1, None),
    default=256,
    show_default=True,
    metavar="SIZE",
    help="symbols must be in [0, SIZE)",
)
@click.option(
    "--good-suffix/--no-good-suffix",
    default=True,
    help="use the good-suffix rule as well as the bad-character rule (boyer-moore only)",
)
def find(
    pattern: str,
    text: Optional[str],
    path: Optional[Path],
    engine: str,
    alphabet_size: int,
    good_suffix: bool,
) -> None:
    """Print the offsets of every occurrence of PATTERN in TEXT."""
    if (text is None) == (path is None):
        raise click.UsageError("pass exactly one of TEXT or --file")

    alphabet = Alphabet(alphabet_size)
    haystack = text if path is None else path.read_bytes()
    needle = pattern if path is None else pattern.encode()
    try:
        if engine == "boyer-moore":
            matcher = BoyerMoore.prepare(
                needle, alphabet=alphabet, good_suffix=good_suffix
            )
            matches = matcher.search(haystack)
        else:
            matches = get_engine(engine)(haystack, needle, alphabet=alphabet)
    except InvalidSymbolError as err:
        raise click.UsageError(str(err)) from err

    click.echo(format_matches(matches))


@main.command()
@click.option(
    "-n",
    "--size",
    type=click.IntRange(1, None),
    default=100_000,
    show_default=True,
    metavar="NUM",
    help="length of the generated text",
)
@click.option("-p", "--pattern", default="ACGTACGA", show_default=True)
@click.option(
    "-r", "--repeat", type=click.IntRange(1, None), default=5, show_default=True
)
@click.option("--seed", type=int, default=0, show_default=True)
def bench(size: int, pattern: str, repeat: int, seed: int) -> None:
    """Time every engine on a random DNA-like text."""
    # pandas is slow to import, so only pay for it when benchmarking.
    from strsearch.bench import benchmark, random_text

    text = random_text(size, seed=seed)
    try:
        results = benchmark(text, pattern, repeat=repeat)
    except InvalidSymbolError as err:
        raise click.BadParameter(str(err), param_hint="'--pattern'") from err

    click.echo(f"text of {size} symbols, pattern {pattern!r}, best of {repeat}")
    click.echo(results.to_string(index=False))
