"""Symbol alphabets, and conversion of user inputs into validated symbols."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from typing import TypeAlias

SymbolsT: "TypeAlias" = tuple[int, ...]
# anything we know how to turn into symbols. str maps each character to its
# code point, the binary types map each byte to its value.
SequenceT: "TypeAlias" = Union[str, bytes, bytearray, memoryview, Sequence[int]]


class InvalidSymbolError(ValueError):
    def __init__(self, symbol: int, position: int, size: int) -> None:
        super().__init__(
            f"symbol {symbol!r} at position {position} is outside the alphabet "
            f"of size {size} (valid symbols are 0..{size - 1})"
        )
        self.symbol = symbol
        self.position = position
        self.size = size


@dataclass(frozen=True)
class Alphabet:
    size: int = 256

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"alphabet size must be an int, got {self.size!r}")
        if self.size < 1:
            raise ValueError(f"alphabet size must be at least 1, got {self.size}")

    def encode(self, sequence: SequenceT) -> SymbolsT:
        """Convert ``sequence`` into a tuple of symbols in this alphabet.

        Raises |InvalidSymbolError| for the first symbol outside
        ``[0, size)``, so that an out-of-range input fails fast instead of
        silently indexing past the end of a preprocessing table.
        """
        if isinstance(sequence, str):
            symbols = tuple(map(ord, sequence))
        elif isinstance(sequence, memoryview):
            symbols = tuple(sequence.tobytes())
        else:
            symbols = tuple(sequence)

        for position, symbol in enumerate(symbols):
            if isinstance(symbol, bool) or not isinstance(symbol, int):
                raise TypeError(
                    f"expected an int symbol at position {position}, got {symbol!r}"
                )
            if not 0 <= symbol < self.size:
                raise InvalidSymbolError(symbol, position, self.size)
        return symbols


DEFAULT_ALPHABET = Alphabet()
