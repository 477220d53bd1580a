import string
from collections.abc import Iterable, Iterator

from sigaba.core.exceptions import (
    DuplicateAlphabetSymbolError,
    InvalidKeywordCharacterError,
    InvalidParameterError,
)


class Alphabet:
    """
    Ordered, duplicate-free set of symbols defining a cipher's index space.

    Every cipher works on the alphabet-relative positions of the *member*
    characters of its input. Anything outside the alphabet (spaces,
    punctuation, lowercase letters when the alphabet is uppercase, ...) is
    removed by filter() before the transform and put back in its original
    place by refill() afterwards.

    Example with alphabet "ABC":
        filter("A-b C!")       -> "AC"
        refill("CA", "A-b C!") -> "C-b A!"
    """

    __slots__ = ("_symbols", "_positions")

    def __init__(self, symbols: str):
        if not symbols:
            raise InvalidParameterError(
                "Alphabet must contain at least one symbol",
                {"parameter": "alphabet"},
            )

        positions: dict[str, int] = {}
        for idx, symbol in enumerate(symbols):
            if symbol in positions:
                raise DuplicateAlphabetSymbolError(symbol)
            positions[symbol] = idx

        self._symbols = symbols
        self._positions = positions

    @property
    def symbols(self) -> str:
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols!r})"

    def encode(self, symbol: str) -> int | None:
        """Position of a symbol, or None if it is not a member."""
        return self._positions.get(symbol)

    def decode(self, index: int) -> str:
        """Symbol at a position. Negative indices do not wrap."""
        if not 0 <= index < len(self._symbols):
            raise IndexError(
                f"Index {index} outside alphabet of length {len(self._symbols)}"
            )
        return self._symbols[index]

    def encode_text(self, text: str) -> list[int]:
        """Index stream of the member characters of text, in order."""
        return [self._positions[char] for char in text if char in self._positions]

    def decode_indices(self, indices: Iterable[int]) -> str:
        return "".join(self.decode(idx) for idx in indices)

    def filter(self, text: str) -> str:
        """Keep only member characters of text, in their original order."""
        return "".join(char for char in text if char in self._positions)

    def refill(self, transformed: str, original: str) -> str:
        """
        Re-interleave a transformed member stream with the skeleton of original.

        Non-member characters of original are copied unchanged; every member
        slot takes the next unconsumed symbol of transformed. Symbols left
        over once the skeleton is exhausted (e.g. transposition padding) are
        appended at the end. If transformed runs out first, the remaining
        member slots are dropped.
        """
        stream = iter(transformed)
        result = []

        for char in original:
            if char in self._positions:
                result.append(next(stream, ""))
            else:
                result.append(char)

        result.extend(stream)
        return "".join(result)

    def validate_key(self, key: str, parameter: str = "keyword") -> str:
        """
        Check that a keystream, primer or keyword is non-empty and made of members.

        Returns the key unchanged so it can be assigned directly.
        """
        if not key:
            raise InvalidParameterError(
                f"The {parameter} must not be empty",
                {"parameter": parameter},
            )

        for symbol in key:
            if symbol not in self._positions:
                raise InvalidKeywordCharacterError(parameter, symbol)

        return key


ENGLISH = Alphabet(string.ascii_uppercase)
KRYPTOS = Alphabet("KRYPTOSABCDEFGHIJLMNQUVWXZ")
