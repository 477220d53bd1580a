import math
import random

from sigaba.models.schemas import CipherFamily, CipherType, ColumnarKey
from sigaba.services.engines.alphabet import Alphabet
from sigaba.services.engines.registry import CipherRegistry


class ColumnarCipher:
    """
    Columnar Transposition cipher.

    The plaintext is written into a grid row by row under the letters of
    the keyword, then the columns are read out in the alphabet order of
    their heading letters.

    Example with keyword "ZEBRAS" (column read order: A, B, E, R, S, Z):

    Key:    Z E B R A S
            ───────────
            W E A R E D
            I S C O V E
            R E D F L E
            E A T O N C
            E * * * * *  (random padding)

    Read columns in sorted order: EVLN* ACDT* ESEA* ROFO* DEEC* WIREE

    Repeated keyword letters are read left to right. The last row is
    completed with symbols drawn from rng, so decrypt() returns the
    plaintext followed by that padding; callers that need the exact
    length must truncate it themselves.
    """

    def __init__(self, alphabet: Alphabet, keyword: str, rng: random.Random | None = None):
        self._alphabet = alphabet
        self._keyword = alphabet.validate_key(keyword, "keyword")
        self._rng = rng or random.Random()

        ranks = alphabet.encode_text(keyword)
        # sorted() is stable, so ties keep their column position
        self._column_order = tuple(sorted(range(len(ranks)), key=ranks.__getitem__))

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def column_order(self) -> tuple[int, ...]:
        """Column positions in the order they are read out."""
        return self._column_order

    def encrypt(self, plaintext: str) -> str:
        indices = self._alphabet.encode_text(plaintext)
        n_cols = len(self._keyword)
        n_rows = math.ceil(len(indices) / n_cols)
        n_pad = n_rows * n_cols - len(indices)

        padded = indices + [self._rng.randrange(len(self._alphabet)) for _ in range(n_pad)]

        result = []
        for col in self._column_order:
            result.extend(padded[col::n_cols])

        return self._alphabet.refill(self._alphabet.decode_indices(result), plaintext)

    def decrypt(self, ciphertext: str) -> str:
        indices = self._alphabet.encode_text(ciphertext)
        n = len(indices)
        n_cols = len(self._keyword)
        n_rows = math.ceil(n / n_cols)

        # Columns left of this position are full; the rest are one row short
        num_long_cols = n - (n_rows - 1) * n_cols

        columns: list[list[int]] = [[] for _ in range(n_cols)]
        idx = 0
        for col in self._column_order:
            length = n_rows if col < num_long_cols else n_rows - 1
            columns[col] = indices[idx:idx + length]
            idx += length

        # Read row by row
        result = []
        for row in range(n_rows):
            for col in range(n_cols):
                if row < len(columns[col]):
                    result.append(columns[col][row])

        return self._alphabet.refill(self._alphabet.decode_indices(result), ciphertext)


@CipherRegistry.register(
    CipherType.COLUMNAR,
    CipherFamily.TRANSPOSITION,
    description=(
        "A transposition cipher where plaintext is written into a grid "
        "by rows, then read out by columns in an order determined by "
        "a keyword. The keyword's alphabetical order determines column sequence."
    ),
    key_model=ColumnarKey,
)
def build_columnar(alphabet: Alphabet, key: ColumnarKey) -> ColumnarCipher:
    rng = random.Random(key.seed) if key.seed is not None else None
    return ColumnarCipher(alphabet, key.keyword, rng)
