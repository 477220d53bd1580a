import math
from enum import Enum

import numpy as np

from sigaba.core.exceptions import InvalidParameterError
from sigaba.models.schemas import CipherFamily, CipherType, RotateKey, TransposeKey
from sigaba.services.engines.alphabet import Alphabet
from sigaba.services.engines.registry import CipherRegistry


class MatrixOperation(str, Enum):
    """Permutation applied to the reshaped index matrix."""

    TRANSPOSE = "transpose"
    ROTATE_RIGHT = "rotate_right"
    ROTATE_LEFT = "rotate_left"

    @property
    def inverse(self) -> "MatrixOperation":
        if self is MatrixOperation.ROTATE_RIGHT:
            return MatrixOperation.ROTATE_LEFT
        if self is MatrixOperation.ROTATE_LEFT:
            return MatrixOperation.ROTATE_RIGHT
        return self


def transpose_matrix(matrix: np.ndarray) -> np.ndarray:
    """out[c][r] = in[r][c]."""
    return matrix.T


def rotate_matrix(matrix: np.ndarray, counter: bool = False) -> np.ndarray:
    """Rotate 90 degrees clockwise, or counter-clockwise if counter is set."""
    if counter:
        return matrix.T[::-1, :]
    return matrix.T[:, ::-1]


def apply_operation(matrix: np.ndarray, operation: MatrixOperation) -> np.ndarray:
    if operation is MatrixOperation.ROTATE_RIGHT:
        return rotate_matrix(matrix)
    if operation is MatrixOperation.ROTATE_LEFT:
        return rotate_matrix(matrix, counter=True)
    return transpose_matrix(matrix)


class MatrixTransposeCipher:
    """
    Scytale and route ciphers built on a row/column matrix.

    The member characters are written row by row into n_rows rows of
    ceil(length / n_rows) columns, the matrix is transposed or rotated,
    and the result is read back row by row.

    Example with 3 rows, transpose:

            W E A R E D I S C
            O V E R E D F L E
            E Q U I C K L Y #

    reads WOE EVQ AEU RRI EEC DDK IFL SLY CE#.

    Empty cells are padded with a sentinel index one past the alphabet
    (shown as #) which is dropped when reading back. pad_cols picks where
    the padding goes:
    - False: after the last symbol, filling out the bottom row
    - True: one pad at the end of each of the last rows, so that the
      trailing column carries the padding

    Decryption lays the ciphertext into the permuted shape, leaving holes
    exactly where encryption's padding ended up, and applies the inverse
    operation. For a transpose this is the opposite placement rule of
    pad_cols in the flipped matrix.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        n_rows: int,
        pad_cols: bool = False,
        operation: MatrixOperation = MatrixOperation.TRANSPOSE,
    ):
        if n_rows < 1:
            raise InvalidParameterError(
                f"Number of rows must be at least 1, got {n_rows}",
                {"parameter": "n_rows", "value": n_rows},
            )

        self._alphabet = alphabet
        self._n_rows = n_rows
        self._pad_cols = pad_cols
        self._operation = MatrixOperation(operation)
        self._sentinel = len(alphabet)

    @classmethod
    def scytale(cls, alphabet: Alphabet, n_rows: int, pad_cols: bool = False) -> "MatrixTransposeCipher":
        return cls(alphabet, n_rows, pad_cols, MatrixOperation.TRANSPOSE)

    @classmethod
    def rotate_right(cls, alphabet: Alphabet, n_rows: int, pad_cols: bool = False) -> "MatrixTransposeCipher":
        return cls(alphabet, n_rows, pad_cols, MatrixOperation.ROTATE_RIGHT)

    @classmethod
    def rotate_left(cls, alphabet: Alphabet, n_rows: int, pad_cols: bool = False) -> "MatrixTransposeCipher":
        return cls(alphabet, n_rows, pad_cols, MatrixOperation.ROTATE_LEFT)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def pad_cols(self) -> bool:
        return self._pad_cols

    @property
    def operation(self) -> MatrixOperation:
        return self._operation

    def encrypt(self, plaintext: str) -> str:
        indices = self._alphabet.encode_text(plaintext)
        if not indices:
            return plaintext

        filled = self._filled_cells(len(indices))
        matrix = self._fill(filled, indices)

        return self._read(apply_operation(matrix, self._operation), plaintext)

    def decrypt(self, ciphertext: str) -> str:
        indices = self._alphabet.encode_text(ciphertext)
        if not indices:
            return ciphertext

        filled = apply_operation(self._filled_cells(len(indices)), self._operation)
        matrix = self._fill(filled, indices)

        return self._read(apply_operation(matrix, self._operation.inverse), ciphertext)

    def _filled_cells(self, length: int) -> np.ndarray:
        """Boolean mask of the cells encryption fills with real symbols."""
        n_rows = self._n_rows
        n_cols = math.ceil(length / n_rows)
        n_pad = n_rows * n_cols - length

        filled = np.ones((n_rows, n_cols), dtype=bool)
        if n_pad:
            if self._pad_cols:
                filled[n_rows - n_pad:, -1] = False
            else:
                filled.flat[length:] = False

        return filled

    def _fill(self, filled: np.ndarray, indices: list[int]) -> np.ndarray:
        """Write indices row-major into the filled cells, sentinel elsewhere."""
        matrix = np.full(filled.shape, self._sentinel, dtype=np.int64)
        matrix[filled] = indices
        return matrix

    def _read(self, matrix: np.ndarray, original: str) -> str:
        flat = matrix.ravel()
        symbols = self._alphabet.decode_indices(flat[flat != self._sentinel].tolist())
        return self._alphabet.refill(symbols, original)


@CipherRegistry.register(
    CipherType.TRANSPOSE,
    CipherFamily.TRANSPOSITION,
    description=(
        "Scytale transposition: the text is written row by row into a matrix "
        "with a fixed number of rows and read back column by column."
    ),
    key_model=TransposeKey,
)
def build_transpose(alphabet: Alphabet, key: TransposeKey) -> MatrixTransposeCipher:
    return MatrixTransposeCipher.scytale(alphabet, key.n_rows, key.pad_cols)


@CipherRegistry.register(
    CipherType.ROTATE,
    CipherFamily.TRANSPOSITION,
    description=(
        "Route cipher: the text is written row by row into a matrix "
        "which is then rotated a quarter turn, clockwise unless counter is set."
    ),
    key_model=RotateKey,
)
def build_rotate(alphabet: Alphabet, key: RotateKey) -> MatrixTransposeCipher:
    if key.counter:
        return MatrixTransposeCipher.rotate_left(alphabet, key.n_rows, key.pad_cols)
    return MatrixTransposeCipher.rotate_right(alphabet, key.n_rows, key.pad_cols)
