"""Transposition cipher engines."""

from sigaba.services.engines.transposition.matrix import MatrixOperation, MatrixTransposeCipher
from sigaba.services.engines.transposition.columnar import ColumnarCipher
from sigaba.services.engines.transposition.rail_fence import RailFenceCipher

__all__ = [
    "MatrixOperation",
    "MatrixTransposeCipher",
    "ColumnarCipher",
    "RailFenceCipher",
]
