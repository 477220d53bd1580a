from collections.abc import Callable

from sigaba.core.exceptions import NoModularInverseError
from sigaba.models.schemas import AffineKey, CaesarKey, CipherFamily, CipherType
from sigaba.services.engines.alphabet import ENGLISH, Alphabet
from sigaba.services.engines.registry import CipherRegistry


def mod_inverse(factor: int, modulus: int) -> int:
    """
    Smallest i in [0, modulus) with (factor * i) mod modulus == 1.

    Found by exhaustive search, which is plenty for alphabet-sized moduli.
    For modulus 1 every value is congruent to 1, so the inverse is 0.
    """
    target = 1 % modulus
    for candidate in range(modulus):
        if (factor * candidate) % modulus == target:
            return candidate
    raise NoModularInverseError(factor, modulus)


class AffineCipher:
    """
    Affine substitution over an arbitrary alphabet of length N.

    Encryption maps each member index x to E(x) = (factor * x + offset) mod N.
    Decryption uses D(y) = factor^(-1) * (y - offset) mod N, where factor^(-1)
    is the modular multiplicative inverse of factor mod N. A factor with no
    inverse is rejected at construction.

    Special cases:
    - Caesar: factor 1, offset = shift
    - Atbash: factor -1, offset -1 (reflects the alphabet, self-inverse)
    - ROT13: Caesar by 13 over A-Z (self-inverse)
    """

    def __init__(self, alphabet: Alphabet, factor: int, offset: int):
        self._alphabet = alphabet
        self._factor = factor
        self._offset = offset
        self._factor_inverse = mod_inverse(factor, len(alphabet))

    @classmethod
    def caesar(cls, alphabet: Alphabet, shift: int) -> "AffineCipher":
        return cls(alphabet, 1, shift)

    @classmethod
    def atbash(cls, alphabet: Alphabet) -> "AffineCipher":
        return cls(alphabet, -1, -1)

    @classmethod
    def rot13(cls) -> "AffineCipher":
        return cls(ENGLISH, 1, 13)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def factor(self) -> int:
        return self._factor

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def factor_inverse(self) -> int:
        return self._factor_inverse

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using E(x) = (factor * x + offset) mod N."""
        modulus = len(self._alphabet)
        return self._substitute(
            plaintext,
            lambda x: (self._factor * x + self._offset) % modulus,
        )

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using D(y) = factor^(-1) * (y - offset) mod N."""
        modulus = len(self._alphabet)
        return self._substitute(
            ciphertext,
            lambda y: (self._factor_inverse * (y - self._offset)) % modulus,
        )

    def _substitute(self, text: str, transform: Callable[[int], int]) -> str:
        indices = [transform(idx) for idx in self._alphabet.encode_text(text)]
        return self._alphabet.refill(self._alphabet.decode_indices(indices), text)


@CipherRegistry.register(
    CipherType.CAESAR,
    CipherFamily.MONOALPHABETIC,
    description=(
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    ),
    key_model=CaesarKey,
)
def build_caesar(alphabet: Alphabet, key: CaesarKey) -> AffineCipher:
    return AffineCipher.caesar(alphabet, key.shift)


@CipherRegistry.register(
    CipherType.ROT13,
    CipherFamily.MONOALPHABETIC,
    description=(
        "A special case of Caesar cipher with shift 13 over A-Z. "
        "Applying ROT13 twice returns the original text."
    ),
)
def build_rot13(alphabet: Alphabet, key: None) -> AffineCipher:
    # Fixed to A-Z by definition; the requested alphabet is ignored.
    return AffineCipher.rot13()


@CipherRegistry.register(
    CipherType.ATBASH,
    CipherFamily.MONOALPHABETIC,
    description=(
        "Reverses the alphabet: the first symbol maps to the last, "
        "the second to the second-to-last, and so on. Self-reciprocal."
    ),
)
def build_atbash(alphabet: Alphabet, key: None) -> AffineCipher:
    return AffineCipher.atbash(alphabet)


@CipherRegistry.register(
    CipherType.AFFINE,
    CipherFamily.MONOALPHABETIC,
    description=(
        "A monoalphabetic substitution cipher using E(x) = (factor*x + offset) mod N. "
        "The factor must be coprime with the alphabet length."
    ),
    key_model=AffineKey,
)
def build_affine(alphabet: Alphabet, key: AffineKey) -> AffineCipher:
    return AffineCipher(alphabet, key.factor, key.offset)
