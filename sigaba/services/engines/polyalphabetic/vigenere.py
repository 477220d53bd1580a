from collections.abc import Sequence

from sigaba.models.schemas import CipherFamily, CipherType, KeywordKey
from sigaba.services.engines.alphabet import Alphabet
from sigaba.services.engines.registry import CipherRegistry


class PolyalphabeticCipher:
    """
    Vigenère-family cipher driven by a cycling keystream.

    The i-th member character x of the text is combined with keystream
    symbol k at position i mod len(keystream):
    - Vigenère encryption: C = (x + k) mod N
    - Vigenère decryption: P = (x - k) mod N
    - Beaufort, both directions: (k - x) mod N

    Only member characters advance the keystream; spaces and punctuation
    are passed through without consuming a key position.

    Because Beaufort is self-reciprocal, encrypt() and decrypt() are the
    same operation for a Beaufort cipher. Calling decrypt() to encrypt a
    Vigenère cipher gives the "variant Beaufort".
    """

    def __init__(self, alphabet: Alphabet, keystream: str, beaufort: bool = False):
        self._alphabet = alphabet
        self._keystream = alphabet.validate_key(keystream, "keystream")
        self._key_indices = tuple(alphabet.encode_text(keystream))
        self._beaufort = beaufort

    @classmethod
    def beaufort(cls, alphabet: Alphabet, keystream: str) -> "PolyalphabeticCipher":
        return cls(alphabet, keystream, beaufort=True)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def keystream(self) -> str:
        return self._keystream

    @property
    def is_beaufort(self) -> bool:
        return self._beaufort

    def encrypt(self, plaintext: str) -> str:
        return self._substitute(plaintext, decrypt=False)

    def decrypt(self, ciphertext: str) -> str:
        return self._substitute(ciphertext, decrypt=True)

    def transform(self, indices: Sequence[int], decrypt: bool = False) -> list[int]:
        """Apply the keystream to an already-filtered index stream."""
        modulus = len(self._alphabet)
        period = len(self._key_indices)
        result = []

        for position, idx in enumerate(indices):
            shift = self._key_indices[position % period]
            if self._beaufort:
                result.append((shift - idx) % modulus)
            elif decrypt:
                result.append((idx - shift) % modulus)
            else:
                result.append((idx + shift) % modulus)

        return result

    def _substitute(self, text: str, decrypt: bool) -> str:
        indices = self.transform(self._alphabet.encode_text(text), decrypt)
        return self._alphabet.refill(self._alphabet.decode_indices(indices), text)


@CipherRegistry.register(
    CipherType.VIGENERE,
    CipherFamily.POLYALPHABETIC,
    description=(
        "A polyalphabetic substitution cipher using a keyword. "
        "Each letter is shifted by the corresponding keyword letter."
    ),
    key_model=KeywordKey,
)
def build_vigenere(alphabet: Alphabet, key: KeywordKey) -> PolyalphabeticCipher:
    return PolyalphabeticCipher(alphabet, key.keyword)


@CipherRegistry.register(
    CipherType.BEAUFORT,
    CipherFamily.POLYALPHABETIC,
    description=(
        "A reciprocal variant of Vigenère: C = (K - P) mod N. "
        "Encryption and decryption are the same operation."
    ),
    key_model=KeywordKey,
)
def build_beaufort(alphabet: Alphabet, key: KeywordKey) -> PolyalphabeticCipher:
    return PolyalphabeticCipher.beaufort(alphabet, key.keyword)
