from sigaba.models.schemas import AutokeyKey, CipherFamily, CipherType
from sigaba.services.engines.alphabet import Alphabet
from sigaba.services.engines.polyalphabetic.vigenere import PolyalphabeticCipher
from sigaba.services.engines.registry import CipherRegistry


class AutoKeyCipher:
    """
    Autokey cipher: a Vigenère whose keystream is the primer followed by the message itself.

    With autoregressive=False the key continues with the plaintext; with
    autoregressive=True it continues with the ciphertext.

    Two strategies produce the same result:
    - continuous(): one Vigenère pass keyed by primer + the input's members.
      Only possible when the key source is the input itself, i.e. the
      plaintext while encrypting, or the ciphertext while decrypting an
      autoregressive cipher.
    - chunked(): works through the input in primer-sized chunks, keying
      each chunk with the plaintext or ciphertext of the chunk before it.
      Required when the key source is the output still being produced.

    encrypt() and decrypt() pick continuous() whenever the key source is
    fully known up front, and chunked() otherwise.
    """

    def __init__(self, alphabet: Alphabet, primer: str, autoregressive: bool = False):
        self._alphabet = alphabet
        self._primer = alphabet.validate_key(primer, "primer")
        self._autoregressive = autoregressive

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def primer(self) -> str:
        return self._primer

    @property
    def autoregressive(self) -> bool:
        return self._autoregressive

    def encrypt(self, plaintext: str) -> str:
        if self._autoregressive:
            return self.chunked(plaintext, decrypt=False)
        return self.continuous(plaintext, decrypt=False)

    def decrypt(self, ciphertext: str) -> str:
        if self._autoregressive:
            return self.continuous(ciphertext, decrypt=True)
        return self.chunked(ciphertext, decrypt=True)

    def continuous(self, text: str, decrypt: bool = False) -> str:
        """Single pass keyed by the primer followed by the members of text."""
        keystream = self._primer + self._alphabet.filter(text)
        vigenere = PolyalphabeticCipher(self._alphabet, keystream)

        if decrypt:
            return vigenere.decrypt(text)
        return vigenere.encrypt(text)

    def chunked(self, text: str, decrypt: bool = False) -> str:
        """Chunk-by-chunk pass feeding each chunk's key source forward as the next key."""
        indices = self._alphabet.encode_text(text)
        chunk_size = len(self._primer)
        key = self._primer
        output: list[int] = []

        for start in range(0, len(indices), chunk_size):
            chunk = indices[start:start + chunk_size]
            produced = PolyalphabeticCipher(self._alphabet, key).transform(chunk, decrypt)
            output.extend(produced)

            plain, cipher = (produced, chunk) if decrypt else (chunk, produced)
            key = self._alphabet.decode_indices(cipher if self._autoregressive else plain)

        return self._alphabet.refill(self._alphabet.decode_indices(output), text)


@CipherRegistry.register(
    CipherType.AUTOKEY,
    CipherFamily.POLYALPHABETIC,
    description=(
        "A polyalphabetic cipher where the key is extended using the message. "
        "After the primer, the plaintext (or, autoregressively, the ciphertext) "
        "letters become the key."
    ),
    key_model=AutokeyKey,
)
def build_autokey(alphabet: Alphabet, key: AutokeyKey) -> AutoKeyCipher:
    return AutoKeyCipher(alphabet, key.primer, key.autoregressive)
