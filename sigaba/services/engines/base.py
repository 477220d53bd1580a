from typing import Protocol, runtime_checkable

from sigaba.services.engines.alphabet import Alphabet


@runtime_checkable
class Cipher(Protocol):
    """
    Capability shared by every cipher in the engine.

    A cipher is fixed at construction (all validation happens there) and
    is then a pure function of its parameters and the input text:
    - encrypt(): transform plaintext into ciphertext
    - decrypt(): invert encrypt()

    Both operations act only on characters belonging to the cipher's
    alphabet; everything else keeps its position in the output. Neither
    operation raises for a successfully constructed cipher.

    Ciphers do not share a base class. Anything exposing these members
    can be registered with the CipherRegistry.
    """

    @property
    def alphabet(self) -> Alphabet:
        ...

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext.

        Args:
            plaintext: Text to encrypt, in any case and with any punctuation

        Returns:
            Ciphertext with non-alphabet characters left in place
        """
        ...

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext.

        Args:
            ciphertext: Text produced by encrypt()

        Returns:
            Plaintext with non-alphabet characters left in place
        """
        ...
