from sigaba.core.exceptions import InvalidParameterError
from sigaba.models.schemas import CipherFamily, CipherType, RailFenceKey
from sigaba.services.engines.alphabet import Alphabet
from sigaba.services.engines.registry import CipherRegistry


class RailFenceCipher:
    """
    Rail Fence (zigzag) cipher.

    The plaintext is written in a zigzag pattern across multiple "rails",
    then read off rail by rail.

    Example with 3 rails:
        W . . . E . . . C . . . R . . . L . . . T . . . E
        . E . R . D . S . O . E . E . F . E . A . O . C .
        . . A . . . I . . . V . . . D . . . E . . . N . .

    Ciphertext: WECRLTE ERDSOEEFEAOC AIVDEN

    One rail, or at least as many rails as there are letters, leaves the
    text unchanged.
    """

    def __init__(self, alphabet: Alphabet, rails: int):
        if rails < 1:
            raise InvalidParameterError(
                f"Number of rails must be at least 1, got {rails}",
                {"parameter": "rails", "value": rails},
            )

        self._alphabet = alphabet
        self._rails = rails

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def rails(self) -> int:
        return self._rails

    def encrypt(self, plaintext: str) -> str:
        indices = self._alphabet.encode_text(plaintext)
        result = [indices[pos] for pos in self._read_order(len(indices))]
        return self._alphabet.refill(self._alphabet.decode_indices(result), plaintext)

    def decrypt(self, ciphertext: str) -> str:
        indices = self._alphabet.encode_text(ciphertext)
        result = [0] * len(indices)
        for idx, pos in zip(indices, self._read_order(len(indices))):
            result[pos] = idx
        return self._alphabet.refill(self._alphabet.decode_indices(result), ciphertext)

    def _read_order(self, length: int) -> list[int]:
        """Plaintext positions in the order the rails are read off."""
        if self._rails == 1:
            return list(range(length))

        cycle = 2 * (self._rails - 1)
        rail_of = []
        for pos in range(length):
            rail = pos % cycle
            # Change direction at the bottom rail
            if rail >= self._rails:
                rail = cycle - rail
            rail_of.append(rail)

        return sorted(range(length), key=rail_of.__getitem__)


@CipherRegistry.register(
    CipherType.RAIL_FENCE,
    CipherFamily.TRANSPOSITION,
    description=(
        "A transposition cipher that writes plaintext in a zigzag pattern "
        "across multiple rails, then reads off each rail in sequence."
    ),
    key_model=RailFenceKey,
)
def build_rail_fence(alphabet: Alphabet, key: RailFenceKey) -> RailFenceCipher:
    return RailFenceCipher(alphabet, key.rails)
