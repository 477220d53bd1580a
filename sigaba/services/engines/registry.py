import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sigaba.core.exceptions import CipherNotFoundError
from sigaba.models.schemas import CipherFamily, CipherKey, CipherType
from sigaba.services.engines.alphabet import ENGLISH, Alphabet
from sigaba.services.engines.base import Cipher

logger = logging.getLogger(__name__)

CipherBuilder = Callable[[Alphabet, Any], Cipher]


@dataclass(frozen=True)
class RegisteredCipher:
    """A cipher builder and its metadata."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    builder: CipherBuilder
    key_model: type[CipherKey] | None = None

    @property
    def key_fields(self) -> list[str]:
        if self.key_model is None:
            return []
        return list(self.key_model.model_fields)


class CipherRegistry:
    """
    Registry for cipher builders.

    Maps each cipher type to a function that turns an alphabet and a
    validated key into a ready-to-use cipher, so callers can select a
    cipher by name without knowing its class.
    """

    _entries: dict[CipherType, RegisteredCipher] = {}
    _loaded: bool = False

    @classmethod
    def _ensure_loaded(cls) -> None:
        # Deferred so engine modules can import the registry without a cycle.
        if not cls._loaded:
            _load_engines()
            cls._loaded = True

    @classmethod
    def register(
        cls,
        cipher_type: CipherType,
        cipher_family: CipherFamily,
        description: str,
        key_model: type[CipherKey] | None = None,
    ) -> Callable[[CipherBuilder], CipherBuilder]:
        """
        Register a cipher builder.

        Used as a decorator:
            @CipherRegistry.register(CipherType.CAESAR, CipherFamily.MONOALPHABETIC, "...", CaesarKey)
            def build_caesar(alphabet: Alphabet, key: CaesarKey) -> AffineCipher:
                ...

        Args:
            cipher_type: The type the builder answers for
            cipher_family: The family the cipher belongs to
            description: Short human-readable description
            key_model: Pydantic model validating the key, or None if keyless

        Returns:
            Decorator returning the builder unchanged
        """

        def decorator(builder: CipherBuilder) -> CipherBuilder:
            cls._entries[cipher_type] = RegisteredCipher(
                cipher_type=cipher_type,
                cipher_family=cipher_family,
                description=description,
                builder=builder,
                key_model=key_model,
            )
            return builder

        return decorator

    def get_entry(self, cipher_type: CipherType) -> RegisteredCipher | None:
        self._ensure_loaded()
        return self._entries.get(cipher_type)

    def get_entries_by_family(self, family: CipherFamily) -> list[RegisteredCipher]:
        self._ensure_loaded()
        return [
            entry for entry in self._entries.values()
            if entry.cipher_family == family
        ]

    def get_all_entries(self) -> list[RegisteredCipher]:
        self._ensure_loaded()
        return list(self._entries.values())

    def build(
        self,
        cipher_type: CipherType,
        key: dict[str, Any] | None = None,
        alphabet: Alphabet | str | None = None,
    ) -> Cipher:
        """
        Construct a cipher of the given type.

        Args:
            cipher_type: The type of cipher
            key: Raw key parameters, validated against the registered key model
            alphabet: Alphabet or alphabet string; defaults to A-Z

        Returns:
            Constructed cipher

        Raises:
            CipherNotFoundError: If nothing is registered for cipher_type
            pydantic.ValidationError: If key does not match the key model
            sigaba.core.exceptions.ValidationError: If the cipher rejects its parameters
        """
        entry = self.get_entry(cipher_type)
        if entry is None:
            raise CipherNotFoundError(cipher_type.value)

        if alphabet is None:
            alphabet = ENGLISH
        elif isinstance(alphabet, str):
            alphabet = Alphabet(alphabet)

        parsed_key = None
        if entry.key_model is not None:
            parsed_key = entry.key_model.model_validate(key or {})

        cipher = entry.builder(alphabet, parsed_key)
        logger.debug(f"Built {cipher_type.value} cipher over {len(cipher.alphabet)} symbols")
        return cipher

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        cls._ensure_loaded()
        return list(cls._entries.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        cls._ensure_loaded()
        return cipher_type in cls._entries


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from sigaba.services.engines.monoalphabetic import affine  # noqa: F401
    from sigaba.services.engines.polyalphabetic import autokey, vigenere  # noqa: F401
    from sigaba.services.engines.transposition import columnar, matrix, rail_fence  # noqa: F401

