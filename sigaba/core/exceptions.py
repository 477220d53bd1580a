from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when cipher construction parameters are invalid."""

    pass


class DuplicateAlphabetSymbolError(ValidationError):
    """Raised when an alphabet repeats a symbol."""

    def __init__(self, symbol: str):
        super().__init__(
            f"Duplicate symbol '{symbol}' found in alphabet",
            {"symbol": symbol},
        )


class InvalidKeywordCharacterError(ValidationError):
    """Raised when a keystream, primer or keyword uses a symbol outside the alphabet."""

    def __init__(self, parameter: str, symbol: str):
        super().__init__(
            f"The {parameter} contains '{symbol}', which is not in the alphabet",
            {"parameter": parameter, "symbol": symbol},
        )


class NoModularInverseError(ValidationError):
    """Raised when an affine factor cannot be inverted modulo the alphabet length."""

    def __init__(self, factor: int, modulus: int):
        super().__init__(
            f"Factor {factor} has no multiplicative inverse modulo {modulus}",
            {"factor": factor, "modulus": modulus},
        )


class InvalidParameterError(ValidationError):
    """Raised when a numeric or length parameter is out of range."""

    pass


class CipherNotFoundError(CipherError):
    """Raised when no cipher is registered under the requested type."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Cipher '{cipher_name}' not found",
            {"cipher_name": cipher_name},
        )
