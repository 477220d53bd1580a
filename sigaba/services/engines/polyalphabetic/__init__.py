"""Polyalphabetic cipher engines."""

from sigaba.services.engines.polyalphabetic.vigenere import PolyalphabeticCipher
from sigaba.services.engines.polyalphabetic.autokey import AutoKeyCipher

__all__ = [
    "PolyalphabeticCipher",
    "AutoKeyCipher",
]
