"""Monoalphabetic cipher engines."""

from sigaba.services.engines.monoalphabetic.affine import AffineCipher, mod_inverse

__all__ = [
    "AffineCipher",
    "mod_inverse",
]
