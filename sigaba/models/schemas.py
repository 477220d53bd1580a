from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    ROT13 = "rot13"
    ATBASH = "atbash"
    AFFINE = "affine"
    VIGENERE = "vigenere"
    BEAUFORT = "beaufort"
    AUTOKEY = "autokey"
    TRANSPOSE = "transpose"
    ROTATE = "rotate"
    COLUMNAR = "columnar"
    RAIL_FENCE = "rail_fence"


# ============================================================================
# Key Schemas
# ============================================================================


class CipherKey(BaseModel):
    """Base for per-cipher key parameters. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class CaesarKey(CipherKey):
    shift: int


class AffineKey(CipherKey):
    factor: int
    offset: int


class KeywordKey(CipherKey):
    """Keystream for Vigenère and Beaufort."""

    keyword: str


class AutokeyKey(CipherKey):
    primer: str
    autoregressive: bool = False


class TransposeKey(CipherKey):
    n_rows: int
    pad_cols: bool = False


class RotateKey(TransposeKey):
    counter: bool = False


class ColumnarKey(CipherKey):
    keyword: str
    seed: int | None = None


class RailFenceKey(CipherKey):
    rails: int


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key: dict[str, Any] = Field(default_factory=dict)
    alphabet: str | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key: dict[str, Any] = Field(default_factory=dict)
    alphabet: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    alphabet: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    alphabet: str


class CipherInfo(BaseModel):
    """A registered cipher and the key fields it accepts."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_fields: list[str] = []


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
