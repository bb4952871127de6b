from enum import Enum
from typing import Any

from pydantic import BaseModel


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    SHIFT = "shift"
    SCYTALE = "scytale"


# Keys may arrive as a bare integer, a numeric string or {"key": ...}
KeyInput = int | str | dict[str, Any]


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key: KeyInput | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key: KeyInput


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: int


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: int
    explanation: str


class CipherInfo(BaseModel):
    """Description of a registered cipher."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
