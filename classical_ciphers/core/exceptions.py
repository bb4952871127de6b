from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a cipher is configured with an unusable key."""

    def __init__(self, cipher: str, key: Any, reason: str):
        super().__init__(
            f"Invalid key {key!r} for {cipher}: {reason}",
            {"cipher": cipher, "key": key},
        )


class EngineError(CipherError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher is not registered."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher '{engine_name}' not found",
            {"engine_name": engine_name},
        )
