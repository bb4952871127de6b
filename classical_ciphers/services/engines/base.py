from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from classical_ciphers.core.exceptions import InvalidKeyError
from classical_ciphers.models.schemas import CipherFamily, CipherType
from classical_ciphers.services.preprocessing.normalizer import NormalizationMode, clean_input


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: int
    explanation: str


class Cipher(ABC):
    """
    Abstract base class for all ciphers.

    A cipher is constructed with its key and is immutable afterwards, so a
    single instance can serve any number of callers. Each implementation
    must provide:
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt ciphertext
    - explain(): Generate human-readable explanation
    - generate_random_key(): Produce a usable key

    Both encrypt() and decrypt() normalize their input first.
    """

    # Cipher metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    cipher_family: ClassVar[CipherFamily]
    description: ClassVar[str]
    normalization_mode: ClassVar[NormalizationMode] = NormalizationMode.ALPHANUMERIC

    def __init__(self, key: int):
        self.key = key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key})"

    @classmethod
    def clean_input(cls, text: str) -> str:
        """Normalize text using this cipher's alphabet."""
        return clean_input(text, cls.normalization_mode)

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with this cipher's key.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with this cipher's key.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Normalized plaintext
        """
        pass

    def decrypt_with_result(self, ciphertext: str) -> DecryptionResult:
        """Decrypt and bundle the plaintext with an explanation."""
        plaintext = self.decrypt(ciphertext)

        return DecryptionResult(
            plaintext=plaintext,
            key=self.key,
            explanation=self.explain(self.clean_input(ciphertext), plaintext),
        )

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The normalized ciphertext
            plaintext: The decrypted plaintext

        Returns:
            Explanation string
        """
        pass

    @classmethod
    @abstractmethod
    def generate_random_key(cls) -> int:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @classmethod
    def parse_key(cls, key: Any) -> int:
        """
        Coerce a key from an int, numeric string or {"key": ...} mapping.

        Raises:
            InvalidKeyError: If the key is not an integer
        """
        if isinstance(key, dict):
            key = key.get("key", key.get(cls.cipher_type.value))

        if isinstance(key, bool):
            raise InvalidKeyError(cls.name, key, "key must be an integer")

        try:
            return int(key)
        except (TypeError, ValueError):
            raise InvalidKeyError(cls.name, key, "key must be an integer") from None

    @classmethod
    def from_key(cls, key: Any) -> "Cipher":
        """Build a cipher from an unparsed key."""
        return cls(cls.parse_key(key))

    @classmethod
    def validate_key(cls, key: Any) -> bool:
        """
        Check whether a key would produce a working cipher.

        Returns:
            True if key is valid
        """
        try:
            cls.from_key(key)
        except InvalidKeyError:
            return False
        return True
