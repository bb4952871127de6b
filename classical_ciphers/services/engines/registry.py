from typing import Any, Type

from classical_ciphers.core.exceptions import EngineNotFoundError
from classical_ciphers.models.schemas import CipherFamily, CipherType
from classical_ciphers.services.engines.base import Cipher


class CipherRegistry:
    """
    Registry for cipher classes.

    Ciphers carry their key, so the registry stores classes and builds a
    fresh instance for every key it is asked about.
    """

    _ciphers: dict[CipherType, Type[Cipher]] = {}

    @classmethod
    def register(cls, cipher_class: Type[Cipher]) -> Type[Cipher]:
        """
        Register a cipher class.

        Can be used as a decorator:
            @CipherRegistry.register
            class ShiftCipher(Cipher):
                ...

        Args:
            cipher_class: The cipher class to register

        Returns:
            The cipher class (for decorator usage)
        """
        cls._ciphers[cipher_class.cipher_type] = cipher_class
        return cipher_class

    def get_cipher_class(self, cipher_type: CipherType) -> Type[Cipher] | None:
        """
        Get the cipher class for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Cipher class or None if not found
        """
        return self._ciphers.get(cipher_type)

    def create(self, cipher_type: CipherType, key: Any) -> Cipher:
        """
        Build a cipher of the given type with the given key.

        Raises:
            EngineNotFoundError: If the cipher type is not registered
            InvalidKeyError: If the key is unusable for that cipher
        """
        cipher_class = self.get_cipher_class(cipher_type)
        if cipher_class is None:
            raise EngineNotFoundError(getattr(cipher_type, "value", str(cipher_type)))

        return cipher_class.from_key(key)

    def get_by_family(self, family: CipherFamily) -> list[Type[Cipher]]:
        """
        Get all cipher classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of cipher classes
        """
        return [
            cipher_class
            for cipher_class in self._ciphers.values()
            if cipher_class.cipher_family == family
        ]

    def get_all(self) -> list[Type[Cipher]]:
        """Get all registered cipher classes."""
        return list(self._ciphers.values())

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._ciphers.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._ciphers


# Import ciphers to trigger registration
def _load_ciphers() -> None:
    """Load all cipher modules to trigger registration."""
    from classical_ciphers.services.engines.monoalphabetic import shift  # noqa: F401
    from classical_ciphers.services.engines.transposition import scytale  # noqa: F401


# Load ciphers when module is imported
_load_ciphers()
