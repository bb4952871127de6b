import logging
import random
import string
from typing import ClassVar

from classical_ciphers.models.schemas import CipherFamily, CipherType
from classical_ciphers.services.engines.base import Cipher
from classical_ciphers.services.engines.registry import CipherRegistry
from classical_ciphers.services.preprocessing.normalizer import NormalizationMode

logger = logging.getLogger(__name__)

# ROTATIONS[n] is the alphabet rotated left by n places
ROTATIONS: tuple[str, ...] = tuple(
    string.ascii_uppercase[n:] + string.ascii_uppercase[:n] for n in range(26)
)


@CipherRegistry.register
class ShiftCipher(Cipher):
    """
    Shift (Caesar) cipher.

    Every letter is replaced by the letter a fixed number of positions further
    along the alphabet, wrapping from Z back to A. A positive key rotates
    forward, a negative key backward, and any key is taken modulo 26.
    Digits survive normalization and are passed through unshifted.
    """

    name = "Shift Cipher"
    cipher_type = CipherType.SHIFT
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    normalization_mode = NormalizationMode.ALPHANUMERIC

    ALPHABET: ClassVar[str] = string.ascii_uppercase
    ROTATIONS: ClassVar[tuple[str, ...]] = ROTATIONS

    @staticmethod
    def shift_by(n: int, ch: str) -> str:
        """
        Shift a single normalized character by n places.

        Equivalent to (ch + n) mod 26 over A-Z.
        """
        if ch in string.digits:
            return ch

        rotated = ShiftCipher.ROTATIONS[n % 26]
        return rotated[ord(ch) - ord("A")]

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext by shifting forward by the key."""
        return self._shift(self.clean_input(plaintext), self.key)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext by shifting back by the key."""
        return self._shift(self.clean_input(ciphertext), -self.key)

    @classmethod
    def generate_random_key(cls) -> int:
        """Generate a random shift (1-25, excluding 0 and 26)."""
        return random.randint(1, 25)

    def explain(self, ciphertext: str, plaintext: str) -> str:
        """Generate human-readable explanation."""
        shift = self.key % 26

        return (
            f"Shift cipher with key {self.key} (effective shift {shift}). "
            f"Each letter was shifted back {shift} positions in the alphabet "
            f"and digits were left as they were. "
            f"For example, the first ciphertext character '{ciphertext[0] if ciphertext else 'N/A'}' "
            f"becomes '{plaintext[0] if plaintext else 'N/A'}'."
        )

    def _shift(self, text: str, shift: int) -> str:
        logger.debug("Shifting %d characters by %d", len(text), shift)
        return "".join(self.shift_by(shift, ch) for ch in text)
