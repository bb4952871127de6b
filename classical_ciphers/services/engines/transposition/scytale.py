import logging
import random
from typing import ClassVar

from classical_ciphers.core.exceptions import InvalidKeyError
from classical_ciphers.models.schemas import CipherFamily, CipherType
from classical_ciphers.services.engines.base import Cipher
from classical_ciphers.services.engines.registry import CipherRegistry
from classical_ciphers.services.preprocessing.normalizer import NormalizationMode, pad

logger = logging.getLogger(__name__)


@CipherRegistry.register
class ScytaleCipher(Cipher):
    """
    Scytale transposition cipher.

    The rod has two dimensions: its length (the key, how many letters fit
    along it) and its diameter (how many turns the strip makes). Writing
    "attackatdawn" along a rod of length 4 gives a diameter of 3:

        A T T A
        C K A T
        D A W N

    Unwinding the strip reads the grid column by column: ACD TKA TAW ATN.
    When the text does not fill the last turn, the rightmost columns are
    one letter shorter and nothing is padded into the ciphertext.
    """

    name = "Scytale Cipher"
    cipher_type = CipherType.SCYTALE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where a strip of parchment is wound around "
        "a rod and written on along its length. Unwinding the strip scrambles "
        "the letters; only a rod of the same length restores them."
    )
    normalization_mode = NormalizationMode.STRICT

    # Never survives normalization, so padding can't be mistaken for text
    FILLER: ClassVar[str] = "."
    MAX_RANDOM_KEY: ClassVar[int] = 10

    def __init__(self, key: int):
        if not isinstance(key, int) or isinstance(key, bool):
            raise InvalidKeyError(self.name, key, "rod length must be an integer")
        if key <= 0:
            raise InvalidKeyError(self.name, key, "rod length must be a positive integer")
        super().__init__(key)

    @staticmethod
    def get_diameter(text: str, length: int) -> int:
        """Number of turns needed to wind text around a rod of the given length."""
        # A rod longer than the text takes a single turn
        length = min(length, max(len(text), 1))
        return len(pad(text, length, ScytaleCipher.FILLER)) // length

    @staticmethod
    def wrap_around(text: str, stride: int) -> str:
        """
        Read text off a rod with `stride` letters per turn.

        Restarting a strided walk at every offset visits each column of the
        grid in turn; walks past the first `stride` offsets only revisit
        letters already taken and are cut off by the truncation.
        """
        unwound = "".join(text[start::stride] for start in range(min(stride, len(text))))
        return unwound[: len(text)]

    @staticmethod
    def unwrap(text: str, length: int) -> str:
        """Inverse of wrap_around(text, length)."""
        if not text:
            return ""
        length = min(length, len(text))
        diameter = ScytaleCipher.get_diameter(text, length)
        full_columns = len(text) % length or length

        columns = []
        start = 0
        for col in range(length):
            height = diameter if col < full_columns else diameter - 1
            columns.append(text[start:start + height])
            start += height

        return "".join(
            column[row]
            for row in range(diameter)
            for column in columns
            if row < len(column)
        )

    def encrypt(self, plaintext: str) -> str:
        """Wind the plaintext around the rod and unwind the strip."""
        return self.wrap_around(self.clean_input(plaintext), self.key)

    def decrypt(self, ciphertext: str) -> str:
        """Wind the strip back around the rod and read along its length."""
        clean = self.clean_input(ciphertext)
        logger.debug("Unwrapping %d letters around a rod of length %d", len(clean), self.key)
        return self.unwrap(clean, self.key)

    @classmethod
    def generate_random_key(cls) -> int:
        """Generate a random rod length (2 to MAX_RANDOM_KEY)."""
        return random.randint(2, cls.MAX_RANDOM_KEY)

    def explain(self, ciphertext: str, plaintext: str) -> str:
        """Generate human-readable explanation."""
        diameter = self.get_diameter(ciphertext, self.key)
        columns = min(self.key, len(ciphertext)) or self.key

        return (
            f"Scytale with a rod length of {self.key} and a diameter of {diameter}. "
            f"The ciphertext was cut into {columns} columns of at most {diameter} letters, "
            f"then read back row by row across the columns."
        )
