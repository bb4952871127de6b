"""Educational classical ciphers: shift (Caesar) and scytale."""

from classical_ciphers.core.exceptions import CipherError, InvalidKeyError
from classical_ciphers.services.engines.base import Cipher
from classical_ciphers.services.engines.monoalphabetic.shift import ShiftCipher
from classical_ciphers.services.engines.transposition.scytale import ScytaleCipher
from classical_ciphers.services.preprocessing.normalizer import clean_input, pad

__version__ = "0.1.0"

__all__ = [
    "Cipher",
    "CipherError",
    "InvalidKeyError",
    "ScytaleCipher",
    "ShiftCipher",
    "clean_input",
    "pad",
]
