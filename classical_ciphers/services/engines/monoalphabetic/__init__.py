"""Monoalphabetic ciphers."""

from classical_ciphers.services.engines.monoalphabetic.shift import ShiftCipher

__all__ = [
    "ShiftCipher",
]
