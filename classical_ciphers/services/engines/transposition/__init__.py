"""Transposition ciphers."""

from classical_ciphers.services.engines.transposition.scytale import ScytaleCipher

__all__ = [
    "ScytaleCipher",
]
