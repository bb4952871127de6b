import string
import unicodedata
from dataclasses import dataclass
from enum import Enum

from classical_ciphers.core.exceptions import ValidationError


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    STRICT = "strict"  # Letters only, uppercase
    ALPHANUMERIC = "alphanumeric"  # Letters and digits, uppercase


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]
    mode: NormalizationMode


class TextNormalizer:
    """
    Normalizes text before it reaches a cipher.

    Handles:
    - Unicode normalization (NFKC)
    - Case conversion
    - Removal of characters outside the cipher alphabet
    - Padding to a block length
    """

    ALPHABETS = {
        NormalizationMode.STRICT: string.ascii_uppercase,
        NormalizationMode.ALPHANUMERIC: string.ascii_uppercase + string.digits,
    }

    def clean_input(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.ALPHANUMERIC,
    ) -> str:
        """
        Uppercase text and drop everything outside the mode's alphabet.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            Normalized text string
        """
        return self.normalize_full(text, mode).text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.ALPHANUMERIC,
    ) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            NormalizedText with details about the normalization
        """
        removed_chars: dict[str, int] = {}

        normalized = self._filter_chars(
            unicodedata.normalize("NFKC", text).upper(),
            self.ALPHABETS[mode],
            removed_chars,
        )

        return NormalizedText(
            text=normalized,
            original=text,
            removed_chars=removed_chars,
            mode=mode,
        )

    def pad(self, text: str, block_size: int, filler: str) -> str:
        """
        Append filler characters until the length is a multiple of block_size.

        Args:
            text: Text to pad
            block_size: Block length the result must be a multiple of
            filler: Single padding character

        Returns:
            Padded text (unchanged if already aligned)
        """
        if block_size <= 0:
            raise ValidationError(
                f"Block size must be positive, got {block_size}",
                {"block_size": block_size},
            )
        if len(filler) != 1:
            raise ValidationError(
                f"Filler must be a single character, got {filler!r}",
                {"filler": filler},
            )

        return text + filler * (-len(text) % block_size)

    def _filter_chars(
        self,
        text: str,
        allowed: str,
        removed_chars: dict[str, int],
    ) -> str:
        """Filter text to only allowed characters, tracking removed ones."""
        result = []
        allowed_set = set(allowed)

        for char in text:
            if char in allowed_set:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)


_default_normalizer = TextNormalizer()


def clean_input(
    text: str,
    mode: NormalizationMode = NormalizationMode.ALPHANUMERIC,
) -> str:
    """Normalize text with the shared normalizer."""
    return _default_normalizer.clean_input(text, mode)


def pad(text: str, block_size: int, filler: str) -> str:
    """Pad text with the shared normalizer."""
    return _default_normalizer.pad(text, block_size, filler)
