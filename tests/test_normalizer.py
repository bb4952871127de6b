"""Tests for text normalization."""

import pytest

from classical_ciphers.core.exceptions import ValidationError
from classical_ciphers.services.preprocessing.normalizer import (
    NormalizationMode,
    TextNormalizer,
    clean_input,
    pad,
)


class TestTextNormalizer:
    """Test suite for the normalizer."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_clean_input_keeps_digits_by_default(self, normalizer):
        assert normalizer.clean_input("Hello, World 42!") == "HELLOWORLD42"

    def test_clean_input_strict_drops_digits(self, normalizer):
        text = "Hello, World 42!"

        assert normalizer.clean_input(text, NormalizationMode.STRICT) == "HELLOWORLD"

    def test_clean_input_unicode(self, normalizer):
        # Fullwidth letters fold to ASCII under NFKC
        assert normalizer.clean_input("ＡＢＣ") == "ABC"

    def test_normalize_full_tracks_removed(self, normalizer):
        result = normalizer.normalize_full("a b, c", NormalizationMode.STRICT)

        assert result.text == "ABC"
        assert result.original == "a b, c"
        assert result.removed_chars == {" ": 2, ",": 1}
        assert result.mode == NormalizationMode.STRICT

    def test_pad_to_block(self, normalizer):
        assert normalizer.pad("ABCDE", 4, ".") == "ABCDE..."
        assert normalizer.pad("ABCD", 4, ".") == "ABCD"
        assert normalizer.pad("", 4, ".") == ""

    def test_pad_rejects_bad_block_size(self, normalizer):
        with pytest.raises(ValidationError):
            normalizer.pad("ABC", 0, ".")

    def test_pad_rejects_bad_filler(self, normalizer):
        with pytest.raises(ValidationError):
            normalizer.pad("ABC", 2, "..")

    def test_module_helpers(self):
        assert clean_input("x-y-z") == "XYZ"
        assert pad("XYZ", 2, "Q") == "XYZQ"
