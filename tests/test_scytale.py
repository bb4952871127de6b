"""Tests for the scytale cipher."""

import pytest

from classical_ciphers.core.exceptions import InvalidKeyError
from classical_ciphers.services.engines.transposition.scytale import ScytaleCipher


class TestScytaleCipher:
    """Test suite for the scytale cipher."""

    def test_zero_length_fails(self):
        with pytest.raises(InvalidKeyError):
            ScytaleCipher(0)

    def test_negative_length_fails(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            ScytaleCipher(-2)

        assert exc_info.value.details["key"] == -2

    def test_non_integer_length_fails(self):
        for key in (2.5, "3", None, True):
            with pytest.raises(InvalidKeyError):
                ScytaleCipher(key)

    def test_known_pair_wikipedia(self):
        cipher = ScytaleCipher(5)
        plaintext = "I am hurt very badly help"

        assert cipher.encrypt(plaintext) == "IRYYATBHMVAEHEDLURLP"
        assert cipher.decrypt("Iryyatbhmvaehedlurlp") == "IAMHURTVERYBADLYHELP"

    def test_known_pair_attack_at_dawn(self):
        cipher = ScytaleCipher(4)

        assert cipher.encrypt("attackatdawn") == "ACDTKATAWATN"
        assert cipher.decrypt("ACDTKATAWATN") == "ATTACKATDAWN"

    def test_short_last_turn(self):
        """Rightmost columns are one letter shorter, with no padding."""
        cipher = ScytaleCipher(4)

        assert cipher.encrypt("HELLOWORLD") == "HOLEWDLOLR"
        assert cipher.decrypt("HOLEWDLOLR") == "HELLOWORLD"

    def test_roundtrip_every_length(self):
        plaintext = "Iamhurtverybadly"

        for length in range(1, len(plaintext) + 1):
            cipher = ScytaleCipher(length)
            assert cipher.decrypt(cipher.encrypt(plaintext)) == "IAMHURTVERYBADLY"

    def test_roundtrip_uneven_lengths(self):
        for size in range(0, 30):
            plaintext = "ABCDEFGHIJKLMNOPQRSTUVWXYZABCD"[:size]
            for length in range(1, size + 3):
                cipher = ScytaleCipher(length)
                assert cipher.decrypt(cipher.encrypt(plaintext)) == plaintext

    def test_length_longer_than_text(self):
        cipher = ScytaleCipher(50)

        assert cipher.encrypt("short") == "SHORT"
        assert cipher.decrypt("SHORT") == "SHORT"

    def test_huge_length_costs_only_text_length(self):
        """A rod far longer than the text behaves like any rod longer than it."""
        cipher = ScytaleCipher(10**13)

        assert cipher.encrypt("abc") == "ABC"
        assert cipher.decrypt("abc") == "ABC"
        assert ScytaleCipher.get_diameter("ABC", 10**13) == 1
        assert ScytaleCipher.get_diameter("", 10**13) == 0

        result = cipher.decrypt_with_result("ABC")
        assert result.plaintext == "ABC"
        assert "diameter of 1" in result.explanation
        assert "cut into 3 columns" in result.explanation

    def test_length_one_is_identity(self):
        assert ScytaleCipher(1).encrypt("abc def") == "ABCDEF"

    def test_non_alphabetic_stripped(self):
        cipher = ScytaleCipher(3)

        assert cipher.encrypt("a1b2c3 d.e,f") == cipher.encrypt("abcdef")

    def test_padding_never_leaks(self):
        cipher = ScytaleCipher(4)
        plaintext = "ATTACKATDAWNX"

        decrypted = cipher.decrypt(cipher.encrypt(plaintext))

        assert ScytaleCipher.FILLER not in decrypted
        assert len(decrypted) == len(plaintext)

    def test_empty_text(self):
        cipher = ScytaleCipher(3)

        assert cipher.encrypt("") == ""
        assert cipher.decrypt("") == ""

    def test_get_diameter(self):
        assert ScytaleCipher.get_diameter("ATTACKATDAWN", 4) == 3
        assert ScytaleCipher.get_diameter("HELLOWORLD", 4) == 3
        assert ScytaleCipher.get_diameter("AB", 5) == 1
        assert ScytaleCipher.get_diameter("", 5) == 0

    def test_wrap_around_reads_columns(self):
        assert ScytaleCipher.wrap_around("ABCDEF", 2) == "ACEBDF"
        assert ScytaleCipher.wrap_around("ABCDEFG", 3) == "ADGBECF"

    def test_unwrap_inverts_wrap_around(self):
        text = "THEQUICKBROWNFOX"
        for stride in range(1, len(text) + 2):
            assert ScytaleCipher.unwrap(ScytaleCipher.wrap_around(text, stride), stride) == text

    def test_unwrap_matches_wrap_with_diameter_on_full_grid(self):
        """With a full grid, unwinding by the diameter undoes the transposition."""
        ciphertext = "ACDTKATAWATN"
        diameter = ScytaleCipher.get_diameter(ciphertext, 4)

        assert ScytaleCipher.unwrap(ciphertext, 4) == ScytaleCipher.wrap_around(ciphertext, diameter)

    def test_generate_random_key(self):
        for _ in range(50):
            key = ScytaleCipher.generate_random_key()
            assert ScytaleCipher.validate_key(key)
            assert 2 <= key <= ScytaleCipher.MAX_RANDOM_KEY

    def test_validate_key(self):
        assert ScytaleCipher.validate_key(5) is True
        assert ScytaleCipher.validate_key("5") is True
        assert ScytaleCipher.validate_key(0) is False
        assert ScytaleCipher.validate_key(-1) is False
        assert ScytaleCipher.validate_key("rod") is False

    def test_explain(self):
        result = ScytaleCipher(4).decrypt_with_result("ACDTKATAWATN")

        assert result.plaintext == "ATTACKATDAWN"
        assert "rod length of 4" in result.explanation
        assert "diameter of 3" in result.explanation
