"""Tests for Vigenère, Beaufort and Autokey ciphers."""

import pytest

from sigaba.core.exceptions import InvalidKeywordCharacterError, InvalidParameterError
from sigaba.services.engines.alphabet import ENGLISH, KRYPTOS, Alphabet
from sigaba.services.engines.polyalphabetic.autokey import AutoKeyCipher
from sigaba.services.engines.polyalphabetic.vigenere import PolyalphabeticCipher

K1_PLAIN = "BETWEEN SUBTLE SHADING AND THE ABSENCE OF LIGHT"
K1_CIPHER = "EMUFPHZ LRFAXY USDJKZL DKR NSH GNFIVJY QT QUXQB"
K2_PLAIN = "IT WAS TOTALLY INVISIBLE HOWS THAT POSSIBLE ?"
K2_CIPHER = "VF PJU DEEHZWE TZYVGWHKK QETG FQJN CEGGWHKK ?"


class TestVigenere:
    """Test suite for the Vigenère cipher."""

    def test_known_example(self):
        """Classic example: ATTACK AT DAWN with key LEMON."""
        vigenere = PolyalphabeticCipher(ENGLISH, "LEMON")
        assert vigenere.encrypt("ATTACKATDAWN") == "LXFOPVEFRNHR"
        assert vigenere.decrypt("LXFOPVEFRNHR") == "ATTACKATDAWN"

    def test_kryptos_k1(self):
        vigenere = PolyalphabeticCipher(KRYPTOS, "PALIMPSEST")
        assert vigenere.encrypt(K1_PLAIN) == K1_CIPHER
        assert vigenere.decrypt(K1_CIPHER) == K1_PLAIN

    def test_kryptos_k2(self):
        vigenere = PolyalphabeticCipher(KRYPTOS, "ABSCISSA")
        assert vigenere.encrypt(K2_PLAIN) == K2_CIPHER
        assert vigenere.decrypt(K2_CIPHER) == K2_PLAIN

    def test_variant_direction(self):
        """Decrypting plaintext gives the variant Beaufort, which encrypt undoes."""
        variant = "BV LXL XZWKCEN KGJBZAYBV BZJZ VBXI WZZZAYBV ?"
        vigenere = PolyalphabeticCipher(KRYPTOS, "ABSCISSA")
        assert vigenere.decrypt(K2_PLAIN) == variant
        assert vigenere.encrypt(variant) == K2_PLAIN

    def test_non_members_do_not_consume_key(self):
        vigenere = PolyalphabeticCipher(ENGLISH, "AB")
        assert vigenere.encrypt("A A A") == "A B A"

    def test_invalid_keystream(self):
        with pytest.raises(InvalidKeywordCharacterError):
            PolyalphabeticCipher(ENGLISH, "lemon")

        with pytest.raises(InvalidParameterError):
            PolyalphabeticCipher(ENGLISH, "")

    def test_transform_index_stream(self):
        vigenere = PolyalphabeticCipher(Alphabet("ABC"), "B")
        assert vigenere.transform([0, 1, 2]) == [1, 2, 0]
        assert vigenere.transform([1, 2, 0], decrypt=True) == [0, 1, 2]


class TestBeaufort:
    """Test suite for the Beaufort cipher."""

    def test_known_example(self):
        beaufort = PolyalphabeticCipher.beaufort(ENGLISH, "FRANCIS")
        plaintext = "IT WAS GIOVANNI VESTRI"
        ciphertext = "XYENKCKRWAAPAXBZHWU"

        assert beaufort.encrypt(plaintext).replace(" ", "") == ciphertext
        assert beaufort.decrypt(ciphertext) == plaintext.replace(" ", "")
        assert beaufort.is_beaufort

    def test_self_reciprocal(self):
        """Encryption and decryption are the same operation."""
        beaufort = PolyalphabeticCipher.beaufort(ENGLISH, "SECRET")
        text = "HELLO, WORLD!"

        assert beaufort.decrypt(text) == beaufort.encrypt(text)
        assert beaufort.encrypt(beaufort.encrypt(text)) == text


class TestAutokey:
    """Test suite for the Autokey cipher."""

    @pytest.fixture
    def plaintext(self):
        return "ATTACK AT DAWN"

    def test_plaintext_autokey(self, plaintext):
        autokey = AutoKeyCipher(ENGLISH, "QUEENLY")
        assert autokey.encrypt(plaintext) == "QNXEPV YT WTWP"
        assert autokey.decrypt("QNXEPV YT WTWP") == plaintext

    def test_ciphertext_autokey(self, plaintext):
        autokey = AutoKeyCipher(ENGLISH, "QUEENLY", autoregressive=True)
        assert autokey.encrypt(plaintext) == "QNXEPV YJ QXAC"
        assert autokey.decrypt("QNXEPV YJ QXAC") == plaintext

    def test_chunked_matches_continuous_plaintext_key(self, plaintext):
        """Encrypting with the plaintext as key: both strategies agree."""
        autokey = AutoKeyCipher(ENGLISH, "QUEENLY")
        assert autokey.chunked(plaintext) == autokey.continuous(plaintext)

    def test_chunked_matches_continuous_ciphertext_key(self):
        """Decrypting with the ciphertext as key: both strategies agree."""
        autokey = AutoKeyCipher(ENGLISH, "QUEENLY", autoregressive=True)
        ciphertext = "QNXEPV YJ QXAC"
        assert autokey.chunked(ciphertext, decrypt=True) == autokey.continuous(ciphertext, decrypt=True)

    @pytest.mark.parametrize("primer", ["K", "KEY", "LONGERTHANTHEMESSAGE"])
    @pytest.mark.parametrize("autoregressive", [False, True])
    def test_roundtrip(self, primer, autoregressive):
        autokey = AutoKeyCipher(ENGLISH, primer, autoregressive)
        text = "Meet me at NOON, by the OLD oak tree."
        assert autokey.decrypt(autokey.encrypt(text)) == text

    def test_invalid_primer(self):
        with pytest.raises(InvalidKeywordCharacterError):
            AutoKeyCipher(ENGLISH, "QUEEN LY")

        with pytest.raises(InvalidParameterError):
            AutoKeyCipher(ENGLISH, "")
