"""bitflip_service tests."""

from __future__ import annotations

import pytest

from bitflip.config.bconfig import MAX_INPUT_LENGTH
from bitflip.services.bitflip_service import decode_input, perform_bitflip, perform_bitsquatting
from bitflip.services.generator import InvalidInputEncoding


class TestDecodeInput:
    """decode_input() tests."""

    def test_text_mode_passthrough(self):
        """Text modes get the string unchanged."""
        assert decode_input("ab", "text") == "ab"

    def test_raw_mode_utf8(self):
        """Raw modes get UTF-8 bytes."""
        assert decode_input("é", "raw") == b"\xc3\xa9"

    def test_hex(self):
        """Hex input spells out bytes."""
        assert decode_input("c3a9", "raw", encoding="hex") == b"\xc3\xa9"

    def test_bad_hex(self):
        """Odd-length or non-hex input."""
        with pytest.raises(ValueError, match="hex"):
            decode_input("xyz", "raw", encoding="hex")

    def test_unknown_encoding(self):
        """Only utf-8 and hex."""
        with pytest.raises(ValueError):
            decode_input("ab", "raw", encoding="base64")


class TestPerformBitflip:
    """perform_bitflip() tests."""

    def test_raw_values_are_hex(self):
        """0x61 scenario rendered as hex."""
        variants = perform_bitflip("a", mode="raw")
        assert [v.value for v in variants] == ["60", "63", "65", "69", "71", "41", "21", "e1"]
        assert [v.bit for v in variants] == list(range(8))
        assert {v.offset for v in variants} == {0}
        assert {v.mode for v in variants} == {"raw"}

    def test_text_values(self):
        """Text mode yields strings."""
        variants = perform_bitflip("a", mode="text")
        assert [v.value for v in variants] == ["`", "c", "e", "i", "q", "A", "!"]

    def test_hex_input(self):
        """Bytes given as hex."""
        variants = perform_bitflip("ff", mode="raw", encoding="hex")
        assert [v.value for v in variants] == ["fe", "fd", "fb", "f7", "ef", "df", "bf", "7f"]

    def test_ascii_modes(self):
        """Seven variants per byte."""
        assert len(perform_bitflip("ab", mode="ascii-raw")) == 14
        assert len(perform_bitflip("ab", mode="ascii-text")) == 14

    def test_limit(self):
        """limit stops early."""
        variants = perform_bitflip("abc", mode="raw", limit=3)
        assert [v.value for v in variants] == ["606263", "636263", "656263"]

    def test_limit_zero(self):
        """limit=0 yields nothing."""
        assert perform_bitflip("abc", limit=0) == []

    def test_negative_limit(self):
        """Negative limit is rejected."""
        with pytest.raises(ValueError):
            perform_bitflip("abc", limit=-1)

    def test_invalid_text_input(self):
        """Invalid UTF-8 in text mode."""
        with pytest.raises(InvalidInputEncoding):
            perform_bitflip("ff", mode="text", encoding="hex")

    def test_raw_mode_accepts_invalid_utf8(self):
        """Raw mode does not care about the encoding."""
        assert len(perform_bitflip("ff", mode="raw", encoding="hex")) == 8

    def test_oversize_input(self):
        """Input above MAX_INPUT_LENGTH bytes."""
        with pytest.raises(ValueError, match="maximum"):
            perform_bitflip("a" * (MAX_INPUT_LENGTH + 1))

    def test_allowed_chars(self):
        """allowed_chars is passed through."""
        variants = perform_bitflip("ab", allowed_chars="abcdefghijklmnopqrstuvwxyz")
        assert [v.value for v in variants] == ["cb", "eb", "ib", "qb", "ac", "af", "aj", "ar"]

    def test_unknown_mode(self):
        """Unknown mode."""
        with pytest.raises(ValueError):
            perform_bitflip("ab", mode="nibble")


class TestPerformBitsquatting:
    """perform_bitsquatting() tests."""

    def test_google(self):
        """Sorted domain variants."""
        variants = perform_bitsquatting("google.com")
        assert len(variants) == 27
        assert variants[0].value == "foogle.com"
        assert variants[0].mode == "bitsquatting-domain"

    def test_limit(self):
        """limit keeps the first variants in sorted order."""
        variants = perform_bitsquatting("google.com", limit=2)
        assert [v.value for v in variants] == ["foogle.com", "eoogle.com"]

    def test_negative_limit(self):
        """Negative limit is rejected."""
        with pytest.raises(ValueError):
            perform_bitsquatting("google.com", limit=-1)

    def test_bad_domain(self):
        """Domain without a usable label."""
        with pytest.raises(ValueError):
            perform_bitsquatting("localhost")
