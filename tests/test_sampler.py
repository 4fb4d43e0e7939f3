"""
Tests for the Token Sampler
===========================
Tests for symbol and raw-byte sampling in d20/sampler.py.
"""

import pytest

from d20.charsets import resolve_alphabet
from d20.sampler import Token, TokenSampler


class TestSymbolMode:
    """Tests for sampling over an alphabet."""

    @pytest.mark.parametrize("chars", ["all", "alpha", "alpha-nosim", "alphabet",
                                       "numeric", "bin", "hex"])
    def test_length_and_membership(self, chars):
        """Test tokens have the right length and only alphabet symbols."""
        alphabet = resolve_alphabet(chars)
        sampler = TokenSampler(alphabet, 50)
        for _ in range(20):
            token = sampler.sample()
            assert not token.raw
            assert len(token.value) == 50
            assert set(token.value) <= set(alphabet)

    def test_modulo_selection(self, fixed_source):
        """Test each byte picks alphabet[b % k]."""
        sampler = TokenSampler("0123456789", 5, source=fixed_source(bytes([0, 9, 10, 255, 123])))
        # 255 % 10 == 5, 123 % 10 == 3
        assert sampler.sample().value == "09053"

    def test_custom_alphabet(self, fixed_source):
        sampler = TokenSampler("AB", 5, source=fixed_source(bytes([0, 1, 2, 3, 4])))
        assert sampler.sample().value == "ABABA"

    def test_multibyte_symbols(self):
        """Test symbols are code points, not UTF-8 bytes."""
        sampler = TokenSampler("éü€", 10)
        token = sampler.sample()
        assert len(token.value) == 10
        assert set(token.value) <= set("éü€")

    def test_reads_one_byte_per_symbol(self, fixed_source):
        source = fixed_source(b"\x01")
        TokenSampler("01", 7, source=source).sample()
        assert source.reads == [7]

    def test_empty_alphabet_rejected(self):
        with pytest.raises(ValueError):
            TokenSampler("", 5)

    def test_zero_length(self):
        assert TokenSampler("01", 0).sample().value == ""


class TestRawMode:
    """Tests for raw-byte sampling."""

    def test_length(self):
        """Test raw tokens carry exactly length bytes."""
        sampler = TokenSampler(None, 741)
        token = sampler.sample()
        assert sampler.raw
        assert token.raw
        assert len(token.to_bytes()) == 741

    def test_bytes_pass_through(self, fixed_source):
        data = bytes([0, 127, 128, 255])
        sampler = TokenSampler(None, 4, source=fixed_source(data))
        assert sampler.sample().to_bytes() == data


class TestToken:
    """Tests for Token encoding."""

    def test_symbol_token_is_utf8(self):
        assert Token("é").to_bytes() == "é".encode("utf-8")

    def test_raw_token_round_trip(self):
        data = bytes(range(256))
        assert Token.from_bytes(data).to_bytes() == data
