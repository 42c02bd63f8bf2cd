"""Tests for the peek/take tokenizer primitives."""

import pytest

from address_reconcile.tokenizer import (
    AddressParseError,
    next_chunk,
    next_token,
    next_word,
    peek_chunk,
    peek_token,
    peek_word,
    skip_comma,
)


class TestNextToken:

    def test_skips_leading_whitespace(self):
        assert next_token("  1865 1/2 NE") == ("1865", " 1/2 NE")

    def test_stops_at_punctuation(self):
        assert next_token("1/2 NE") == ("1", "/2 NE")

    def test_punctuation_first_yields_empty_token(self):
        assert next_token(", APT 4") == ("", ", APT 4")

    def test_empty_input_fails(self):
        with pytest.raises(AddressParseError):
            next_token("   ")

    def test_peek_does_not_fail_on_empty(self):
        assert peek_token("") is None
        assert peek_token(" MAIN ST") == "MAIN"


class TestChunksAndWords:

    def test_chunk_keeps_punctuation(self):
        assert next_chunk(" 1/2 NE BEAVILLA") == ("1/2", "NE BEAVILLA")
        assert peek_chunk("#4 &5") == "#4"
        assert peek_chunk("  ") is None

    def test_word_stops_at_comma(self):
        assert next_word("VIEW, APT 4") == ("VIEW", ", APT 4")
        assert peek_word(", APT 4") == ""
        assert peek_word("O'BRIEN WAY") == "O'BRIEN"

    def test_skip_comma(self):
        assert skip_comma(" , APT 4") == " APT 4"
        assert skip_comma(" APT 4") == " APT 4"
