"""Unit tests for decimal text conversion."""

import io

import pytest

from exactnum import ParseError
from exactnum.codec import parse_decimal, read_token, render_decimal


class TestParseDecimal:
    """Tests for the parse_decimal function."""

    def test_parse_zero(self):
        assert parse_decimal("0") == (False, [0])

    def test_parse_negative_zero_is_positive(self):
        assert parse_decimal("-0000") == (False, [0])

    def test_parse_single_limb(self):
        assert parse_decimal("123456789") == (False, [123456789])

    def test_parse_groups_from_least_significant_end(self):
        assert parse_decimal("1234567890") == (False, [234567890, 1])

    def test_parse_negative(self):
        assert parse_decimal("-1000000000") == (True, [0, 1])

    def test_parse_strips_leading_zero_limbs(self):
        assert parse_decimal("000000000000000000042") == (False, [42])

    def test_parse_rejects_garbage(self):
        with pytest.raises(ParseError):
            parse_decimal("12x4")

    def test_parse_rejects_empty(self):
        with pytest.raises(ParseError):
            parse_decimal("")


class TestRenderDecimal:
    """Tests for the render_decimal function."""

    def test_render_zero(self):
        assert render_decimal(False, [0]) == "0"

    def test_render_zero_never_signed(self):
        assert render_decimal(True, [0]) == "0"

    def test_render_pads_inner_limbs(self):
        assert render_decimal(False, [5, 0, 1]) == "1000000000000000005"

    def test_render_negative(self):
        assert render_decimal(True, [234567890, 1]) == "-1234567890"


class TestReadToken:
    """Tests for the read_token function."""

    def test_reads_first_token(self):
        assert read_token(io.StringIO("42 17")) == "42"

    def test_skips_leading_whitespace(self):
        assert read_token(io.StringIO("  \n\t-5\n")) == "-5"

    def test_consecutive_reads(self):
        stream = io.StringIO("1 22\n333")
        assert [read_token(stream) for _ in range(3)] == ["1", "22", "333"]

    def test_empty_stream_raises(self):
        with pytest.raises(ParseError):
            read_token(io.StringIO("   "))
