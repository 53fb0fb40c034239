"""Unit tests for validator functions."""

import pytest

from exactnum import (
    BigInteger,
    DivisionByZeroError,
    InvalidInputError,
    OutOfRangeError,
    ParseError,
)
from exactnum.validators import (
    validate_decimal_text,
    validate_integer,
    validate_karatsuba_threshold,
    validate_non_zero,
    validate_precision,
)


class TestValidateInteger:
    """Tests for validate_integer function."""

    def test_accepts_int(self):
        assert validate_integer(42) == 42

    def test_accepts_negative(self):
        assert validate_integer(-100) == -100

    def test_accepts_huge(self):
        assert validate_integer(10**100) == 10**100

    def test_rejects_float(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_integer(3.0)
        assert "float" in str(exc_info.value)

    def test_rejects_bool(self):
        with pytest.raises(InvalidInputError):
            validate_integer(True)

    def test_rejects_none(self):
        with pytest.raises(InvalidInputError):
            validate_integer(None)

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            validate_integer("1")


class TestValidateDecimalText:
    """Tests for validate_decimal_text function."""

    def test_accepts_digits(self):
        assert validate_decimal_text("123") == (False, "123")

    def test_accepts_negative(self):
        assert validate_decimal_text("-45") == (True, "45")

    def test_keeps_leading_zeros(self):
        assert validate_decimal_text("-007") == (True, "007")

    def test_rejects_empty(self):
        with pytest.raises(ParseError) as exc_info:
            validate_decimal_text("")
        assert exc_info.value.reason == "Empty text"

    def test_rejects_lone_sign(self):
        with pytest.raises(ParseError) as exc_info:
            validate_decimal_text("-")
        assert exc_info.value.reason == "No digits after sign"

    @pytest.mark.parametrize("text", ["+5", "12a", " 12", "12 ", "1.5", "--1", "1-", "٣"])
    def test_rejects_invalid_characters(self, text):
        with pytest.raises(ParseError):
            validate_decimal_text(text)

    def test_rejects_non_string(self):
        with pytest.raises(ParseError):
            validate_decimal_text(12)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_decimal_text("x")


class TestValidateNonZero:
    """Tests for validate_non_zero function."""

    def test_accepts_non_zero(self):
        divisor = BigInteger(-3)
        assert validate_non_zero(divisor) is divisor

    def test_rejects_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            validate_non_zero(BigInteger(0), BigInteger(5))
        assert exc_info.value.numerator == BigInteger(5)

    def test_is_a_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            validate_non_zero(BigInteger(0))


class TestValidatePrecision:
    """Tests for validate_precision function."""

    def test_accepts_zero(self):
        assert validate_precision(0) == 0

    def test_accepts_positive(self):
        assert validate_precision(40) == 40

    def test_rejects_negative(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_precision(-1)
        assert exc_info.value.min_val == 0

    def test_rejects_float(self):
        with pytest.raises(InvalidInputError):
            validate_precision(2.0)


class TestValidateKaratsubaThreshold:
    """Tests for validate_karatsuba_threshold function."""

    def test_accepts_minimum(self):
        assert validate_karatsuba_threshold(3) == 3

    def test_accepts_default(self):
        assert validate_karatsuba_threshold(45) == 45

    def test_rejects_below_minimum(self):
        with pytest.raises(OutOfRangeError):
            validate_karatsuba_threshold(2)
