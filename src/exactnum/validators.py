"""Input validation functions with strict type checking."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Final

from exactnum.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    OutOfRangeError,
    ParseError,
)

if TYPE_CHECKING:
    from exactnum.integer import BigInteger

LOG = logging.getLogger(__name__)

# Optional minus sign followed by at least one ASCII digit, nothing else
DECIMAL_PATTERN: Final = re.compile(r"(-?)([0-9]+)")

# Below this the Karatsuba half-sums can be as long as their parent
MIN_KARATSUBA_THRESHOLD: Final[int] = 3


def validate_integer(value: Any) -> int:
    """
    Validate that a value is a native integer.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int, or is a bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")

    return value


def validate_decimal_text(text: Any) -> tuple[bool, str]:
    """
    Validate signed decimal text and split it into sign and digit run.

    Args:
        text: The text to validate

    Returns:
        Tuple of (negative, digits) where digits may carry leading zeros

    Raises:
        ParseError: If text is not a string, is empty, has no digits,
            or contains anything besides a leading '-' and digits
    """
    if not isinstance(text, str):
        raise ParseError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        raise ParseError(text, "Empty text")

    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        LOG.debug("Rejected decimal text %r", text)
        if text == "-":
            raise ParseError(text, "No digits after sign")
        raise ParseError(text, "Invalid characters in decimal text")

    sign, digits = match.groups()
    return sign == "-", digits


def validate_non_zero(divisor: BigInteger, dividend: Any = None) -> BigInteger:
    """
    Validate that a divisor is not zero.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if divisor.is_zero():
        LOG.debug("Rejected division of %s by zero", dividend)
        raise DivisionByZeroError(dividend)

    return divisor


def validate_precision(precision: Any) -> int:
    """
    Validate a fractional digit count for decimal rendering.

    Raises:
        InvalidInputError: If precision is not an integer
        OutOfRangeError: If precision is negative
    """
    validate_integer(precision)

    if precision < 0:
        raise OutOfRangeError(precision, 0, None)

    return precision


def validate_karatsuba_threshold(threshold: Any) -> int:
    """
    Validate a Karatsuba limb-count threshold.

    Raises:
        InvalidInputError: If threshold is not an integer
        OutOfRangeError: If threshold is below MIN_KARATSUBA_THRESHOLD
    """
    validate_integer(threshold)

    if threshold < MIN_KARATSUBA_THRESHOLD:
        raise OutOfRangeError(threshold, MIN_KARATSUBA_THRESHOLD, None)

    return threshold
