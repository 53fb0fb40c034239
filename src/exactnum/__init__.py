"""
Exact arbitrary-precision integer and rational arithmetic.

This package provides:
- BigInteger: signed integers of unbounded size in base-10**9 limbs
- Rational: fractions of BigIntegers kept in lowest terms
- Karatsuba multiplication and limb-wise long division
- Decimal text parsing and rendering
"""

import logging

from exactnum.exceptions import (
    DivisionByZero,
    DivisionByZeroError,
    ExactNumError,
    InvalidInputError,
    NumericOverflowError,
    OutOfRangeError,
    ParseError,
)
from exactnum.field import Field, one_of, zero_of
from exactnum.integer import BigInteger, bi, gcd
from exactnum.rational import Rational

__all__ = [
    "BigInteger",
    "DivisionByZero",
    "DivisionByZeroError",
    "ExactNumError",
    "Field",
    "InvalidInputError",
    "NumericOverflowError",
    "OutOfRangeError",
    "ParseError",
    "Rational",
    "bi",
    "gcd",
    "one_of",
    "zero_of",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
