"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from exactnum.codec import read_token
from exactnum.config import DOUBLE_PRECISION
from exactnum.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    NumericOverflowError,
    ParseError,
)
from exactnum.integer import BigInteger, gcd
from exactnum.validators import validate_precision

if TYPE_CHECKING:
    from typing import TextIO


def _to_integer(value: Any) -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger(value)
    raise InvalidInputError(value, f"Expected int or BigInteger, got {type(value).__name__}")


def _reduce(numerator: BigInteger, denominator: BigInteger) -> tuple[BigInteger, BigInteger]:
    """
    Bring a fraction to lowest terms with a positive denominator.

    Raises:
        DivisionByZeroError: If denominator is zero
    """
    if denominator.is_zero():
        raise DivisionByZeroError(numerator)

    negative = numerator.sign * denominator.sign < 0
    numerator, denominator = abs(numerator), abs(denominator)

    divisor = gcd(numerator, denominator)
    if divisor != 1:
        numerator = numerator / divisor
        denominator = denominator / divisor

    return (-numerator if negative else numerator), denominator


class Rational:
    """
    An exact fraction of two BigIntegers.

    After construction and after every operation the denominator is
    positive and shares no factor with the numerator, so equal values
    have equal fields.

    Example:
        >>> Rational(1, 2) + Rational(1, 3)
        Rational(5, 6)
        >>> Rational(4, -8)
        Rational(-1, 2)
        >>> Rational(2, 3).as_decimal(5)
        '0.66666'
    """

    __slots__ = ("_numerator", "_denominator")

    _numerator: BigInteger
    _denominator: BigInteger

    def __init__(
        self,
        numerator: int | BigInteger | Rational = 0,
        denominator: int | BigInteger = 1,
    ) -> None:
        """
        Initialize from a numerator and an optional denominator.

        Raises:
            DivisionByZeroError: If denominator is zero
            InvalidInputError: If either part has an unsupported type
        """
        if isinstance(numerator, Rational):
            numerator, denominator = (
                numerator._numerator,
                numerator._denominator * _to_integer(denominator),
            )
        self._numerator, self._denominator = _reduce(
            _to_integer(numerator), _to_integer(denominator)
        )

    @classmethod
    def _from_reduced(cls, numerator: BigInteger, denominator: BigInteger) -> Rational:
        instance = object.__new__(cls)
        instance._numerator = numerator
        instance._denominator = denominator
        return instance

    @classmethod
    def from_string(cls, text: str) -> Rational:
        """
        Parse ``"p"`` or ``"p/q"`` where p and q are signed decimal integers.

        Raises:
            ParseError: If either part is malformed
            DivisionByZeroError: If q is zero
        """
        if not isinstance(text, str):
            raise ParseError(text, f"Expected str, got {type(text).__name__}")

        numerator, slash, denominator = text.partition("/")
        if not slash:
            return cls(BigInteger.from_string(numerator))
        return cls(BigInteger.from_string(numerator), BigInteger.from_string(denominator))

    @classmethod
    def read(cls, stream: TextIO) -> Rational:
        """Read one whitespace-delimited ``p`` or ``p/q`` token from a text stream."""
        return cls.from_string(read_token(stream))

    def write(self, stream: TextIO) -> None:
        stream.write(str(self))

    @property
    def numerator(self) -> BigInteger:
        """Numerator; carries the sign of the value."""
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        """Denominator; always positive."""
        return self._denominator

    @property
    def sign(self) -> int:
        return self._numerator.sign

    def is_zero(self) -> bool:
        return self._numerator.is_zero()

    def as_decimal(self, precision: int = 0) -> str:
        """
        Render as decimal text truncated to ``precision`` fractional digits.

        Args:
            precision: Number of digits after the point; 0 renders the
                truncated integer quotient with no point

        Raises:
            OutOfRangeError: If precision is negative
        """
        validate_precision(precision)

        if precision == 0:
            return str(self._numerator / self._denominator)

        magnitude = abs(self._numerator)
        integer_part = magnitude / self._denominator
        scaled = magnitude * BigInteger("1" + "0" * precision)
        fraction = str(scaled / self._denominator)
        fraction = fraction.rjust(precision, "0")[-precision:]

        sign = "-" if self._numerator.sign < 0 else ""
        return f"{sign}{integer_part}.{fraction}"

    # Coercion

    @staticmethod
    def _coerce(value: Any) -> Rational | None:
        if isinstance(value, Rational):
            return value
        if isinstance(value, BigInteger) or (isinstance(value, int) and not isinstance(value, bool)):
            return Rational._from_reduced(_to_integer(value), BigInteger(1))
        return None

    # Arithmetic

    def __neg__(self) -> Rational:
        return Rational._from_reduced(-self._numerator, self._denominator)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational._from_reduced(abs(self._numerator), self._denominator)

    def __add__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __rsub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        """
        Multiply by the reciprocal of other.

        Raises:
            DivisionByZeroError: If other is zero
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZeroError(self)
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __rtruediv__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # Comparison

    def compare(self, other: Rational | BigInteger | int) -> int:
        """
        Three-way comparison by cross-multiplication.

        Raises:
            InvalidInputError: If other is not a Rational, BigInteger or int
        """
        coerced = self._coerce(other)
        if coerced is None:
            raise InvalidInputError(other, f"Cannot compare with {type(other).__name__}")
        return (self._numerator * coerced._denominator).compare(
            coerced._numerator * self._denominator
        )

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # Conversion

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        """
        Approximate as a native float.

        Raises:
            NumericOverflowError: If the magnitude exceeds the float range
        """
        value = float(self.as_decimal(DOUBLE_PRECISION))
        if math.isinf(value):
            raise NumericOverflowError("float conversion", self)
        return value

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"
