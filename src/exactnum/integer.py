"""Arbitrary-precision signed integer built on the limb store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from exactnum.codec import parse_decimal, read_token, render_decimal
from exactnum.exceptions import InvalidInputError
from exactnum.limbs import (
    BASE,
    compare_magnitudes,
    is_zero_magnitude,
    limbs_from_int,
    limbs_to_int,
    resolve_sign,
)
from exactnum.operations import (
    divmod_magnitudes,
    multiply_by_limb,
    multiply_magnitudes,
    signed_add,
    signed_subtract,
)
from exactnum.validators import validate_integer, validate_non_zero

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO


class BigInteger:
    """
    An exact signed integer of unbounded size.

    Values are immutable: arithmetic returns new instances and compound
    assignment rebinds. ``/`` and ``%`` truncate toward zero, so the
    remainder takes the sign of the dividend.

    Example:
        >>> a = BigInteger("123456789123456789")
        >>> str(a * 987654321)
        '121932631234567900112635269'
        >>> divmod(BigInteger(-7), 2)
        (BigInteger('-3'), BigInteger('-1'))
    """

    __slots__ = ("_negative", "_limbs")

    _negative: bool
    _limbs: tuple[int, ...]

    def __init__(self, value: int | str | BigInteger = 0) -> None:
        """
        Initialize from a native integer, decimal text, or another BigInteger.

        Raises:
            ParseError: If value is malformed text
            InvalidInputError: If value has an unsupported type
        """
        if isinstance(value, BigInteger):
            negative, limbs = value._negative, value._limbs
        elif isinstance(value, str):
            negative, limbs = parse_decimal(value)
        else:
            validate_integer(value)
            negative, limbs = value < 0, limbs_from_int(value)

        self._negative = negative
        self._limbs = tuple(limbs)

    @classmethod
    def _from_parts(cls, negative: bool, limbs: Sequence[int]) -> BigInteger:
        """Wrap an already canonical magnitude without copying through parsing."""
        instance = object.__new__(cls)
        instance._negative = resolve_sign(negative, limbs)
        instance._limbs = tuple(limbs)
        return instance

    @classmethod
    def from_string(cls, text: str) -> BigInteger:
        """Parse signed decimal text."""
        negative, limbs = parse_decimal(text)
        return cls._from_parts(negative, limbs)

    @classmethod
    def read(cls, stream: TextIO) -> BigInteger:
        """Read one whitespace-delimited decimal token from a text stream."""
        return cls.from_string(read_token(stream))

    def write(self, stream: TextIO) -> None:
        stream.write(str(self))

    @property
    def limbs(self) -> tuple[int, ...]:
        """Magnitude limbs, least significant first."""
        return self._limbs

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.is_zero():
            return 0
        return -1 if self._negative else 1

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._limbs)

    def increment(self) -> BigInteger:
        return self + 1

    def decrement(self) -> BigInteger:
        return self - 1

    def compare(self, other: BigInteger | int) -> int:
        """
        Three-way comparison consistent with numeric value.

        Returns:
            -1, 0 or 1 as self is smaller than, equal to, or larger than other

        Raises:
            InvalidInputError: If other is not a BigInteger or int
        """
        coerced = self._coerce(other)
        if coerced is None:
            raise InvalidInputError(other, f"Cannot compare with {type(other).__name__}")

        if self._negative != coerced._negative:
            return -1 if self._negative else 1

        order = compare_magnitudes(self._limbs, coerced._limbs)
        return -order if self._negative else order

    def divmod(self, other: BigInteger) -> tuple[BigInteger, BigInteger]:
        """
        Truncating division with remainder.

        Properties:
            - Reconstruction: quotient * other + remainder == self
            - Remainder is zero or has the sign of self, and |remainder| < |other|

        Raises:
            DivisionByZeroError: If other is zero
        """
        validate_non_zero(other, self)

        quotient_limbs, _ = divmod_magnitudes(self._limbs, other._limbs)
        quotient = BigInteger._from_parts(self._negative != other._negative, quotient_limbs)
        return quotient, self - quotient * other

    # Coercion

    @staticmethod
    def _coerce(value: Any) -> BigInteger | None:
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger(value)
        return None

    # Arithmetic

    def __neg__(self) -> BigInteger:
        return BigInteger._from_parts(not self._negative, self._limbs)

    def __pos__(self) -> BigInteger:
        return self

    def __abs__(self) -> BigInteger:
        return BigInteger._from_parts(False, self._limbs)

    def __add__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return BigInteger._from_parts(
            *signed_add(self._negative, list(self._limbs), other._negative, list(other._limbs))
        )

    __radd__ = __add__

    def __sub__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return BigInteger._from_parts(
            *signed_subtract(self._negative, list(self._limbs), other._negative, list(other._limbs))
        )

    def __rsub__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> BigInteger:
        if isinstance(other, int) and not isinstance(other, bool) and -BASE < other < BASE:
            return BigInteger._from_parts(
                self._negative != (other < 0), multiply_by_limb(self._limbs, abs(other))
            )

        other = self._coerce(other)
        if other is None:
            return NotImplemented

        negative = self._negative != other._negative
        if other._limbs == (1,):
            return BigInteger._from_parts(negative, self._limbs)
        if self._limbs == (1,):
            return BigInteger._from_parts(negative, other._limbs)
        return BigInteger._from_parts(negative, multiply_magnitudes(self._limbs, other._limbs))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)[0]

    def __rtruediv__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)[0]

    def __mod__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)[1]

    def __rmod__(self, other: Any) -> BigInteger:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)[1]

    def __divmod__(self, other: Any) -> tuple[BigInteger, BigInteger]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other: Any) -> tuple[BigInteger, BigInteger]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divmod(self)

    # Comparison

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

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
        return hash(int(self))

    # Conversion

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        magnitude = limbs_to_int(self._limbs)
        return -magnitude if self._negative else magnitude

    def __str__(self) -> str:
        return render_decimal(self._negative, self._limbs)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"


def bi(text: str) -> BigInteger:
    """Build a BigInteger from a decimal literal, e.g. ``bi("12345678901234567890")``."""
    return BigInteger.from_string(text)


def gcd(left: BigInteger, right: BigInteger) -> BigInteger:
    """
    Greatest common divisor by the Euclidean algorithm.

    Properties:
        - gcd(a, 0) == |a|
        - gcd(a, b) == gcd(b, a)
        - The result is never negative
    """
    left, right = abs(left), abs(right)
    while not right.is_zero():
        left, right = right, left % right
    return left

