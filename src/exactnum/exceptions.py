"""Custom exceptions for the exactnum package."""

from typing import Any


class ExactNumError(Exception):
    """Base exception for all exactnum errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class ParseError(ExactNumError, ValueError):
    """Raised when text cannot be parsed as a decimal integer or rational."""

    def __init__(self, text: Any, reason: str = "malformed number") -> None:
        super().__init__(reason, text)
        self.text = text
        self.reason = reason


class DivisionByZeroError(ExactNumError, ZeroDivisionError):
    """Raised when dividing by zero or building a rational with denominator 0."""

    def __init__(self, numerator: Any) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


DivisionByZero = DivisionByZeroError


class InvalidInputError(ExactNumError, TypeError):
    """Raised when a value of an unsupported type is supplied."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(ExactNumError, ValueError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self, value: Any, min_val: int | None = None, max_val: int | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val


class NumericOverflowError(ExactNumError, OverflowError):
    """Raised when an exact value does not fit the requested native type."""

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands
