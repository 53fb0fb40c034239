"""Structural contract for number types usable by generic field algorithms."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

F = TypeVar("F", bound="Field")


@runtime_checkable
class Field(Protocol):
    """
    Operations generic code (e.g. Gaussian elimination) may rely on.

    Implementations are constructible from a native int, closed under
    ``+ - * /`` and totally ordered. Dividing by the additive identity
    is a precondition violation and must raise.

    The isinstance check is structural only: it confirms the operators
    exist, not that ``/`` is exact. BigInteger passes it yet truncates, so
    Rational is the field type to hand to generic algorithms.
    """

    def __init__(self, value: int) -> None: ...

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


def zero_of(field_type: type[F]) -> F:
    """Additive identity of a field type."""
    return field_type(0)


def one_of(field_type: type[F]) -> F:
    """Multiplicative identity of a field type."""
    return field_type(1)
