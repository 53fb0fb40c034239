"""
Limb store: unsigned magnitudes as little-endian sequences of base-10**9 limbs.

A magnitude is canonical when it has no most-significant zero limb, except
zero itself, which is exactly ``[0]``. Every function here accepts canonical
magnitudes and returns canonical magnitudes.
"""

from collections.abc import Sequence

from exactnum.config import BASE, CHARS_PER_LIMB

__all__ = [
    "BASE",
    "CHARS_PER_LIMB",
    "Limbs",
    "compare_magnitudes",
    "is_zero_magnitude",
    "limbs_from_int",
    "limbs_to_int",
    "normalize",
    "resolve_sign",
    "shift_limbs",
]

Limbs = list[int]


def normalize(limbs: Limbs) -> Limbs:
    """Strip most-significant zero limbs in place; an empty list becomes [0]."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def resolve_sign(negative: bool, limbs: Sequence[int]) -> bool:
    """Zero is always positive."""
    return negative and not is_zero_magnitude(limbs)


def limbs_from_int(value: int) -> Limbs:
    """Split the absolute value of a native integer into limbs."""
    value = abs(value)
    limbs: Limbs = []
    while value:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
    return limbs or [0]


def limbs_to_int(limbs: Sequence[int]) -> int:
    result = 0
    for limb in reversed(limbs):
        result = result * BASE + limb
    return result


def shift_limbs(limbs: Sequence[int], count: int) -> Limbs:
    """Multiply a magnitude by BASE**count by prepending zero limbs."""
    if is_zero_magnitude(limbs):
        return [0]
    return [0] * count + list(limbs)


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Three-way comparison of two canonical magnitudes.

    Returns:
        -1, 0 or 1 as left is smaller than, equal to, or larger than right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1

    for left_limb, right_limb in zip(reversed(left), reversed(right)):
        if left_limb != right_limb:
            return -1 if left_limb < right_limb else 1

    return 0
