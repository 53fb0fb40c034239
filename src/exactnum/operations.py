"""
Core limb arithmetic: addition, subtraction, multiplication and long division.

Functions named ``*_magnitudes`` work on unsigned canonical limb lists.
``signed_add`` and ``signed_subtract`` take ``(negative, limbs)`` pairs and
return one, resolving the result sign in a single place.
"""

import logging
from collections.abc import Sequence

from exactnum.config import KARATSUBA_THRESHOLD
from exactnum.limbs import (
    BASE,
    Limbs,
    compare_magnitudes,
    is_zero_magnitude,
    normalize,
    resolve_sign,
    shift_limbs,
)
from exactnum.validators import validate_karatsuba_threshold

LOG = logging.getLogger(__name__)

Signed = tuple[bool, Limbs]


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> Limbs:
    """
    Add two magnitudes limb by limb with carry.

    Properties:
        - Commutative: add_magnitudes(a, b) == add_magnitudes(b, a)
        - Identity: add_magnitudes(a, [0]) == a
    """
    if len(left) < len(right):
        left, right = right, left

    result: Limbs = []
    carry = 0
    for index, limb in enumerate(left):
        total = limb + carry + (right[index] if index < len(right) else 0)
        if total >= BASE:
            total -= BASE
            carry = 1
        else:
            carry = 0
        result.append(total)

    if carry:
        result.append(carry)

    return result


def subtract_magnitudes(left: Sequence[int], right: Sequence[int]) -> Limbs:
    """
    Subtract right from left limb by limb with borrow.

    The caller guarantees left >= right.
    """
    result: Limbs = []
    borrow = 0
    for index, limb in enumerate(left):
        diff = limb - borrow - (right[index] if index < len(right) else 0)
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize(result)


def signed_add(left_negative: bool, left: Limbs, right_negative: bool, right: Limbs) -> Signed:
    """
    Add two signed magnitudes.

    Matching signs add magnitudes under the common sign. Differing signs
    subtract the smaller magnitude from the larger, which keeps its sign.
    """
    if left_negative == right_negative:
        limbs = add_magnitudes(left, right)
        return resolve_sign(left_negative, limbs), limbs

    order = compare_magnitudes(left, right)
    if order == 0:
        return False, [0]
    if order > 0:
        limbs = subtract_magnitudes(left, right)
        return resolve_sign(left_negative, limbs), limbs

    limbs = subtract_magnitudes(right, left)
    return resolve_sign(right_negative, limbs), limbs


def signed_subtract(
    left_negative: bool, left: Limbs, right_negative: bool, right: Limbs
) -> Signed:
    """Subtract by adding the negated right operand."""
    return signed_add(left_negative, left, not right_negative, right)


def multiply_by_limb(magnitude: Sequence[int], factor: int) -> Limbs:
    """
    Multiply a magnitude by a single limb (0 <= factor < BASE).

    Used as the primitive for schoolbook multiplication and for
    per-digit trial products during division.
    """
    if factor == 0 or is_zero_magnitude(magnitude):
        return [0]

    result: Limbs = []
    carry = 0
    for limb in magnitude:
        carry, value = divmod(limb * factor + carry, BASE)
        result.append(value)

    while carry:
        carry, value = divmod(carry, BASE)
        result.append(value)

    return result


def schoolbook_multiply(left: Sequence[int], right: Sequence[int]) -> Limbs:
    """Quadratic multiplication: one scaled, shifted partial product per right limb."""
    result: Limbs = [0]
    for position, limb in enumerate(right):
        if limb == 0:
            continue
        partial = shift_limbs(multiply_by_limb(left, limb), position)
        result = add_magnitudes(result, partial)

    return result


def karatsuba_multiply(
    left: Sequence[int], right: Sequence[int], threshold: int = KARATSUBA_THRESHOLD
) -> Limbs:
    """
    Recursive Karatsuba multiplication of two magnitudes.

    The longer operand is split at ``split = ceil(len / 2)`` limbs; the
    shorter operand is split at the same position, so its high half may
    be zero. Operands of at most ``threshold`` limbs fall back to
    schoolbook multiplication.

    Properties:
        - Agrees with schoolbook_multiply on every input
        - Recursion depth is O(log n) in the operand limb count

    Args:
        left: First magnitude
        right: Second magnitude
        threshold: Limb count at or below which schoolbook is used

    Returns:
        The product magnitude
    """
    if len(left) < len(right):
        left, right = right, left

    if is_zero_magnitude(right):
        return [0]

    if len(left) <= threshold:
        return schoolbook_multiply(left, right)

    split = (len(left) + 1) // 2
    left_low = normalize(list(left[:split]))
    left_high = normalize(list(left[split:]))
    right_low = normalize(list(right[:split]))
    right_high = normalize(list(right[split:]))

    low_product = karatsuba_multiply(left_low, right_low, threshold)
    high_product = karatsuba_multiply(left_high, right_high, threshold)
    mid_product = karatsuba_multiply(
        add_magnitudes(left_low, left_high),
        add_magnitudes(right_low, right_high),
        threshold,
    )
    mid_product = subtract_magnitudes(
        mid_product, add_magnitudes(low_product, high_product)
    )

    result = add_magnitudes(shift_limbs(high_product, 2 * split), shift_limbs(mid_product, split))
    return add_magnitudes(result, low_product)


def multiply_magnitudes(
    left: Sequence[int], right: Sequence[int], threshold: int | None = None
) -> Limbs:
    """
    Multiply two magnitudes, choosing the strategy by operand length.

    Args:
        left: First magnitude
        right: Second magnitude
        threshold: Karatsuba threshold (default KARATSUBA_THRESHOLD)

    Raises:
        OutOfRangeError: If threshold is below MIN_KARATSUBA_THRESHOLD
    """
    if threshold is None:
        threshold = KARATSUBA_THRESHOLD
    else:
        validate_karatsuba_threshold(threshold)

    if len(right) == 1:
        return multiply_by_limb(left, right[0])
    if len(left) == 1:
        return multiply_by_limb(right, left[0])

    if max(len(left), len(right)) > threshold:
        LOG.debug(
            "Karatsuba product of %d x %d limbs (threshold %d)",
            len(left),
            len(right),
            threshold,
        )
    return karatsuba_multiply(left, right, threshold)


def _quotient_digit(divisor: Sequence[int], window: Sequence[int]) -> int:
    """
    Binary-search the largest d in [0, BASE) with divisor * d <= window.

    The caller keeps window < divisor * BASE, so the answer fits in one limb.
    """
    if compare_magnitudes(window, divisor) < 0:
        return 0

    low, high = 1, BASE
    while high - low > 1:
        middle = (low + high) // 2
        if compare_magnitudes(multiply_by_limb(divisor, middle), window) <= 0:
            low = middle
        else:
            high = middle

    return low


def divmod_magnitudes(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[Limbs, Limbs]:
    """
    Long division of magnitudes, one quotient limb per dividend limb.

    Walks the dividend from its most-significant limb, shifting each limb
    into a running remainder window and estimating the next quotient limb
    by binary search.

    Args:
        dividend: Magnitude to divide
        divisor: Non-zero magnitude to divide by

    Returns:
        Tuple of (quotient, remainder) with remainder < divisor
    """
    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    quotient: Limbs = []
    window: Limbs = [0]
    for limb in reversed(dividend):
        window = normalize([limb, *window])
        digit = _quotient_digit(divisor, window)
        if digit:
            window = subtract_magnitudes(window, multiply_by_limb(divisor, digit))
        quotient.append(digit)

    quotient.reverse()
    return normalize(quotient), window
