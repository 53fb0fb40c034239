"""Tunable constants for limb layout, multiplication and float conversion."""

import os
from collections.abc import Mapping
from typing import Final

from exactnum.exceptions import InvalidInputError
from exactnum.validators import MIN_KARATSUBA_THRESHOLD, validate_karatsuba_threshold

# Limb layout: each limb holds CHARS_PER_LIMB decimal digits
BASE: Final[int] = 10**9
CHARS_PER_LIMB: Final[int] = 9

# Operands longer than this many limbs are multiplied with Karatsuba
DEFAULT_KARATSUBA_THRESHOLD: Final[int] = 45

KARATSUBA_THRESHOLD_ENV: Final[str] = "EXACTNUM_KARATSUBA_THRESHOLD"

# Fractional digits rendered before handing a rational to float()
DOUBLE_PRECISION: Final[int] = 40


def load_karatsuba_threshold(environ: Mapping[str, str] = os.environ) -> int:
    """
    Read the Karatsuba threshold from the environment.

    Args:
        environ: Mapping to read from (default os.environ)

    Returns:
        The configured threshold, or DEFAULT_KARATSUBA_THRESHOLD when unset

    Raises:
        InvalidInputError: If the configured value is not an integer
        OutOfRangeError: If the configured value is below MIN_KARATSUBA_THRESHOLD
    """
    raw = environ.get(KARATSUBA_THRESHOLD_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_KARATSUBA_THRESHOLD

    try:
        threshold = int(raw)
    except ValueError as e:
        raise InvalidInputError(raw, f"{KARATSUBA_THRESHOLD_ENV} must be an integer") from e

    return validate_karatsuba_threshold(threshold)


KARATSUBA_THRESHOLD: Final[int] = load_karatsuba_threshold()
