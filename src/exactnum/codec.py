"""Decimal text conversion for limb magnitudes."""

import logging
from collections.abc import Sequence
from typing import TextIO

from exactnum.exceptions import ParseError
from exactnum.limbs import CHARS_PER_LIMB, Limbs, normalize, resolve_sign
from exactnum.validators import validate_decimal_text

LOG = logging.getLogger(__name__)


def parse_decimal(text: str) -> tuple[bool, Limbs]:
    """
    Parse signed decimal text into a sign flag and canonical limbs.

    Digits are grouped into CHARS_PER_LIMB-wide chunks starting from the
    least-significant end. Leading zeros are accepted and dropped; "-0"
    parses to positive zero.

    Args:
        text: Optional '-' followed by one or more ASCII digits

    Returns:
        Tuple of (negative, limbs)

    Raises:
        ParseError: If text is malformed
    """
    negative, digits = validate_decimal_text(text)

    limbs: Limbs = []
    for end in range(len(digits), 0, -CHARS_PER_LIMB):
        limbs.append(int(digits[max(0, end - CHARS_PER_LIMB) : end]))

    normalize(limbs)
    return resolve_sign(negative, limbs), limbs


def render_decimal(negative: bool, limbs: Sequence[int]) -> str:
    """Render canonical limbs as decimal text with no leading zeros."""
    head = str(limbs[-1])
    body = "".join(f"{limb:0{CHARS_PER_LIMB}d}" for limb in reversed(limbs[:-1]))
    sign = "-" if resolve_sign(negative, limbs) else ""
    return f"{sign}{head}{body}"


def read_token(stream: TextIO) -> str:
    """
    Read one whitespace-delimited token from a text stream.

    Leading whitespace is skipped. Reading stops after the first whitespace
    character following the token, or at end of stream.

    Raises:
        ParseError: If the stream is exhausted before any token character
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)

    if not chars:
        LOG.debug("Stream exhausted before a token was read")
        raise ParseError("", "No token in stream")

    return "".join(chars)
