"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def large_operand():
    """Provide a BigInteger spanning several limbs."""
    from exactnum import BigInteger

    return BigInteger("123456789012345678901234567890123456789")


@pytest.fixture
def sample_integers():
    """Provide a set of interesting native integers around limb boundaries."""
    return [
        0,
        1,
        -1,
        999_999_999,
        1_000_000_000,
        -1_000_000_000,
        1_000_000_001,
        10**18,
        10**18 - 1,
        -(10**27) + 1,
        2**64,
        -(2**64),
    ]


@pytest.fixture
def sample_fractions():
    """Provide (numerator, denominator) pairs, including unreduced ones."""
    return [
        (0, 1),
        (0, -5),
        (1, 2),
        (-1, 2),
        (1, -2),
        (-3, -6),
        (4, 8),
        (10**20, 10**10),
        (7, 3),
    ]
