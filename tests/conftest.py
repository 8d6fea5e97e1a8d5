"""
Pytest configuration for pond tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=ci)
- Shared closures used across test modules
"""

import os

import pytest
from hypothesis import settings

from pond import pond

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# Omitting database= keeps the default .hypothesis/ example database.

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
    max_examples=200,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared closures
# =============================================================================

def hello_handler(rebuild, state):
    """Yields "hello" once, then "world" forever."""
    if state == "hello":
        return state, rebuild("world")
    return state, rebuild(state)


def collect_upto(limit):
    """Closure collecting `limit` values, then returning them as a list."""

    def step(rebuild, acc, value):
        if len(acc) == limit - 1:
            return acc + [value]
        return rebuild(acc + [value])

    return pond([], step)


@pytest.fixture
def hello():
    return pond("hello", hello_handler)


@pytest.fixture
def upto3():
    return collect_upto(3)
