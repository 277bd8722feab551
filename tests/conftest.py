"""
Shared pytest fixtures and configuration for ulidkit tests.

This module provides:
- Deterministic clock and entropy sources for generator tests
- Isolation for cached settings and structlog configuration

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(fixed_clock, counting_entropy):
        ...
"""

from collections.abc import Generator

import pytest
import structlog

from ulidkit.core.generator import UlidGenerator
from ulidkit.core.settings import get_settings
from ulidkit.core.sources import FixedClock

# 2018-04-11T10:27:03.749Z, the timestamp of 01CAT3X5Y5G9A62FH1FA6T9GVR
PAST_TIMESTAMP = 1_523_442_423_749


class CountingEntropy:
    """Entropy source returning 0, 1, 2, ... as 10-byte big-endian values."""

    def __init__(self, start: int = 0):
        self.next_value = start
        self.calls = 0

    def __call__(self) -> bytes:
        value = self.next_value
        self.next_value += 1
        self.calls += 1
        return value.to_bytes(10, "big")


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_and_logging() -> Generator[None, None, None]:
    """Clear cached settings and structlog configuration around each test."""
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


# =============================================================================
# Deterministic Sources
# =============================================================================


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(PAST_TIMESTAMP)


@pytest.fixture
def counting_entropy() -> CountingEntropy:
    return CountingEntropy(start=1000)


@pytest.fixture
def generator(fixed_clock: FixedClock, counting_entropy: CountingEntropy) -> UlidGenerator:
    return UlidGenerator(clock=fixed_clock, entropy=counting_entropy)
