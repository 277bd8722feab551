"""
Clock and entropy provider protocols.

The generator never reads the wall clock or the OS random pool directly; it
calls injected providers so that tests (and exotic deployments) can supply
their own. Any zero-argument callable with the right return type satisfies
the protocols.

Architecture:
    ::

        Clock          () -> int     ms since Unix epoch, expected in [0, 2**48)
        EntropySource  () -> bytes   exactly 10 bytes (80 bits), CSPRNG quality

        system_clock    time.time_ns() // 1_000_000
        system_entropy  secrets.token_bytes(10)
"""

from __future__ import annotations

import secrets
import time
from typing import Protocol, runtime_checkable

ENTROPY_BYTES = 10
NANOSECS_IN_MILLISECS = 1_000_000


@runtime_checkable
class Clock(Protocol):
    """Returns the current Unix time in whole milliseconds."""

    def __call__(self) -> int: ...


@runtime_checkable
class EntropySource(Protocol):
    """Returns 10 bytes of cryptographically uniform randomness."""

    def __call__(self) -> bytes: ...


def system_clock() -> int:
    return time.time_ns() // NANOSECS_IN_MILLISECS


def system_entropy() -> bytes:
    return secrets.token_bytes(ENTROPY_BYTES)


class FixedClock:
    """
    A settable clock for tests and replays.

    Example:
        clock = FixedClock(1_523_442_423_749)
        clock.advance(1)
    """

    def __init__(self, now_ms: int = 0):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int = 1) -> None:
        self.now_ms += ms


__all__ = [
    "Clock",
    "EntropySource",
    "ENTROPY_BYTES",
    "system_clock",
    "system_entropy",
    "FixedClock",
]
