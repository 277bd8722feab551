"""
ULID generation: fresh, monotonic and strictly monotonic.

UlidGenerator combines an injected clock and entropy source into new
identifiers. It holds no sequence state of its own: monotonic generation is
a pure function of the ``previous`` identifier the caller passes in, so the
caller owns (and, if shared between threads, serializes) the sequence.

Manifesto:
    - **Stateless generator:** No hidden process-wide counter
    - **Caller-owned sequence:** ``previous`` is threaded explicitly
    - **No degraded fallbacks:** Clock and entropy failures propagate

Architecture:
    ::

        generate()
            clock() ──> timestamp_ms ─┐
            entropy() ──> 80 bits ────┴──> Ulid.from_timestamp_and_random

        next_monotonic(previous)
            clock() > previous.timestamp_field ?
              yes ──> fresh random bits at the new timestamp
              no  ──> previous timestamp, previous.random_field + 1
                        (wraps to 0 on 80-bit overflow)

        next_strictly_monotonic(previous)
            as above, but exhaustion ──> None
            and every returned value is > previous

        postprocessor(random) is applied to the candidate random field in
        both branches (fresh or incremented), masked back to 80 bits.

Examples:
    >>> from ulidkit.core.sources import FixedClock
    >>> generator = UlidGenerator(clock=FixedClock(1_000), entropy=lambda: bytes(10))
    >>> first = generator.generate()
    >>> second = generator.next_monotonic(first)
    >>> second.random_field - first.random_field
    1

Guardrails:
    ❌ DON'T: Share one ``previous`` between threads without a lock
    ✅ DO: Use MonotonicSequence (or your own synchronized holder)

    ❌ DON'T: Expect next_monotonic() to stay strictly increasing after 2**80 calls
    ✅ DO: Use next_strictly_monotonic() when strict order matters

Tags:
    ulid, generator, monotonic, randomness, clock, ulidkit
"""

from __future__ import annotations

from typing import Callable

from ulidkit.core.errors import EntropyError
from ulidkit.core.logging import get_logger
from ulidkit.core.sources import (
    ENTROPY_BYTES,
    Clock,
    EntropySource,
    system_clock,
    system_entropy,
)
from ulidkit.core.ulid import MAX_RANDOM, Ulid

logger = get_logger(__name__)

Postprocessor = Callable[[int], int]


class UlidGenerator:
    """
    Produces identifiers from a clock and an entropy source.

    Args:
        clock: Zero-argument callable returning Unix time in milliseconds
        entropy: Zero-argument callable returning 10 random bytes
    """

    def __init__(
        self,
        clock: Clock | None = None,
        entropy: EntropySource | None = None,
    ):
        self._clock = clock or system_clock
        self._entropy = entropy or system_entropy

    def _draw_random(self) -> int:
        data = self._entropy()
        if len(data) != ENTROPY_BYTES:
            raise EntropyError(
                f"entropy source returned {len(data)} bytes, expected {ENTROPY_BYTES}"
            )
        return int.from_bytes(data, "big")

    def generate(self, postprocessor: Postprocessor | None = None) -> Ulid:
        """A fresh identifier at the current millisecond."""
        return self.from_timestamp(self._clock(), postprocessor)

    def from_timestamp(
        self, timestamp_ms: int, postprocessor: Postprocessor | None = None
    ) -> Ulid:
        """A fresh identifier at an explicit millisecond timestamp."""
        return Ulid.from_timestamp_and_random(
            timestamp_ms, _apply(postprocessor, self._draw_random())
        )

    def _advance(self, previous: Ulid) -> tuple[int, int | None]:
        """
        Pick the candidate fields for the successor of ``previous``.

        Returns the timestamp and the unprocessed random field, or None for
        the random field when the same-millisecond increment would overflow.
        """
        timestamp_ms = self._clock()
        if timestamp_ms > previous.timestamp_field:
            return timestamp_ms, self._draw_random()

        if timestamp_ms < previous.timestamp_field:
            logger.debug(
                "clock_regressed",
                clock_ms=timestamp_ms,
                previous_ms=previous.timestamp_field,
            )
        if previous.random_field == MAX_RANDOM:
            return previous.timestamp_field, None
        return previous.timestamp_field, previous.random_field + 1

    def next_monotonic(
        self,
        previous: Ulid,
        postprocessor: Postprocessor | None = None,
    ) -> Ulid:
        """
        The successor of ``previous``, incrementing within a millisecond.

        Never fails: on random-field overflow it silently wraps to 0, so the
        result can sort below ``previous`` in that case.
        """
        timestamp_ms, random = self._advance(previous)
        if random is None:
            logger.warning(
                "random_field_wrapped",
                previous=str(previous),
                timestamp_ms=timestamp_ms,
            )
            random = 0
        return Ulid.from_timestamp_and_random(timestamp_ms, _apply(postprocessor, random))

    def next_strictly_monotonic(
        self,
        previous: Ulid,
        postprocessor: Postprocessor | None = None,
    ) -> Ulid | None:
        """
        The successor of ``previous``, or None when none can be produced.

        Every returned value is strictly greater than ``previous``. None means
        the random field is exhausted for this millisecond (or the
        postprocessor mapped the candidate to a value not above ``previous``).
        """
        timestamp_ms, random = self._advance(previous)
        if random is None:
            logger.info("random_field_exhausted", previous=str(previous))
            return None

        candidate = Ulid.from_timestamp_and_random(timestamp_ms, _apply(postprocessor, random))
        if candidate <= previous:
            logger.info(
                "postprocessed_candidate_not_increasing",
                previous=str(previous),
                candidate=str(candidate),
            )
            return None
        return candidate


def _apply(postprocessor: Postprocessor | None, random: int) -> int:
    if postprocessor is None:
        return random
    return postprocessor(random) & MAX_RANDOM


# =============================================================================
# MODULE-LEVEL CONVENIENCE (system clock + system entropy)
# =============================================================================

_default_generator = UlidGenerator()


def generate(postprocessor: Postprocessor | None = None) -> Ulid:
    """A fresh identifier from the system clock and entropy."""
    return _default_generator.generate(postprocessor)


def new_ulid_string() -> str:
    return str(_default_generator.generate())


def new_ulid_bytes() -> bytes:
    return _default_generator.generate().to_bytes()


def next_monotonic(previous: Ulid, postprocessor: Postprocessor | None = None) -> Ulid:
    return _default_generator.next_monotonic(previous, postprocessor)


def next_strictly_monotonic(
    previous: Ulid, postprocessor: Postprocessor | None = None
) -> Ulid | None:
    return _default_generator.next_strictly_monotonic(previous, postprocessor)


__all__ = [
    "Postprocessor",
    "UlidGenerator",
    "generate",
    "new_ulid_string",
    "new_ulid_bytes",
    "next_monotonic",
    "next_strictly_monotonic",
]
