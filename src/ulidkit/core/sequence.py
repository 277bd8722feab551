"""
Thread-safe holder for a shared monotonic sequence.

UlidGenerator is deliberately stateless; producers that share one logical
sequence need somewhere to keep the last identifier and a lock around the
read-advance-store step. MonotonicSequence is that holder.

Example:
    sequence = MonotonicSequence()
    ids = [sequence.next() for _ in range(1000)]
    assert ids == sorted(ids)
"""

from __future__ import annotations

import threading

from ulidkit.core.generator import Postprocessor, UlidGenerator
from ulidkit.core.ulid import Ulid


class MonotonicSequence:
    """
    Lock-guarded ``previous`` value threaded through a UlidGenerator.

    Args:
        generator: Generator to draw from (system clock/entropy by default)
        last: Seed value; the first call generates fresh when omitted
        postprocessor: Applied to the random field of every identifier, the first included
    """

    def __init__(
        self,
        generator: UlidGenerator | None = None,
        last: Ulid | None = None,
        postprocessor: Postprocessor | None = None,
    ):
        self._generator = generator or UlidGenerator()
        self._last = last
        self._postprocessor = postprocessor
        self._lock = threading.Lock()

    @property
    def last(self) -> Ulid | None:
        with self._lock:
            return self._last

    def next(self) -> Ulid:
        """Advance with next_monotonic() semantics (wraps on exhaustion)."""
        with self._lock:
            if self._last is None:
                self._last = self._generator.generate(self._postprocessor)
            else:
                self._last = self._generator.next_monotonic(self._last, self._postprocessor)
            return self._last

    def next_strict(self) -> Ulid | None:
        """Advance with next_strictly_monotonic() semantics; None leaves the state untouched."""
        with self._lock:
            if self._last is None:
                self._last = self._generator.generate(self._postprocessor)
                return self._last
            candidate = self._generator.next_strictly_monotonic(self._last, self._postprocessor)
            if candidate is not None:
                self._last = candidate
            return candidate
