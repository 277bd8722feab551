"""
Tests for ulidkit.core.generator module.

Tests cover:
- Fresh generation from injected clock and entropy
- next_monotonic: fresh bits, same-millisecond increment, wrap on overflow
- next_strictly_monotonic: exhaustion and postprocessor rejection
- Postprocessor application in both branches
- Module-level convenience functions
"""

import pytest
from structlog.testing import capture_logs

from ulidkit.core import generator as generator_module
from ulidkit.core.errors import EntropyError, TimestampRangeError
from ulidkit.core.generator import UlidGenerator, new_ulid_bytes, new_ulid_string
from ulidkit.core.sources import FixedClock
from ulidkit.core.ulid import MAX_RANDOM, MAX_TIMESTAMP, Ulid

PAST_TIMESTAMP = 1_523_442_423_749


class TestGenerate:
    """Tests for generate() / from_timestamp()."""

    def test_uses_clock_and_entropy(self, generator, counting_entropy):
        ulid = generator.generate()
        assert ulid.timestamp_field == PAST_TIMESTAMP
        assert ulid.random_field == 1000
        assert counting_entropy.calls == 1

    def test_consecutive_calls_draw_fresh_entropy(self, generator):
        first = generator.generate()
        second = generator.generate()
        assert second.random_field == first.random_field + 1

    def test_postprocessor_on_fresh_identifier(self, generator):
        ulid = generator.generate(lambda r: r | 1)
        assert ulid.random_field == 1001
        assert generator.from_timestamp(42, lambda r: r * 2).random_field == 2002

    def test_from_timestamp(self, generator):
        ulid = generator.from_timestamp(42)
        assert ulid.timestamp_field == 42
        assert ulid.random_field == 1000

    def test_clock_beyond_48_bits_raises(self, counting_entropy):
        generator = UlidGenerator(clock=FixedClock(MAX_TIMESTAMP + 1), entropy=counting_entropy)
        with pytest.raises(TimestampRangeError):
            generator.generate()

    def test_short_entropy_raises(self, fixed_clock):
        generator = UlidGenerator(clock=fixed_clock, entropy=lambda: b"\x00" * 9)
        with pytest.raises(EntropyError, match="9 bytes"):
            generator.generate()

    def test_entropy_failure_propagates(self, fixed_clock):
        def broken() -> bytes:
            raise OSError("no randomness")

        generator = UlidGenerator(clock=fixed_clock, entropy=broken)
        with pytest.raises(OSError):
            generator.generate()

    def test_default_sources(self):
        """The system clock and entropy produce a plausible identifier."""
        ulid = UlidGenerator().generate()
        assert ulid.timestamp_field > PAST_TIMESTAMP
        assert len(str(ulid)) == 26


class TestNextMonotonic:
    """Tests for next_monotonic()."""

    def test_same_millisecond_increments(self, generator, counting_entropy):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 12345)
        ulid = generator.next_monotonic(previous)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 12346)
        assert counting_entropy.calls == 0

    def test_later_millisecond_draws_fresh_bits(self, generator, fixed_clock, counting_entropy):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 12345)
        fixed_clock.advance(5)
        ulid = generator.next_monotonic(previous)
        assert ulid.timestamp_field == PAST_TIMESTAMP + 5
        assert ulid.random_field == 1000
        assert counting_entropy.calls == 1

    def test_clock_behind_previous_keeps_previous_timestamp(self, generator):
        """A clock that went backwards never moves the timestamp backwards."""
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP + 100, 7)
        with capture_logs() as logs:
            ulid = generator.next_monotonic(previous)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP + 100, 8)
        assert logs[0]["event"] == "clock_regressed"
        assert logs[0]["log_level"] == "debug"

    def test_wraps_on_overflow(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, MAX_RANDOM)
        with capture_logs() as logs:
            ulid = generator.next_monotonic(previous)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 0)
        assert ulid < previous
        assert [entry["event"] for entry in logs] == ["random_field_wrapped"]
        assert logs[0]["log_level"] == "warning"

    def test_sequence_is_strictly_increasing(self, generator):
        ulids = [generator.generate()]
        for _ in range(100):
            ulids.append(generator.next_monotonic(ulids[-1]))
        assert all(a < b for a, b in zip(ulids, ulids[1:]))

    def test_postprocessor_on_increment(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 10)
        ulid = generator.next_monotonic(previous, lambda r: r * 2)
        assert ulid.random_field == 22

    def test_postprocessor_on_fresh_bits(self, generator, fixed_clock):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 10)
        fixed_clock.advance()
        ulid = generator.next_monotonic(previous, lambda r: r + 1)
        assert ulid.random_field == 1001

    def test_postprocessor_result_masked_to_80_bits(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 0)
        ulid = generator.next_monotonic(previous, lambda r: r | (1 << 80))
        assert ulid.random_field == 1

    def test_postprocessor_on_wrapped_value(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, MAX_RANDOM)
        ulid = generator.next_monotonic(previous, lambda r: r + 5)
        assert ulid.random_field == 5


class TestNextStrictlyMonotonic:
    """Tests for next_strictly_monotonic()."""

    def test_same_millisecond_increments(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 99)
        ulid = generator.next_strictly_monotonic(previous)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 100)

    def test_later_millisecond_draws_fresh_bits(self, generator, fixed_clock):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, MAX_RANDOM)
        fixed_clock.advance()
        ulid = generator.next_strictly_monotonic(previous)
        assert ulid is not None
        assert ulid.timestamp_field == PAST_TIMESTAMP + 1
        assert ulid > previous

    def test_exhaustion_returns_none(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, MAX_RANDOM)
        with capture_logs() as logs:
            assert generator.next_strictly_monotonic(previous) is None
        assert logs[0]["event"] == "random_field_exhausted"

    def test_exhaustion_with_clock_behind(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP + 1, MAX_RANDOM)
        assert generator.next_strictly_monotonic(previous) is None

    def test_non_increasing_postprocessor_returns_none(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 50)
        with capture_logs() as logs:
            assert generator.next_strictly_monotonic(previous, lambda r: 0) is None
        assert logs[0]["event"] == "postprocessed_candidate_not_increasing"

    def test_increasing_postprocessor_accepted(self, generator):
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 50)
        ulid = generator.next_strictly_monotonic(previous, lambda r: r + 100)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP, 151)

    def test_fresh_bits_postprocessed(self, generator, fixed_clock):
        """A new millisecond always sorts above previous, whatever the bits."""
        previous = Ulid.from_timestamp_and_random(PAST_TIMESTAMP, MAX_RANDOM)
        fixed_clock.advance()
        ulid = generator.next_strictly_monotonic(previous, lambda r: 0)
        assert ulid == Ulid.from_timestamp_and_random(PAST_TIMESTAMP + 1, 0)

    def test_every_result_exceeds_previous(self):
        """Near the ceiling, results are either None or strictly greater."""
        generator = UlidGenerator(
            clock=FixedClock(PAST_TIMESTAMP),
            entropy=lambda: (MAX_RANDOM - 3).to_bytes(10, "big"),
        )
        previous = generator.generate()
        produced = 0
        while (ulid := generator.next_strictly_monotonic(previous)) is not None:
            assert ulid > previous
            previous = ulid
            produced += 1
        assert produced == 3
        assert previous.random_field == MAX_RANDOM


class TestModuleFunctions:
    """Tests for the default-generator convenience functions."""

    def test_generate(self):
        ulid = generator_module.generate()
        assert isinstance(ulid, Ulid)

    def test_new_ulid_string(self):
        text = new_ulid_string()
        assert len(text) == 26
        assert Ulid.from_str(text).to_string() == text

    def test_new_ulid_bytes(self):
        data = new_ulid_bytes()
        assert len(data) == 16
        assert Ulid.from_bytes(data).to_bytes() == data

    def test_next_monotonic(self):
        previous = generator_module.generate()
        assert generator_module.next_monotonic(previous) > previous

    def test_next_strictly_monotonic(self):
        previous = generator_module.generate()
        ulid = generator_module.next_strictly_monotonic(previous)
        assert ulid is not None
        assert ulid > previous
