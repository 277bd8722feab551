"""
The Ulid value type.

A Ulid is an exact 128-bit unsigned value: a 48-bit millisecond timestamp in
the most significant bits followed by an 80-bit random field. It is an
immutable value object; equality, ordering and hashing all use the full
128-bit value, so identifiers sort by timestamp first and random field second.

Manifesto:
    - **Pure value semantics:** Frozen, slotted, freely copyable
    - **Sortable by construction:** Text form sorts exactly like the integer
    - **Untrusted input returns Result:** parse() / try_from_bytes() never raise
    - **Misuse raises:** Out-of-range constructor arguments are programming errors

Architecture:
    ::

        bit 127                 80 79                                   0
        ┌──────────────────────────┬─────────────────────────────────────┐
        │ timestamp_field (48 bit) │       random_field (80 bit)         │
        └──────────────────────────┴─────────────────────────────────────┘
          text: 10 symbols           text: 16 symbols
          bytes: 0..5                bytes: 6..15

        Conversions:
            str  <──parse/to_string──>  Ulid  <──from_int/int()──>  int
            bytes <─try_from_bytes/to_bytes─>  Ulid  <─from_parts/to_parts─> (high, low)

Examples:
    >>> ulid = Ulid.from_str("01CAT3X5Y5G9A62FH1FA6T9GVR")
    >>> ulid.timestamp_field
    1523442423749
    >>> ulid.datetime.isoformat(timespec="milliseconds")
    '2018-04-11T10:27:03.749+00:00'
    >>> Ulid.parse("01CAT3X5Y5G9A62FH1FA6T9GV").is_err()
    True

Guardrails:
    ❌ DON'T: Compare Ulids by their datetime
    ✅ DO: Compare the Ulids themselves (full 128-bit order)

    ❌ DON'T: Call from_str() on user input without handling DecodingError
    ✅ DO: Use parse() and match on Ok / Err

Tags:
    ulid, identifier, value-object, sortable, ulidkit
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from ulidkit.core import crockford
from ulidkit.core.errors import (
    InvalidLengthError,
    RandomRangeError,
    TimestampRangeError,
)
from ulidkit.core.result import Err, Ok, Result

ULID_LENGTH = 26
ULID_BYTES_LENGTH = 16

TIMESTAMP_BITS = 48
RANDOM_BITS = 80

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_RANDOM = (1 << RANDOM_BITS) - 1
MAX_VALUE = (1 << 128) - 1
MAX_U64 = (1 << 64) - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Ulid:
    """
    A 128-bit Universally Unique Lexicographically Sortable Identifier.

    Construct from components with from_timestamp_and_random(), from text with
    parse()/from_str(), from bytes with try_from_bytes()/from_bytes(), or from
    integers with from_int()/from_parts(). ``Ulid(value)`` directly accepts the
    128-bit integer.

    Not a dataclass, so field-unpacking serializers (pydantic python mode)
    keep it whole.

    The ``datetime`` property raises OverflowError for timestamps past year
    9999 (up to the 48-bit ceiling in year 10889); ``timestamp_field`` is
    always available.

    Attributes:
        value: The full 128-bit value
    """

    __slots__ = ("value",)

    value: int

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Ulid value must be an int, got {type(value).__name__}")
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"Ulid value {value} is outside the 128-bit range")
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Ulid is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Ulid is immutable")

    def __reduce__(self) -> tuple[type[Ulid], tuple[int]]:
        return (type(self), (self.value,))

    # ── Equality and ordering (full 128-bit value) ──────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Ulid) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Ulid) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Ulid) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Ulid) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value >= other.value

    # ── Construction ────────────────────────────────────────────────────

    @classmethod
    def from_timestamp_and_random(cls, timestamp_ms: int, random: int) -> Ulid:
        """
        Build a Ulid from its two fields.

        Raises:
            TimestampRangeError: If timestamp_ms is outside [0, 2**48)
            RandomRangeError: If random is outside [0, 2**80)
        """
        if not 0 <= timestamp_ms <= MAX_TIMESTAMP:
            raise TimestampRangeError(timestamp_ms)
        if not 0 <= random <= MAX_RANDOM:
            raise RandomRangeError(random)
        return cls((timestamp_ms << RANDOM_BITS) | random)

    @classmethod
    def from_int(cls, value: int) -> Ulid:
        return cls(value)

    @classmethod
    def from_parts(cls, high: int, low: int) -> Ulid:
        """Build from the legacy pair of 64-bit halves."""
        if not 0 <= high <= MAX_U64 or not 0 <= low <= MAX_U64:
            raise ValueError("both halves must fit in 64 bits")
        return cls((high << 64) | low)

    @classmethod
    def parse(cls, text: str) -> Result[Ulid]:
        """
        Decode the canonical (or lenient) 26-character text form.

        Codec errors propagate unchanged inside Err.
        """
        return crockford.decode(text, ULID_LENGTH).map(cls)

    @classmethod
    def from_str(cls, text: str) -> Ulid:
        """
        Raising counterpart of parse().

        Raises:
            DecodingError: If text is not a valid ULID
        """
        return cls.parse(text).unwrap()

    @classmethod
    def try_from_bytes(cls, data: bytes | bytearray | memoryview) -> Result[Ulid]:
        """Decode exactly 16 big-endian bytes."""
        if len(data) != ULID_BYTES_LENGTH:
            return Err(InvalidLengthError().with_context(input=bytes(data)))
        return Ok(cls(int.from_bytes(data, "big")))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Ulid:
        """Raising counterpart of try_from_bytes()."""
        return cls.try_from_bytes(data).unwrap()

    @classmethod
    def min(cls) -> Ulid:
        return cls(0)

    @classmethod
    def max(cls) -> Ulid:
        return cls(MAX_VALUE)

    # ── Accessors ───────────────────────────────────────────────────────

    @property
    def timestamp_field(self) -> int:
        """Milliseconds since the Unix epoch (48 bits)."""
        return self.value >> RANDOM_BITS

    @property
    def random_field(self) -> int:
        """The 80-bit random field."""
        return self.value & MAX_RANDOM

    @property
    def datetime(self) -> datetime:
        """
        The timestamp field as an aware UTC datetime, for display.

        Raises:
            OverflowError: For timestamps beyond datetime's year-9999 ceiling
        """
        return _EPOCH + timedelta(milliseconds=self.timestamp_field)

    # ── Conversion ──────────────────────────────────────────────────────

    def to_string(self) -> str:
        return crockford.encode(self.timestamp_field, crockford.TIMESTAMP.chars) + crockford.encode(
            self.random_field, crockford.RANDOM.chars
        )

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(ULID_BYTES_LENGTH, "big")

    def to_int(self) -> int:
        return self.value

    def to_parts(self) -> tuple[int, int]:
        """Split into the legacy ``(high, low)`` pair of 64-bit halves."""
        return self.value >> 64, self.value & MAX_U64

    def increment(self) -> Ulid | None:
        """Same timestamp, random field + 1; None when the random field is exhausted."""
        if self.random_field == MAX_RANDOM:
            return None
        return Ulid(self.value + 1)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Ulid({self.to_string()!r})"

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return self.to_bytes()


__all__ = [
    "Ulid",
    "ULID_LENGTH",
    "ULID_BYTES_LENGTH",
    "TIMESTAMP_BITS",
    "RANDOM_BITS",
    "MAX_TIMESTAMP",
    "MAX_RANDOM",
    "MAX_VALUE",
]
