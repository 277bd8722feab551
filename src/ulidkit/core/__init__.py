"""ulidkit core -- the ULID codec, value type and generator.

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          Structured error hierarchy (UlidError, DecodingError)
        result.py          Result[T] envelope (Ok / Err)

    Layer 2 -- Codec & Value Type
        crockford.py       Fixed-width Crockford Base32 encode/decode
        ulid.py            Ulid value type (text, bytes, int, parts)

    Layer 3 -- Generation
        sources.py         Clock / entropy provider protocols
        generator.py       Fresh, monotonic and strictly monotonic generation
        sequence.py        Lock-guarded shared monotonic sequence

    Ambient
        logging.py         structlog configuration
        settings.py        pydantic-settings configuration (imported lazily)
"""

from ulidkit.core.errors import (
    DataTypeOverflowError,
    DecodingError,
    DecodingErrorKind,
    EntropyError,
    ErrorCategory,
    ErrorContext,
    InvalidCharError,
    InvalidLengthError,
    RandomRangeError,
    TimestampRangeError,
    UlidError,
)
from ulidkit.core.generator import (
    UlidGenerator,
    generate,
    new_ulid_bytes,
    new_ulid_string,
    next_monotonic,
    next_strictly_monotonic,
)
from ulidkit.core.result import Err, Ok, Result, partition_results
from ulidkit.core.sequence import MonotonicSequence
from ulidkit.core.sources import FixedClock, system_clock, system_entropy
from ulidkit.core.ulid import (
    MAX_RANDOM,
    MAX_TIMESTAMP,
    MAX_VALUE,
    ULID_BYTES_LENGTH,
    ULID_LENGTH,
    Ulid,
)


def __getattr__(name):
    """Lazy import for the settings layer (pydantic-settings)."""
    if name in ("UlidSettings", "get_settings"):
        from ulidkit.core import settings as _settings

        return getattr(_settings, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # errors
    "UlidError",
    "DecodingError",
    "DecodingErrorKind",
    "InvalidLengthError",
    "InvalidCharError",
    "DataTypeOverflowError",
    "TimestampRangeError",
    "RandomRangeError",
    "EntropyError",
    "ErrorCategory",
    "ErrorContext",
    # result
    "Ok",
    "Err",
    "Result",
    "partition_results",
    # value type
    "Ulid",
    "ULID_LENGTH",
    "ULID_BYTES_LENGTH",
    "MAX_TIMESTAMP",
    "MAX_RANDOM",
    "MAX_VALUE",
    # generation
    "UlidGenerator",
    "MonotonicSequence",
    "FixedClock",
    "system_clock",
    "system_entropy",
    "generate",
    "new_ulid_string",
    "new_ulid_bytes",
    "next_monotonic",
    "next_strictly_monotonic",
]
