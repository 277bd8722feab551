"""
Structured error types for ulidkit.

Provides a small hierarchy of typed errors with enough metadata for logging,
CLI reporting and framework integration. Every error raised or returned by
ulidkit extends UlidError and carries:

- **Category:** What kind of error (parse, validation, source, ...)
- **Context:** Offending input, position and custom metadata
- **Cause:** Chained underlying exception for root cause analysis

Manifesto:
    - **Typed Error Hierarchy:** Decoding failures are distinct classes, not strings
    - **Errors as values:** Decode errors travel inside Err(...) on untrusted paths
    - **Misuse is loud:** Out-of-range constructor arguments raise immediately
    - **Rich Context:** Errors carry metadata for logging and CLI output

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                          UlidError                              │
        │                (category, context, cause)                       │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                 │
        │  DecodingError        TimestampRangeError      EntropyError     │
        │  (PARSE)              RandomRangeError         (SOURCE)         │
        │       │               (VALIDATION)                              │
        │  InvalidLengthError                                             │
        │  InvalidCharError                                               │
        │  DataTypeOverflowError                                          │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidCharError("U", 25)
    >>> error.kind
    <DecodingErrorKind.INVALID_CHAR: 'invalid_char'>
    >>> str(error)
    "invalid character 'U' at position 25"
    >>> error == InvalidCharError("U", 25)
    True

Guardrails:
    ❌ DON'T: Raise DecodingError from parse paths
    ✅ DO: Return Err(DecodingError) and let the caller decide

    ❌ DON'T: Catch TimestampRangeError to "fix" a timestamp
    ✅ DO: Treat it as the programming error it is

Tags:
    error-handling, exception-hierarchy, decoding, ulidkit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    PARSE = "PARSE"              # Malformed text or bytes
    VALIDATION = "VALIDATION"    # Out-of-range constructor arguments
    SOURCE = "SOURCE"            # Clock / entropy provider misbehaviour
    INTERNAL = "INTERNAL"        # Bugs, unexpected state


class DecodingErrorKind(str, Enum):
    """Why a candidate string or byte sequence failed to decode."""

    INVALID_LENGTH = "invalid_length"
    INVALID_CHAR = "invalid_char"
    DATA_TYPE_OVERFLOW = "data_type_overflow"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        input: The candidate value that failed (text, bytes or int)
        position: 0-based index of the offending symbol, if any
        metadata: Additional key-value pairs
    """

    input: Any = None
    position: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        if self.input is not None:
            result["input"] = self.input if isinstance(self.input, str) else repr(self.input)
        if self.position is not None:
            result["position"] = self.position
        if self.metadata:
            result.update(self.metadata)
        return result


class UlidError(Exception):
    """
    Base exception for all ulidkit errors.

    Subclasses set ``default_category`` to classify themselves; callers may
    override the category per instance.

    Examples:
        >>> error = UlidError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(input="01ARZ").context.input
        '01ARZ'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> UlidError:
        """
        Add context to this error (fluent API).

        Usage:
            return Err(InvalidLengthError().with_context(input=text))
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"

    def _init_args(self) -> tuple[Any, ...]:
        return (self.message,)

    def __reduce__(self) -> tuple[Any, ...]:
        # __init__ arguments come from attributes; context and cause travel in __dict__.
        return (type(self), self._init_args(), self.__dict__.copy())


# =============================================================================
# DECODING ERRORS (returned inside Err, never raised by parse paths)
# =============================================================================


class DecodingError(UlidError):
    """
    A candidate string or byte sequence could not become a Ulid.

    Decoding errors are values: two errors of the same kind with the same
    payload compare equal, regardless of attached context.
    """

    default_category = ErrorCategory.PARSE
    kind: DecodingErrorKind

    def _payload(self) -> tuple[Any, ...]:
        return (self.kind,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodingError):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash(self._payload())

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["kind"] = self.kind.value
        return result


class InvalidLengthError(DecodingError):
    """Input length does not match any accepted width."""

    kind = DecodingErrorKind.INVALID_LENGTH

    def __init__(self, message: str = "invalid length", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidCharError(DecodingError):
    """A symbol outside the Crockford alphabet was found."""

    kind = DecodingErrorKind.INVALID_CHAR

    def __init__(self, char: str, position: int, **kwargs: Any):
        super().__init__(f"invalid character {char!r} at position {position}", **kwargs)
        self.char = char
        self.position = position
        self.context.position = position

    def _init_args(self) -> tuple[Any, ...]:
        return (self.char, self.position)

    def _payload(self) -> tuple[Any, ...]:
        return (self.kind, self.char, self.position)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["char"] = self.char
        result["position"] = self.position
        return result


class DataTypeOverflowError(DecodingError):
    """The decoded magnitude exceeds the target integer width."""

    kind = DecodingErrorKind.DATA_TYPE_OVERFLOW

    def __init__(self, message: str = "data type overflow", **kwargs: Any):
        super().__init__(message, **kwargs)


# =============================================================================
# CONSTRUCTION ERRORS (programming errors, raised)
# =============================================================================


class TimestampRangeError(UlidError):
    """Timestamp passed to a low-level constructor is outside [0, 2**48)."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, timestamp_ms: int, **kwargs: Any):
        super().__init__(
            f"timestamp {timestamp_ms} ms is outside the 48-bit range",
            **kwargs,
        )
        self.timestamp_ms = timestamp_ms

    def _init_args(self) -> tuple[Any, ...]:
        return (self.timestamp_ms,)


class RandomRangeError(UlidError):
    """Random field passed to a low-level constructor is outside [0, 2**80)."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, random: int, **kwargs: Any):
        super().__init__(f"random field {random} is outside the 80-bit range", **kwargs)
        self.random = random

    def _init_args(self) -> tuple[Any, ...]:
        return (self.random,)


class EntropyError(UlidError):
    """The entropy provider returned something other than 10 bytes."""

    default_category = ErrorCategory.SOURCE


__all__ = [
    "ErrorCategory",
    "DecodingErrorKind",
    "ErrorContext",
    "UlidError",
    "DecodingError",
    "InvalidLengthError",
    "InvalidCharError",
    "DataTypeOverflowError",
    "TimestampRangeError",
    "RandomRangeError",
    "EntropyError",
]
