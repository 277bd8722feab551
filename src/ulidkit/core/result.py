"""
Ok / Err values returned by every untrusted-input path.

Text and byte decoding never raise on malformed input; they hand back
``Ok(value)`` or ``Err(DecodingError)`` and the caller decides. Both classes
are frozen dataclasses, so they pattern-match positionally and compare by
content.

Examples:
    >>> from ulidkit.core.result import Ok, Err
    >>> Ok(10).map(lambda x: x * 2).unwrap()
    20
    >>> Err(ValueError("oops")).map(lambda x: x * 2).is_err()
    True

Usage:
    match Ulid.parse(candidate):
        case Ok(ulid):
            store(ulid)
        case Err(error):
            log.warning("rejected", error=str(error))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A decoded value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """A decoding failure; ``map`` passes it through untouched."""

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the carried error."""
        raise self.error

    def map(self, f: Callable[[T], U]) -> Result[U]:
        return Err(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[T]


def partition_results(
    pairs: Iterable[tuple[str, Result[T]]],
) -> tuple[list[T], list[tuple[str, Exception]]]:
    """
    Split ``(input, result)`` pairs into accepted values and rejected inputs.

    Order is preserved on both sides; each rejection keeps the input that
    produced it next to its error.

    Examples:
        >>> accepted, rejected = partition_results([("a", Ok(1)), ("b", Err(ValueError("x")))])
        >>> accepted
        [1]
        >>> rejected[0][0]
        'b'
    """
    accepted: list[T] = []
    rejected: list[tuple[str, Exception]] = []
    for source, result in pairs:
        match result:
            case Ok(value):
                accepted.append(value)
            case Err(error):
                rejected.append((source, error))
    return accepted, rejected


__all__ = ["Ok", "Err", "Result", "partition_results"]
