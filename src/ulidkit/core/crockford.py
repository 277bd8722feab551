"""
Crockford Base32 codec for the fixed-width ULID layouts.

Converts unsigned integers of 48, 64, 80 and 128 bits to and from Crockford
Base32 text. Encoding always emits the canonical uppercase alphabet; decoding
is lenient about case and about the visually ambiguous symbols ``O``, ``I``
and ``L``, and strict about width and magnitude.

Manifesto:
    - **Transcription tolerant:** ``o``/``O`` read as ``0``; ``i``/``I``/``l``/``L`` as ``1``
    - **No silent corruption:** Wrong length, unknown symbols and overflow are errors
    - **Fixed layouts only:** Not a general Base32 library
    - **Stateless:** The decoding table is built once and is read-only

Architecture:
    ::

        encode(value, width) ──> "01B3F2133F"      (most significant first)

        decode(text, width)
          1. width must name a Layout                  (else ValueError)
          2. len(text) == layout.chars                 (else InvalidLengthError)
          3. per symbol, left to right:
               unknown symbol          ──> InvalidCharError(char, position)
               first symbol too large  ──> DataTypeOverflowError
          4. value = value * 32 + symbol

        ┌─────────┬───────┬──────┬─────────────┐
        │ Layout  │ chars │ bits │ max leading │
        ├─────────┼───────┼──────┼─────────────┤
        │TIMESTAMP│  10   │  48  │      7      │
        │U64      │  13   │  64  │      7      │
        │RANDOM   │  16   │  80  │     31      │
        │U128     │  26   │ 128  │      7      │
        └─────────┴───────┴──────┴─────────────┘

Examples:
    >>> encode(1481195424879, 10)
    '01B3F2133F'
    >>> decode("01b3f2133f", 10).unwrap()
    1481195424879
    >>> decode("U", 13).is_err()
    True

Guardrails:
    ❌ DON'T: Use this for arbitrary-width Base32 payloads
    ✅ DO: Use the Layout constants (or their char widths)

    ❌ DON'T: Assume decode() raises on bad input
    ✅ DO: Inspect the returned Result

Tags:
    crockford, base32, codec, encoding, parsing, ulidkit
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ulidkit.core.errors import (
    DataTypeOverflowError,
    InvalidCharError,
    InvalidLengthError,
)
from ulidkit.core.result import Err, Ok, Result

ENCODING_DIGITS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

MASK_BITS = 5
MASK = 0b11111


def _build_decoding_table() -> Mapping[str, int]:
    table: dict[str, int] = {}
    for value, digit in enumerate(ENCODING_DIGITS):
        table[digit] = value
        table[digit.lower()] = value
    # Crockford ambiguity remap
    for alias, value in (("O", 0), ("I", 1), ("L", 1)):
        table[alias] = value
        table[alias.lower()] = value
    return MappingProxyType(table)


DECODING_DIGITS: Mapping[str, int] = _build_decoding_table()


@dataclass(frozen=True, slots=True)
class Layout:
    """
    A supported fixed-width integer layout.

    Attributes:
        chars: Number of Base32 symbols
        bits: Width of the target unsigned integer
        max_leading: Largest value the first symbol may take
    """

    chars: int
    bits: int
    max_leading: int

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1


TIMESTAMP = Layout(chars=10, bits=48, max_leading=7)
# 13 symbols carry 65 bits; the leading-symbol cap of 7 is the historical rule.
U64 = Layout(chars=13, bits=64, max_leading=7)
RANDOM = Layout(chars=16, bits=80, max_leading=31)
U128 = Layout(chars=26, bits=128, max_leading=7)

LAYOUTS: Mapping[int, Layout] = MappingProxyType(
    {layout.chars: layout for layout in (TIMESTAMP, U64, RANDOM, U128)}
)


def layout_for(width_chars: int) -> Layout:
    """Look up the layout for a char width; unsupported widths are a programming error."""
    try:
        return LAYOUTS[width_chars]
    except KeyError:
        raise ValueError(
            f"unsupported width {width_chars}; expected one of {sorted(LAYOUTS)}"
        ) from None


def encode(value: int, width_chars: int) -> str:
    """
    Encode ``value`` as exactly ``width_chars`` symbols, zero padded.

    Bits above ``5 * width_chars`` are dropped, mirroring a fixed-size buffer.

    Raises:
        ValueError: If ``value`` is negative
    """
    if value < 0:
        raise ValueError("value must be non-negative")

    chars = []
    for i in range(width_chars):
        shift_bits = (width_chars - i - 1) * MASK_BITS
        chars.append(ENCODING_DIGITS[(value >> shift_bits) & MASK])
    return "".join(chars)


def decode(text: str, width_chars: int) -> Result[int]:
    """
    Decode ``text`` into an unsigned integer of the layout named by ``width_chars``.

    Stops at the first problem found and returns it as an Err; never raises
    for any string input.

    Args:
        text: Candidate symbols, any case
        width_chars: 10, 13, 16 or 26

    Returns:
        Ok(int) or Err(InvalidLengthError | InvalidCharError | DataTypeOverflowError)
    """
    layout = layout_for(width_chars)

    if len(text) != layout.chars:
        return Err(InvalidLengthError().with_context(input=text))

    result = 0
    for position, char in enumerate(text):
        value = DECODING_DIGITS.get(char)
        if value is None:
            return Err(InvalidCharError(char, position).with_context(input=text))
        if position == 0 and value > layout.max_leading:
            return Err(DataTypeOverflowError().with_context(input=text, position=0))
        result = result * 32 + value

    if result > layout.max_value:
        return Err(DataTypeOverflowError().with_context(input=text))
    return Ok(result)


def encode_u64(value: int) -> str:
    return encode(value, U64.chars)


def decode_u64(text: str) -> Result[int]:
    return decode(text, U64.chars)


def encode_u128(value: int) -> str:
    return encode(value, U128.chars)


def decode_u128(text: str) -> Result[int]:
    return decode(text, U128.chars)


__all__ = [
    "ENCODING_DIGITS",
    "DECODING_DIGITS",
    "Layout",
    "TIMESTAMP",
    "U64",
    "RANDOM",
    "U128",
    "LAYOUTS",
    "layout_for",
    "encode",
    "decode",
    "encode_u64",
    "decode_u64",
    "encode_u128",
    "decode_u128",
]
