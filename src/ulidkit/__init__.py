"""
ulidkit - Universally Unique Lexicographically Sortable Identifiers.

Generate, parse and order 128-bit ULIDs: a 48-bit millisecond timestamp
followed by 80 random bits, written as 26 Crockford Base32 characters.

    >>> from ulidkit import Ulid, generate
    >>> ulid = generate()
    >>> Ulid.from_str(str(ulid)) == ulid
    True
"""

__version__ = "1.0.0"

from ulidkit.core import *  # noqa
from ulidkit.core import __all__ as _core_all

__all__ = ["__version__", *_core_all]
