# SPDX-License-Identifier: MIT
"""Helpers for ASCII digit strings of unbounded length.

CPython refuses int(str) and str(int) conversions beyond
sys.get_int_max_str_digits() (4300 by default). Versions have no upper bound
on their numeric components, so conversions here split long digit runs into
chunks that stay below that limit. The cost is quadratic in the number of
digits.
"""

from __future__ import annotations

import math

# Comfortably below the interpreter's default conversion limit.
_CHUNK_DIGITS = 4000
_CHUNK_LIMIT = 10**_CHUNK_DIGITS
_LOG10_2 = math.log10(2)


def is_numeric(text: str) -> bool:
    """Return True if text is non-empty and made only of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def has_leading_zero(text: str) -> bool:
    """Return True for digit strings like '01' (but not for '0')."""
    return len(text) > 1 and text[0] == "0"


def digits_to_int(digits: str) -> int:
    """Convert an ASCII digit string of any length to an int."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    high = digits_to_int(digits[:-half])
    low = digits_to_int(digits[-half:])
    return high * 10**half + low


def int_to_digits(value: int) -> str:
    """Render an int of any magnitude in base 10."""
    if value < 0:
        return "-" + int_to_digits(-value)
    if value < _CHUNK_LIMIT:
        return str(value)
    # Lower bound on the digit count, so `high` is always non-zero.
    half = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, 10**half)
    return int_to_digits(high) + int_to_digits(low).zfill(half)


def compare_numeric(a: str, b: str) -> int:
    """Compare two digit strings by integer value.

    Leading zeros are ignored, so '007' == '7'. Returns -1, 0 or 1.
    """
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a != b:
        return -1 if a < b else 1
    return 0
