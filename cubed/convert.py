"""Conversions between text and integers."""

import re
from typing import Tuple

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_PREFIX_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)")
_DECIMAL = "0123456789"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _leading_number(text: str) -> Tuple[int, int]:
    """Return the sign and magnitude of the decimal number that starts ``text``."""
    match = _ATOI_PATTERN.match(text)
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    return sign, int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0.
    """
    sign, magnitude = _leading_number(text)
    return _wrap_int32(sign * magnitude)


def atol(text: str) -> int:
    """Parse a leading decimal integer, saturating at the 64-bit limits."""
    sign, magnitude = _leading_number(text)
    if magnitude > LONG_MAX:
        return LONG_MAX if sign > 0 else LONG_MIN
    return sign * magnitude


def _digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return -1


def strtol(text: str, base: int = 10) -> Tuple[int, int]:
    """Parse a leading integer in ``base`` and return ``(value, end)``.

    ``end`` is the index just past the last character consumed. Base 0
    picks the base from the prefix: ``0x``/``0X`` for 16, ``0`` for 8,
    otherwise 10. Values out of range saturate at the 64-bit limits.
    """
    if base < 0 or base == 1 or base > 36:
        raise ValueError(f"invalid base: {base}")
    match = _PREFIX_PATTERN.match(text)
    sign = -1 if match.group(1) == "-" else 1
    pos = match.end()
    if base == 0:
        if text[pos:pos + 1] == "0":
            if text[pos + 1:pos + 2] in ("x", "X") and pos + 1 < len(text):
                base = 16
                pos += 2
            else:
                base = 8
                pos += 1
        else:
            base = 10
    result = 0
    for ch in text[pos:]:
        digit = _digit_value(ch)
        if digit < 0 or digit >= base:
            break
        if result > (LONG_MAX - digit) // base:
            return (LONG_MAX if sign > 0 else LONG_MIN), pos
        result = result * base + digit
        pos += 1
    return sign * result, pos


def itoa(n: int) -> str:
    """Render a signed integer in decimal."""
    return str(int(n))


def utoa(n: int) -> str:
    """Render a non-negative integer in decimal."""
    return utoa_base(n, _DECIMAL)


def utoa_base(value: int, base: str) -> str:
    """Render a non-negative integer using the characters of ``base`` as digits."""
    if value < 0:
        raise ValueError("value must not be negative")
    radix = len(base)
    if radix < 2:
        raise ValueError("base needs at least two digits")
    digits = []
    while True:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))