"""ASCII character classification and case mapping.

Every function accepts either an integer character code or a one-character
string. Classification functions return booleans; case mapping returns a
value of the same kind it was given.
"""

from typing import Union

Char = Union[int, str]

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A
_SPACE_CODES = frozenset(ord(ch) for ch in " \t\n\v\f\r")


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def isspace(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(c) in _SPACE_CODES


def toupper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code