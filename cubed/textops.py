"""String searching, comparison, trimming and splitting helpers.

Searches return an index into the string, or ``None`` when nothing is
found. Comparisons return a negative, zero or positive integer, the
difference of the first pair of code points that differ; the end of a
string compares as code point 0.
"""

from typing import Callable, List, MutableSequence, Optional

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strnlen(s: str, maxlen: int) -> int:
    """Length of ``s``, capped at ``maxlen``."""
    return min(len(s), _non_negative(maxlen, "maxlen"))


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _non_negative(n, "n")
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings in full."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:_non_negative(length, "length")].find(needle)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is at 0."""
    index = haystack.find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def count_words(s: str, sep: str) -> int:
    """Number of non-empty pieces of ``s`` between ``sep`` characters."""
    return len(split(s, sep))


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_single_char(sep)) if word]


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives the empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strndup(s: str, n: int) -> str:
    """A copy of at most the first ``n`` characters of ``s``."""
    return s[:strnlen(s, n)]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each item of ``s`` in place.

    A non-``None`` result replaces the item at that index.
    """
    for index, ch in enumerate(s):
        result = func(index, ch)
        if result is not None:
            s[index] = result