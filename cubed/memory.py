"""Byte-buffer helpers with C-string semantics.

Buffers that are written to are ``bytearray`` objects changed in place.
Bytes are unsigned, and fill values are reduced modulo 256. A "C string"
held in a buffer ends at its first NUL byte, or at the end of the buffer
if there is none. Reads or writes past the end of a buffer raise
``ValueError``.
"""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _cstr_len(data: BytesLike) -> int:
    index = bytes(data).find(b"\0")
    return len(data) if index < 0 else index


def _check_span(buf: BytesLike, start: int, length: int, name: str) -> None:
    if start < 0 or length < 0:
        raise ValueError(f"{name}: offsets and lengths must not be negative")
    if start + length > len(buf):
        raise ValueError(
            f"{name}: span of {length} bytes at {start} exceeds buffer of {len(buf)}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value``."""
    _check_span(buf, 0, length, "memset")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return memset(buf, 0, length)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(dst, 0, n, "memcpy")
    _check_span(src, 0, n, "memcpy")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    _check_span(buf, dst, length, "memmove")
    _check_span(buf, src, length, "memmove")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(buf: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``."""
    _check_span(buf, 0, n, "memchr")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first pair that differs."""
    _check_span(a, 0, n, "memcmp")
    _check_span(b, 0, n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def realloc(buf: Optional[BytesLike], new_size: int) -> bytearray:
    """A buffer of ``new_size`` bytes keeping as much of ``buf`` as fits.

    Bytes beyond the old contents are zero. ``None`` counts as an empty buffer.
    """
    if new_size < 0:
        raise ValueError("new_size must not be negative")
    resized = bytearray(new_size)
    if buf is not None:
        keep = min(len(buf), new_size)
        resized[:keep] = bytes(buf[:keep])
    return resized


def strlcpy(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy the C string ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns
    the length of ``src``, so a result of ``size`` or more means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _cstr_len(src)
    if size > 0:
        copied = min(src_len, size - 1)
        _check_span(dst, 0, copied + 1, "strlcpy")
        dst[:copied] = bytes(src[:copied])
        dst[copied] = 0
    return src_len


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dst`` within ``size`` bytes.

    Returns the length the full result would have had: the length of the
    string in ``dst`` (counted no further than ``size``) plus that of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = _cstr_len(dst[:size])
    src_len = _cstr_len(src)
    if dst_len < size:
        copied = min(src_len, size - dst_len - 1)
        _check_span(dst, dst_len, copied + 1, "strlcat")
        dst[dst_len:dst_len + copied] = bytes(src[:copied])
        dst[dst_len + copied] = 0
    return dst_len + src_len


def strncpy(src: BytesLike, n: int) -> bytes:
    """Exactly ``n`` bytes: the C string ``src`` cut to ``n`` and padded with NULs."""
    if n < 0:
        raise ValueError("n must not be negative")
    text = bytes(src[:_cstr_len(src)])[:n]
    return text + b"\0" * (n - len(text))