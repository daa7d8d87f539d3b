"""Byte-buffer operations over bytearrays, including C-string copies."""

from __future__ import annotations

from typing import Optional

BytesLike = "bytes | bytearray | memoryview"


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def _c_len(data) -> int:
    """Length of a NUL-terminated string, or the whole buffer if no NUL."""
    position = bytes(data).find(b"\0")
    return len(data) if position < 0 else position


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first
    ``n`` bytes, or None."""
    _check_count(n, len(data))
    position = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if position < 0 else position


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    unequal pair, or 0."""
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy the C string ``src`` into ``dest``, at most ``size - 1`` bytes plus
    a terminating NUL. Return the length of ``src``."""
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _c_len(src)
    if size == 0:
        return src_len
    copied = min(src_len, size - 1)
    if copied + 1 > len(dest):
        raise ValueError("destination buffer too small")
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return src_len


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dest`` so that the
    result, NUL included, fits in ``size`` bytes.

    Return the length of the string it tried to build, or
    ``len(src) + size`` when ``dest`` already fills ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = _c_len(dest)
    src_len = _c_len(src)
    if size == 0 or size <= dest_len:
        return src_len + size
    copied = min(src_len, size - dest_len - 1)
    end = dest_len + copied
    if end + 1 > len(dest):
        raise ValueError("destination buffer too small")
    dest[dest_len:end] = bytes(src[:copied])
    dest[end] = 0
    return dest_len + src_len