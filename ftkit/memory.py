"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from collections.abc import Sized


def _check_count(n: int, *buffers: Sized) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (low 8 bits) and return it."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf`` and return it."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    out first. Returns ``buf``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n == 0:
        return buf
    _check_count(n, buf[src:], buf[dest:])
    buf[dest:dest + n] = buf[src:src + n]
    return buf


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (low 8 bits) within ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)