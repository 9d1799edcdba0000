"""Byte-buffer helpers working on bytearray-like objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > length:
        raise IndexError(
            f"{what} span [{offset}, {offset + n}) exceeds buffer of {length} bytes"
        )


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (taken modulo 256)."""
    _check_count(n)
    _check_span(len(buffer), 0, n, "fill")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n)
    target = c & 0xFF
    for index, byte in enumerate(buffer[:n]):
        if byte == target:
            return index
    return None


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, else 0."""
    _check_count(n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n)
    _check_span(len(src), 0, n, "source")
    _check_span(len(dest), 0, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    _check_count(n)
    _check_span(len(buffer), src, n, "source")
    _check_span(len(buffer), dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer