"""Byte-buffer operations on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: Buffer, offset: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: negative length {n}")
    if offset < 0 or offset + n > len(buf):
        raise IndexError(
            f"{what}: range [{offset}, {offset + n}) outside buffer of length {len(buf)}"
        )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_span(buf, 0, length, "memset")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Optional[bytearray], src: Optional[Buffer], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dest``.

    When both buffers are missing, nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy: both dest and src are required")
    _check_span(src, 0, n, "memcpy source")
    _check_span(dest, 0, n, "memcpy destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``dest`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_span(dest, src_offset, n, "memmove source")
    _check_span(dest, dest_offset, n, "memmove destination")
    if dest_offset != src_offset:
        dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (modulo 256) among the first ``n``, or None."""
    _check_span(buf, 0, n, "memchr")
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they are equal, otherwise the difference between the first
    pair of bytes that differ, read as unsigned values.
    """
    _check_span(a, 0, n, "memcmp first operand")
    _check_span(b, 0, n, "memcmp second operand")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0