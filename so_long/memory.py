"""Byte-buffer helpers working on bytearray and other mutable buffers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional


def _check(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: MutableSequence[int], n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: Sequence[int], c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check(n, buf)
    target = c & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch."""
    _check(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: MutableSequence[int], src: Sequence[int], n: int) -> MutableSequence[int]:
    """Copy the first n bytes of src to the start of dest and return dest."""
    _check(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(
    buf: MutableSequence[int], dest_offset: int, src_offset: int, n: int
) -> MutableSequence[int]:
    """Copy n bytes within buf from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check(n)
    if max(dest_offset, src_offset) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memset(buf: MutableSequence[int], c: int, n: int) -> MutableSequence[int]:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf