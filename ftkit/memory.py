"""Byte-buffer operations on bytearray and bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in sizes:
        if length > size:
            raise IndexError(f"length {length} exceeds buffer size {size}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Optional[bytearray], src, length: int) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``; return ``dst``.

    When both ``dst`` and ``src`` are None, None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("dst and src must both be buffers")
    _check_length(length, len(dst), len(src))
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``length`` bytes."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference of the first mismatch, else 0."""
    _check_length(length, len(a), len(b))
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0