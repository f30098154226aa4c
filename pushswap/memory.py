"""Byte-buffer helpers: fill, allocate, search, compare, copy and move."""

from __future__ import annotations

from typing import Optional


def _check(buffer_len: int, count: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"negative count {count}")
    if count > buffer_len:
        raise IndexError(f"{what} holds {buffer_len} bytes, {count} requested")


def mem_set(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low 8 bits)."""
    _check(len(buffer), count, "buffer")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    mem_set(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("negative size")
    return bytearray(count * size)


def mem_chr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the position of the first byte equal to ``value`` among the first ``count``, or None."""
    _check(len(data), count, "data")
    pos = bytes(data[:count]).find(value & 0xFF)
    return None if pos < 0 else pos


def mem_cmp(first: bytes, second: bytes, count: int) -> int:
    """Compare the first ``count`` bytes; return the difference at the first mismatch, else 0."""
    _check(len(first), count, "first")
    _check(len(second), count, "second")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def mem_cpy(dest: Optional[bytearray], src: Optional[bytes], count: int) -> Optional[bytearray]:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src are required")
    _check(len(src), count, "src")
    _check(len(dest), count, "dest")
    dest[:count] = src[:count]
    return dest


def mem_move(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from one offset to another, overlap allowed."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("negative offset")
    _check(len(buffer) - src_offset, count, "source range")
    _check(len(buffer) - dest_offset, count, "destination range")
    if count and dest_offset != src_offset:
        buffer[dest_offset:dest_offset + count] = bytes(buffer[src_offset:src_offset + count])
    return buffer