"""Byte-buffer helpers: filling, copying, moving, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"length {length} exceeds buffer of {len(buf)} bytes"
            )


def mem_set(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return it.

    Only the low eight bits of ``value`` are used.
    """
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    mem_set(buf, 0, length)


def mem_copy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(
    buf: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Move ``length`` bytes inside ``buf``; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    end = max(dst_offset, src_offset) + length
    if end > len(buf):
        raise ValueError(f"move of {length} bytes runs past the end of the buffer")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def mem_chr(data: Buffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes.

    Only the low eight bits of ``value`` are used. Returns None when the
    byte does not occur.
    """
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(a: Buffer, b: Buffer, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, taken
    as unsigned values, or 0 when the ranges are equal.
    """
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)