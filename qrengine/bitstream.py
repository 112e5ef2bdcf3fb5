# -*- coding: utf-8 -*-
"""
Bit stream helpers.

A bit stream is a plain ``List[bool]``, most significant bit first. Each
pipeline stage builds its own list; nothing is shared between stages.
"""

from typing import Iterable, List, Sequence

BitStream = List[bool]


def int_to_bits(value: int, length: int) -> BitStream:
    """Big-endian ``length``-bit representation of ``value``."""
    if value < 0 or value >> length:
        raise ValueError(f"{value} does not fit into {length} bits")
    return [bool((value >> i) & 1) for i in range(length - 1, -1, -1)]


def append_int(bits: BitStream, value: int, length: int) -> None:
    bits.extend(int_to_bits(value, length))


def bits_to_int(bits: Sequence[bool], offset: int = 0, count: int = 8) -> int:
    """Read ``count`` bits starting at ``offset`` as a big-endian integer."""
    value = 0
    for bit in bits[offset:offset + count]:
        value = (value << 1) | int(bool(bit))
    return value


def bits_to_bytes(bits: Sequence[bool]) -> bytes:
    """Pack bits MSB-first; the last byte is zero-filled on the right."""
    out = bytearray((len(bits) + 7) // 8)
    for i, bit in enumerate(bits):
        if bit:
            out[i >> 3] |= 0x80 >> (i & 7)
    return bytes(out)


def bytes_to_bits(data: Iterable[int]) -> BitStream:
    bits: BitStream = []
    for byte in data:
        append_int(bits, byte, 8)
    return bits


def bits_to_str(bits: Iterable[bool]) -> str:
    """Render a bit stream as a '0'/'1' string (debugging and tests)."""
    return ''.join('1' if b else '0' for b in bits)
