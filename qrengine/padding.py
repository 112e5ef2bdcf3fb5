# -*- coding: utf-8 -*-
"""
Bit-stream padding to the fixed data capacity.

Functions:
    pad_bits: Terminator, byte alignment and 0xEC/0x11 pad codewords
"""

from .bitstream import BitStream
from .capacity import DATA_BITS

TERMINATOR_BITS = 4

# 0xEC 0x11, written alternately until the capacity is reached
PAD_PATTERN = (True, True, True, False, True, True, False, False,
               False, False, False, True, False, False, False, True)


def pad_bits(bits: BitStream, capacity: int = DATA_BITS) -> BitStream:
    """
    Extend ``bits`` to exactly ``capacity`` bits.

    The steps are: up to four zero terminator bits (fewer when there is not
    enough room), zero fill to the next byte boundary, then the 16-bit pad
    pattern repeated byte by byte. A stream already at or above capacity is
    returned unchanged; overflow is rejected earlier by the generator.

    Args:
        bits (BitStream): Segment bit stream
        capacity (int): Target length in bits (a multiple of 8)

    Returns:
        BitStream: A new list; the input is not modified
    """
    padded = list(bits)
    if len(padded) >= capacity:
        return padded

    index = min(len(padded) + TERMINATOR_BITS, capacity)
    if index % 8:
        index += 8 - index % 8
    index = min(index, capacity)
    padded.extend([False] * (index - len(padded)))

    pattern_index = 0
    while len(padded) < capacity:
        padded.append(PAD_PATTERN[pattern_index])
        pattern_index = (pattern_index + 1) % len(PAD_PATTERN)
    return padded
