# -*- coding: utf-8 -*-
"""
Format information encoding.

The format string is 5 information bits (2 bits ECC level, 3 bits mask
pattern) protected by a (15, 5) BCH code and XOR-ed with a fixed mask so it
is never all zeros.

Functions:
    format_bits: 15-bit format string as a list of bools, MSB first
    format_value: The same string as an integer
"""

from typing import List, Tuple

from .bitstream import BitStream, bits_to_int, int_to_bits
from .capacity import ECC_LEVEL, ECC_LEVEL_BITS

FORMAT_LENGTH = 15
INFO_LENGTH = 5
ECC_LENGTH = 10

# x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
FORMAT_GENERATOR = (True, False, True, False, False, True, True, False, True, True, True)
FORMAT_MASK = (True, False, True, False, True, False, False, False,
               False, False, True, False, False, True, False)


def _trim_leading_zeros(bits: BitStream, index: int, count: int) -> Tuple[int, int]:
    while count > 0 and not bits[index]:
        index += 1
        count -= 1
    return index, count


def _write_info_bits(bits: BitStream, ecc_level: str, mask_pattern: int) -> None:
    bits[0:2] = int_to_bits(ECC_LEVEL_BITS[ecc_level], 2)
    bits[2:5] = int_to_bits(mask_pattern, 3)


def format_bits(mask_pattern: int, ecc_level: str = ECC_LEVEL) -> List[bool]:
    """
    Build the BCH-protected format string for ``mask_pattern``.

    The 5 information bits are written at the front of a 15-bit field and
    divided by the generator: after trimming leading zeros, the generator
    is XOR-ed in at the first set bit until at most 10 significant bits are
    left. That remainder is moved to the end of the field, the information
    bits are written again in front of it and the fixed mask is applied.

    Args:
        mask_pattern (int): Mask index 0..7
        ecc_level (str): 'L', 'M', 'Q' or 'H'

    Returns:
        List[bool]: 15 bits, most significant first

    Example:
        >>> format_value(0) == 0b101010000010010
        True
    """
    if not 0 <= mask_pattern <= 7:
        raise ValueError(f"Mask pattern must be 0..7, got {mask_pattern}")
    if ecc_level not in ECC_LEVEL_BITS:
        raise ValueError(f"Unknown ECC level {ecc_level!r}")

    bits = [False] * FORMAT_LENGTH
    _write_info_bits(bits, ecc_level, mask_pattern)

    index, count = _trim_leading_zeros(bits, 0, FORMAT_LENGTH)
    while count > ECC_LENGTH:
        for i, g in enumerate(FORMAT_GENERATOR):
            bits[index + i] ^= g
        index, count = _trim_leading_zeros(bits, index, count)

    # Remainder to the front, then to the tail of the field
    bits = bits[index:] + [False] * index
    shift = FORMAT_LENGTH - count
    bits = [False] * shift + bits[:FORMAT_LENGTH - shift]

    _write_info_bits(bits, ecc_level, mask_pattern)
    return [b != m for b, m in zip(bits, FORMAT_MASK)]


def format_value(mask_pattern: int, ecc_level: str = ECC_LEVEL) -> int:
    return bits_to_int(format_bits(mask_pattern, ecc_level), 0, FORMAT_LENGTH)
