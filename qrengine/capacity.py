# -*- coding: utf-8 -*-
"""
QR Symbol Capacity Module

Fixed symbol configuration for the engine. Only one symbol size is built:
version 2 (25x25 modules) at error correction level M. The block layout is
kept in the general two-group shape of ISO/IEC 18004 so the interleaver and
ECC steps read the same way they would for larger versions.

Constants:
    VERSION, ECC_LEVEL, SIZE: symbol identity
    ECC_INFO: block layout (data codewords, ECC per block, groups)
    DATA_BITS: bit capacity of the data codewords (224)
    REMAINDER_BITS: zero bits appended after interleaving (7)
"""

from typing import NamedTuple


class ECCInfo(NamedTuple):
    """Error correction layout for one version / ECC level pair."""
    version: int
    ecc_level: str
    total_data_codewords: int
    ecc_per_block: int
    blocks_in_group1: int
    codewords_in_group1: int
    blocks_in_group2: int
    codewords_in_group2: int

    @property
    def total_data_bits(self) -> int:
        return self.total_data_codewords * 8

    @property
    def block_count(self) -> int:
        return self.blocks_in_group1 + self.blocks_in_group2


VERSION = 2
ECC_LEVEL = 'M'
SIZE = 21 + (VERSION - 1) * 4

ECC_INFO = ECCInfo(
    version=VERSION,
    ecc_level=ECC_LEVEL,
    total_data_codewords=28,
    ecc_per_block=16,
    blocks_in_group1=1,
    codewords_in_group1=28,
    blocks_in_group2=0,
    codewords_in_group2=0,
)

DATA_BITS = ECC_INFO.total_data_bits
REMAINDER_BITS = 7

# Mode indicators (4 bits) and character count indicator lengths for 1 <= version <= 9
MODE_ALPHANUMERIC = 0b0010
MODE_BYTE = 0b0100
MODE_INDICATOR_BITS = 4
COUNT_INDICATOR_BITS = 9

# 2-bit ECC level identifiers used in the format string
ECC_LEVEL_BITS = {'L': 0b01, 'M': 0b00, 'Q': 0b11, 'H': 0b10}

# Largest payloads that fit into DATA_BITS
ALPHANUMERIC_CAPACITY = 38
BYTE_CAPACITY = 26


def fits_capacity(bit_length: int) -> bool:
    """True if a segment of ``bit_length`` bits fits into the data codewords."""
    return bit_length <= DATA_BITS
