# -*- coding: utf-8 -*-
"""
Codeword blocks and interleaving.

The padded data stream is split into blocks (group 1 blocks first, then
group 2). Each block gets its own ECC codewords. The final stream takes the
data codewords column by column across blocks, then the ECC codewords the
same way, then the remainder bits.

Version 2-M has a single block, so interleaving reduces to data followed by
ECC, but the general two-group walk is kept.
"""

import logging
from typing import List, NamedTuple, Sequence

from .bitstream import BitStream, append_int
from .capacity import ECCInfo, REMAINDER_BITS
from .errors import InternalError
from .polynomials import AlphaPolynomial
from .reed_solomon import compute_ecc_codewords

logger = logging.getLogger(__name__)


class CodewordBlock(NamedTuple):
    """Data span (in bits) of one block inside the padded stream, plus its ECC codewords."""
    offset: int
    length: int
    ecc_words: List[int]

    @property
    def codeword_count(self) -> int:
        return self.length // 8


def build_codeword_blocks(bits: Sequence[bool], ecc_info: ECCInfo,
                          generator: AlphaPolynomial) -> List[CodewordBlock]:
    """Split ``bits`` into blocks and compute the ECC codewords of each."""
    if generator.degree != ecc_info.ecc_per_block:
        raise InternalError(
            f"Generator degree {generator.degree} != {ecc_info.ecc_per_block} ECC codewords per block")

    blocks: List[CodewordBlock] = []
    offset = 0
    groups = ((ecc_info.blocks_in_group1, ecc_info.codewords_in_group1),
              (ecc_info.blocks_in_group2, ecc_info.codewords_in_group2))
    for block_count, codewords in groups:
        group_length = min(codewords * 8, len(bits) - offset)
        for _ in range(block_count):
            ecc_words = compute_ecc_codewords(bits, offset, group_length, generator)
            blocks.append(CodewordBlock(offset, group_length, ecc_words))
            offset += group_length
    return blocks


def interleaved_length(blocks: Sequence[CodewordBlock], ecc_info: ECCInfo,
                       remainder_bits: int = REMAINDER_BITS) -> int:
    max_codewords = max(ecc_info.codewords_in_group1, ecc_info.codewords_in_group2)
    length = 0
    for i in range(max_codewords):
        length += 8 * sum(1 for block in blocks if block.codeword_count > i)
    for i in range(ecc_info.ecc_per_block):
        length += 8 * sum(1 for block in blocks if len(block.ecc_words) > i)
    return length + remainder_bits


def interleave(bits: Sequence[bool], blocks: Sequence[CodewordBlock], ecc_info: ECCInfo,
               remainder_bits: int = REMAINDER_BITS) -> BitStream:
    """
    Merge data and ECC codewords of all blocks into the final bit stream.

    Args:
        bits (Sequence[bool]): Padded data stream the blocks point into
        blocks (Sequence[CodewordBlock]): Output of ``build_codeword_blocks``
        ecc_info (ECCInfo): Block layout
        remainder_bits (int): Zero bits appended at the end

    Returns:
        BitStream: data column-major, then ECC column-major, then remainder

    Raises:
        InternalError: If the result length differs from the precomputed one
    """
    expected = interleaved_length(blocks, ecc_info, remainder_bits)
    max_codewords = max(ecc_info.codewords_in_group1, ecc_info.codewords_in_group2)

    out: BitStream = []
    for i in range(max_codewords):
        for block in blocks:
            if block.codeword_count > i:
                start = block.offset + i * 8
                out.extend(bits[start:start + 8])

    for i in range(ecc_info.ecc_per_block):
        for block in blocks:
            if len(block.ecc_words) > i:
                append_int(out, block.ecc_words[i], 8)

    out.extend([False] * remainder_bits)

    if len(out) != expected:
        raise InternalError(f"Interleaved stream has {len(out)} bits, expected {expected}")
    logger.debug("Interleaved %d blocks into %d bits", len(blocks), len(out))
    return out
