# -*- coding: utf-8 -*-
import pytest

from qrengine.bitstream import bits_to_bytes, bytes_to_bits
from qrengine.capacity import ECC_INFO, ECCInfo
from qrengine.errors import InternalError
from qrengine.interleaver import build_codeword_blocks, interleave, interleaved_length
from qrengine.reed_solomon import build_generator_polynomial, compute_ecc_codewords

HELLO_WORLD_1M = ECCInfo(1, 'M', 16, 10, 1, 16, 0, 0)
HELLO_WORLD_1M_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_1M_ECC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]

# Two short blocks in group 1, one longer block in group 2
TWO_GROUPS = ECCInfo(5, 'Q', 7, 2, 2, 2, 1, 3)


def test_single_block_is_data_then_ecc():
    bits = bytes_to_bits(HELLO_WORLD_1M_DATA)
    blocks = build_codeword_blocks(bits, HELLO_WORLD_1M, build_generator_polynomial(10))

    assert len(blocks) == 1
    assert blocks[0].offset == 0
    assert blocks[0].codeword_count == 16
    assert blocks[0].ecc_words == HELLO_WORLD_1M_ECC

    out = interleave(bits, blocks, HELLO_WORLD_1M, remainder_bits=0)
    assert bits_to_bytes(out) == bytes(HELLO_WORLD_1M_DATA + HELLO_WORLD_1M_ECC)


def test_remainder_bits_are_zero():
    bits = bytes_to_bits(HELLO_WORLD_1M_DATA)
    blocks = build_codeword_blocks(bits, HELLO_WORLD_1M, build_generator_polynomial(10))
    out = interleave(bits, blocks, HELLO_WORLD_1M, remainder_bits=7)
    assert len(out) == 26 * 8 + 7
    assert out[-7:] == [False] * 7


def test_version_2m_stream_length():
    bits = [False] * ECC_INFO.total_data_bits
    blocks = build_codeword_blocks(bits, ECC_INFO, build_generator_polynomial(16))
    assert interleaved_length(blocks, ECC_INFO) == 359
    assert len(interleave(bits, blocks, ECC_INFO)) == 359


def test_two_group_column_order():
    data = [1, 2, 3, 4, 5, 6, 7]
    bits = bytes_to_bits(data)
    generator = build_generator_polynomial(2)
    blocks = build_codeword_blocks(bits, TWO_GROUPS, generator)

    assert [(b.offset, b.length) for b in blocks] == [(0, 16), (16, 16), (32, 24)]
    expected_ecc = [compute_ecc_codewords(bits, b.offset, b.length, generator) for b in blocks]
    assert [b.ecc_words for b in blocks] == expected_ecc

    out = bits_to_bytes(interleave(bits, blocks, TWO_GROUPS, remainder_bits=0))
    ecc_columns = [expected_ecc[b][i] for i in range(2) for b in range(3)]
    assert list(out) == [1, 3, 5, 2, 4, 6, 7] + ecc_columns


def test_generator_degree_mismatch():
    bits = [False] * ECC_INFO.total_data_bits
    with pytest.raises(InternalError):
        build_codeword_blocks(bits, ECC_INFO, build_generator_polynomial(10))
