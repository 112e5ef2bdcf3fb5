# -*- coding: utf-8 -*-
import pytest

from qrengine.bitstream import bytes_to_bits
from qrengine.reed_solomon import (
    build_generator_polynomial, compute_ecc_codewords, message_polynomial,
)

HELLO_WORLD_1M_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_1M_ECC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_generator_for_two_words():
    assert build_generator_polynomial(2).coefficients == [0, 25, 1]


def test_generator_for_ten_words():
    generator = build_generator_polynomial(10)
    assert generator.coefficients == [0, 251, 67, 46, 61, 118, 70, 64, 94, 32, 45]
    assert [t.exponent for t in generator] == list(range(10, -1, -1))


def test_generator_for_sixteen_words():
    generator = build_generator_polynomial(16)
    assert generator.degree == 16
    assert len(generator) == 17
    assert generator.coefficients[0] == 0
    assert generator.coefficients[1] == 120
    assert generator.coefficients[-1] == 120


def test_generator_rejects_non_positive_count():
    with pytest.raises(ValueError):
        build_generator_polynomial(0)


def test_hello_world_ecc():
    bits = bytes_to_bits(HELLO_WORLD_1M_DATA)
    ecc = compute_ecc_codewords(bits, 0, len(bits), build_generator_polynomial(10))
    assert ecc == HELLO_WORLD_1M_ECC


def test_ecc_is_deterministic():
    bits = bytes_to_bits(range(28))
    generator = build_generator_polynomial(16)
    first = compute_ecc_codewords(bits, 0, 224, generator)
    second = compute_ecc_codewords(bits, 0, 224, generator)
    assert first == second
    assert len(first) == 16
    assert all(0 <= c <= 255 for c in first)


def test_offset_selects_block():
    bits = [True] * 8 + bytes_to_bits(HELLO_WORLD_1M_DATA)
    ecc = compute_ecc_codewords(bits, 8, 128, build_generator_polynomial(10))
    assert ecc == HELLO_WORLD_1M_ECC


def test_leading_zero_codeword_does_not_change_remainder():
    bits = bytes_to_bits([0] + HELLO_WORLD_1M_DATA)
    ecc = compute_ecc_codewords(bits, 0, len(bits), build_generator_polynomial(10))
    assert ecc == HELLO_WORLD_1M_ECC


def test_more_zero_leads_than_ecc_words():
    generator = build_generator_polynomial(10)
    short = compute_ecc_codewords(bytes_to_bits([0x20, 0x5B]), 0, 16, generator)
    padded = compute_ecc_codewords(bytes_to_bits([0] * 12 + [0x20, 0x5B]), 0, 112, generator)
    assert padded == short
    assert any(short)


def test_zero_message_has_zero_ecc():
    bits = bytes_to_bits([0] * 28)
    assert compute_ecc_codewords(bits, 0, 224, build_generator_polynomial(16)) == [0] * 16


def test_partial_last_codeword_is_zero_filled():
    generator = build_generator_polynomial(10)
    a = compute_ecc_codewords(bytes_to_bits([0xAB, 0xC0]), 0, 12, generator)
    b = compute_ecc_codewords(bytes_to_bits([0xAB, 0xCF]), 0, 12, generator)
    assert a == b
    assert message_polynomial(bytes_to_bits([0xAB, 0xCF]), 0, 12).coefficients == [0xAB, 0xC0]
