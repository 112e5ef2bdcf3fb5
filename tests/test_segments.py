# -*- coding: utf-8 -*-
import pytest

from qrengine.bitstream import bits_to_str
from qrengine.capacity import ALPHANUMERIC_CAPACITY, BYTE_CAPACITY, DATA_BITS, fits_capacity
from qrengine.errors import InvalidCharacterError
from qrengine.segments import (
    INVALID_VALUE, alphanumeric_bit_length, alphanumeric_value, byte_bit_length,
    can_encode, encode_alphanumeric, encode_bytes, is_alphanumeric,
)

HELLO_WORLD_BITS = (
    '0010' '000001011'
    '01100001011' '01111000110' '10001011100' '10110111000' '10011010100'
    '001101'
)


def test_hello_world_encoding():
    assert bits_to_str(encode_alphanumeric("HELLO WORLD")) == HELLO_WORLD_BITS


def test_table_values():
    assert alphanumeric_value('0') == 0
    assert alphanumeric_value('A') == 10
    assert alphanumeric_value('Z') == 35
    assert alphanumeric_value(' ') == 36
    assert alphanumeric_value(':') == 44
    assert alphanumeric_value('a') == INVALID_VALUE
    assert alphanumeric_value('?') == INVALID_VALUE


@pytest.mark.parametrize('length', [0, 1, 2, 3, 10, 11, 37, 38])
def test_bit_length_matches_encoding(length):
    text = ('AB' * 20)[:length]
    expected = 4 + 9 + (length // 2) * 11 + (length % 2) * 6
    assert alphanumeric_bit_length(length) == expected
    assert len(encode_alphanumeric(text)) == expected


def test_count_indicator_holds_length():
    bits = encode_alphanumeric("A" * 38)
    assert bits_to_str(bits[:4]) == '0010'
    assert int(bits_to_str(bits[4:13]), 2) == 38


def test_odd_trailing_character_uses_six_bits():
    bits = encode_alphanumeric("A")
    assert bits_to_str(bits[13:]) == '001010'


def test_invalid_character_is_rejected():
    with pytest.raises(InvalidCharacterError) as info:
        encode_alphanumeric("HELLO world")
    assert info.value.index == 6
    assert info.value.char == 'w'
    assert isinstance(info.value, ValueError)


def test_invalid_character_passthrough_distorts_without_error():
    bits = encode_alphanumeric("a", validate=False)
    assert len(bits) == 19
    assert bits_to_str(bits[13:]) == '111111'


def test_alphabet_helpers():
    assert is_alphanumeric("HTTPS://TRKID.COM/Z/PPPPSSSSSSSSNNNNXX")
    assert not is_alphanumeric("https://example.com")
    assert can_encode('$')
    assert not can_encode('#')


def test_byte_segment():
    bits = encode_bytes(b'\x01\xff')
    assert bits_to_str(bits) == '0100' '000000010' '00000001' '11111111'
    assert len(bits) == byte_bit_length(2)


def test_byte_segment_requires_bytes():
    with pytest.raises(TypeError):
        encode_bytes("text")


def test_fits_capacity_boundary():
    assert fits_capacity(DATA_BITS)
    assert fits_capacity(0)
    assert not fits_capacity(DATA_BITS + 1)


def test_alphanumeric_capacity():
    assert fits_capacity(alphanumeric_bit_length(ALPHANUMERIC_CAPACITY))
    assert not fits_capacity(alphanumeric_bit_length(ALPHANUMERIC_CAPACITY + 1))


def test_byte_capacity():
    assert fits_capacity(byte_bit_length(BYTE_CAPACITY))
    assert not fits_capacity(byte_bit_length(BYTE_CAPACITY + 1))
