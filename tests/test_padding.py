# -*- coding: utf-8 -*-
from qrengine.bitstream import bits_to_bytes
from qrengine.capacity import DATA_BITS
from qrengine.padding import pad_bits
from qrengine.segments import encode_alphanumeric

TRKID = "HTTPS://TRKID.COM/Z/PPPPSSSSSSSSNNNNXX"


def test_hello_world_pad_codewords():
    padded = pad_bits(encode_alphanumeric("HELLO WORLD"))
    assert len(padded) == DATA_BITS
    assert bits_to_bytes(padded) == bytes(
        [32, 91, 11, 120, 209, 114, 220, 77, 67, 64] + [236, 17] * 9)


def test_padded_length_is_constant():
    for text in ["", "A", "HELLO WORLD", TRKID]:
        assert len(pad_bits(encode_alphanumeric(text))) == DATA_BITS


def test_full_payload_gets_only_short_terminator():
    bits = encode_alphanumeric(TRKID)
    assert len(bits) == 222
    padded = pad_bits(bits)
    assert padded[:222] == bits
    assert padded[222:] == [False, False]


def test_byte_aligned_input_skips_pad_pattern():
    bits = [True] * 216
    padded = pad_bits(bits)
    assert padded[216:] == [False] * 8


def test_empty_stream():
    padded = pad_bits([])
    assert bits_to_bytes(padded) == bytes([0] + [236, 17] * 13 + [236])


def test_at_or_over_capacity_is_untouched():
    full = [True] * DATA_BITS
    assert pad_bits(full) == full
    over = [True] * (DATA_BITS + 6)
    assert pad_bits(over) == over


def test_input_is_not_modified():
    bits = encode_alphanumeric("AB")
    before = list(bits)
    pad_bits(bits)
    assert bits == before


def test_byte_aligned_terminator_goes_straight_to_pad_codewords():
    segment = encode_alphanumeric("/YVYF4258AAYDHL%WGNLL7I")
    assert len(segment) == 140
    packed = bits_to_bytes(pad_bits(segment))
    assert packed[17] & 0x0F == 0
    assert packed[18:] == bytes([236, 17] * 5)


def test_byte_aligned_terminator_plain_stream():
    packed = bits_to_bytes(pad_bits([True] * 140))
    assert packed[17] == 0xF0
    assert packed[18] == 0xEC
    assert packed[19] == 0x11
