# -*- coding: utf-8 -*-
"""
Data Segment Module

Turns the payload into the mode-tagged bit stream that enters padding and
error correction. Two segment kinds exist:

    alphanumeric: 0-9, A-Z, space and ``$%*+-./:`` packed two characters per
        11 bits (a trailing odd character takes 6 bits)
    byte: an arbitrary buffer, 8 bits per byte

Each segment starts with a 4-bit mode indicator and a 9-bit character count.

Functions:
    alphanumeric_value: Character -> table value (255 if not encodable)
    alphanumeric_bit_length: Bits needed for an alphanumeric segment
    byte_bit_length: Bits needed for a byte segment
    encode_alphanumeric: Build an alphanumeric segment bit stream
    encode_bytes: Build a byte segment bit stream
"""

from typing import Dict, Optional

from .bitstream import BitStream, append_int
from .capacity import (
    COUNT_INDICATOR_BITS, MODE_ALPHANUMERIC, MODE_BYTE, MODE_INDICATOR_BITS,
)
from .errors import InvalidCharacterError

ALPHANUMERIC_CHARS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:'
ALPHANUMERIC_TABLE: Dict[str, int] = {c: i for i, c in enumerate(ALPHANUMERIC_CHARS)}

# Table value for characters outside the alphabet
INVALID_VALUE = 255

HEADER_BITS = MODE_INDICATOR_BITS + COUNT_INDICATOR_BITS


def alphanumeric_value(char: str) -> int:
    return ALPHANUMERIC_TABLE.get(char, INVALID_VALUE)


def can_encode(char: str) -> bool:
    return char in ALPHANUMERIC_TABLE


def find_invalid_character(text: str) -> Optional[int]:
    """Index of the first character that alphanumeric mode cannot encode."""
    for index, char in enumerate(text):
        if char not in ALPHANUMERIC_TABLE:
            return index
    return None


def is_alphanumeric(text: str) -> bool:
    return find_invalid_character(text) is None


def alphanumeric_data_bit_length(length: int) -> int:
    return (length // 2) * 11 + (length % 2) * 6


def alphanumeric_bit_length(length: int) -> int:
    """
    Total bits for an alphanumeric segment of ``length`` characters.

    Includes the mode indicator (4 bits) and the count indicator (9 bits),
    so it can be used for capacity planning without encoding anything.

    Example:
        >>> alphanumeric_bit_length(11)   # "HELLO WORLD"
        74
    """
    return HEADER_BITS + alphanumeric_data_bit_length(length)


def byte_bit_length(length: int) -> int:
    return HEADER_BITS + length * 8


def encode_alphanumeric(text: str, validate: bool = True) -> BitStream:
    """
    Encode ``text`` as an alphanumeric segment.

    Args:
        text (str): Payload restricted to the alphanumeric alphabet
        validate (bool): Reject characters outside the alphabet. With
            ``validate=False`` such characters go through the table as
            ``INVALID_VALUE`` and only the low bits of the overflowing
            field are written, silently distorting the stream.

    Returns:
        BitStream: mode indicator + count indicator + packed data

    Raises:
        InvalidCharacterError: If ``validate`` and a character is not encodable
    """
    if validate:
        index = find_invalid_character(text)
        if index is not None:
            raise InvalidCharacterError(text[index], index)

    bits: BitStream = []
    append_int(bits, MODE_ALPHANUMERIC, MODE_INDICATOR_BITS)
    append_int(bits, len(text), COUNT_INDICATOR_BITS)

    pairs_end = len(text) - len(text) % 2
    for i in range(0, pairs_end, 2):
        value = alphanumeric_value(text[i]) * 45 + alphanumeric_value(text[i + 1])
        append_int(bits, value & 0x7FF, 11)
    if len(text) % 2:
        append_int(bits, alphanumeric_value(text[-1]) & 0x3F, 6)
    return bits


def encode_bytes(data: bytes) -> BitStream:
    """Encode a raw buffer as a byte segment."""
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    bits: BitStream = []
    append_int(bits, MODE_BYTE, MODE_INDICATOR_BITS)
    append_int(bits, len(data), COUNT_INDICATOR_BITS)
    for byte in data:
        append_int(bits, byte, 8)
    return bits
