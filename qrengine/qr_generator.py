# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Top-level orchestration of the engine: payload -> segment bits -> padding ->
Reed-Solomon ECC -> interleaving -> module placement -> masking -> format
string. The symbol is always version 2 (25x25) at error correction level M.

Functions:
    encode_payload: Validate a payload and build its segment bit stream
    build_codewords: Padded data + ECC, interleaved into the final stream
    make_qr: Generate a QR symbol
    evaluate_all_masks: Score all mask patterns to find the optimal one
"""

import logging
from typing import Dict, Tuple, Union

from .bitstream import BitStream
from .capacity import DATA_BITS, ECC_INFO, SIZE, VERSION, fits_capacity
from .errors import DataOverflowError, InternalError, InvalidCharacterError
from .format_info import format_bits
from .functional_areas import BlockedModules, Matrix, new_matrix, place_function_patterns
from .interleaver import build_codeword_blocks, interleave
from .masking import apply_mask, best_mask, score_masks, select_mask
from .padding import pad_bits
from .placement import place_data_bits, place_format_bits
from .reed_solomon import build_generator_polynomial
from .segments import (
    alphanumeric_bit_length, byte_bit_length, encode_alphanumeric, encode_bytes,
    find_invalid_character,
)
from .symbol import QRSymbol

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray]


def encode_payload(data: Payload) -> BitStream:
    """
    Validate ``data`` and encode it as a single segment.

    Strings use alphanumeric mode, byte buffers use byte mode. All checks
    run before anything is encoded.

    Raises:
        InvalidCharacterError: A string character is outside the alphanumeric alphabet
        DataOverflowError: The segment is longer than the 224 data bits
        TypeError: ``data`` is neither ``str`` nor bytes
    """
    if isinstance(data, str):
        index = find_invalid_character(data)
        if index is not None:
            raise InvalidCharacterError(data[index], index)
        bit_length = alphanumeric_bit_length(len(data))
        if not fits_capacity(bit_length):
            raise DataOverflowError(bit_length, DATA_BITS)
        bits = encode_alphanumeric(data, validate=False)
    elif isinstance(data, (bytes, bytearray)):
        bit_length = byte_bit_length(len(data))
        if not fits_capacity(bit_length):
            raise DataOverflowError(bit_length, DATA_BITS)
        bits = encode_bytes(bytes(data))
    else:
        raise TypeError(f"Payload must be str or bytes, got {type(data).__name__}")

    logger.debug("Encoded %d-unit payload into %d bits", len(data), len(bits))
    return bits


def build_codewords(segment_bits: BitStream) -> BitStream:
    """Pad the segment, add ECC codewords and interleave into the final stream."""
    padded = pad_bits(segment_bits, DATA_BITS)
    if len(padded) != DATA_BITS:
        raise InternalError(f"Padded stream has {len(padded)} bits, expected {DATA_BITS}")
    logger.debug("Padded %d segment bits to %d", len(segment_bits), len(padded))

    generator = build_generator_polynomial(ECC_INFO.ecc_per_block)
    blocks = build_codeword_blocks(padded, ECC_INFO, generator)
    return interleave(padded, blocks, ECC_INFO)


def _unmasked_matrix(data: Payload) -> Tuple[Matrix, BlockedModules]:
    final_bits = build_codewords(encode_payload(data))

    matrix = new_matrix(SIZE)
    blocked = place_function_patterns(matrix, VERSION)
    written = place_data_bits(matrix, final_bits, blocked)
    if written != len(final_bits):
        raise InternalError(f"Placed {written} of {len(final_bits)} bits")
    return matrix, blocked


def _normalize_mask(mask: Union[str, int, None]):
    if mask is None or mask == 'auto':
        return None
    try:
        value = int(mask)
    except (TypeError, ValueError):
        raise ValueError(f"Mask must be 'auto' or 0..7, got {mask!r}") from None
    if not 0 <= value <= 7:
        raise ValueError(f"Mask must be 'auto' or 0..7, got {mask!r}")
    return value


def make_qr(data: Payload, mask: Union[str, int, None] = 'auto') -> QRSymbol:
    """
    Generate a version 2-M QR symbol.

    Args:
        data (Union[str, bytes]): The payload
            - str: alphanumeric mode (0-9, A-Z, space, $%*+-./:), up to 38 chars
            - bytes: byte mode, up to 26 bytes
        mask (Union[str, int]): Mask pattern
            - 'auto': Choose the mask with the lowest N1-N4 penalty
            - int: Use a specific mask pattern (0-7)

    Returns:
        QRSymbol: 25x25 module matrix with its raw packed-bit serialization

    Raises:
        InvalidCharacterError: Text outside the alphanumeric alphabet
        DataOverflowError: Payload does not fit into version 2-M
        ValueError: Invalid mask parameter

    Example:
        >>> qr = make_qr("HTTPS://TRKID.COM/Z/PPPPSSSSSSSSNNNNXX")
        >>> qr.size, len(qr.get_raw_data())
        (25, 79)
    """
    mask_pattern = _normalize_mask(mask)
    matrix, blocked = _unmasked_matrix(data)

    if mask_pattern is None:
        mask_pattern = select_mask(matrix, blocked)
    else:
        apply_mask(matrix, mask_pattern, blocked)

    place_format_bits(matrix, format_bits(mask_pattern))
    logger.debug("Generated version %d symbol with mask %d", VERSION, mask_pattern)
    return QRSymbol(matrix, mask_pattern)


def evaluate_all_masks(data: Payload) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) to find the optimal one.

    The scores are computed on the same unmasked matrix ``make_qr`` uses, so
    ``best_mask`` is the mask ``make_qr(data)`` applies.

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty (0-7)
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score

    Example:
        >>> best, score, scores = evaluate_all_masks("HELLO WORLD")
        >>> best == make_qr("HELLO WORLD").mask
        True
    """
    matrix, blocked = _unmasked_matrix(data)
    scores = score_masks(matrix, blocked)
    selected = best_mask(scores)
    return selected, scores[selected], scores
