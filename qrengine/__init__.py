# -*- coding: utf-8 -*-
"""
QR Engine - Core Module

This package builds version 2 (25x25) QR symbols at error correction level M
from alphanumeric text or raw bytes, without any third-party QR library.

Modules:
    segments: Alphanumeric / byte segment encoding
    padding: Terminator and pad codewords
    galois: GF(2^8) log/antilog tables
    polynomials: Polynomial arithmetic over GF(2^8)
    reed_solomon: Generator polynomial and ECC codewords
    interleaver: Codeword blocks and interleaving
    functional_areas: Function pattern placement and blocked modules
    placement: Data and format information placement
    penalties: Mask pattern evaluation algorithms
    masking: Mask predicates and mask selection
    format_info: BCH-protected format string
    qr_generator: Main QR code generation functions
"""

__version__ = "1.0.0"
__author__ = "QR Engine Team"

from .capacity import ALPHANUMERIC_CAPACITY, BYTE_CAPACITY, ECC_LEVEL, SIZE, VERSION
from .errors import DataOverflowError, InternalError, InvalidCharacterError, QREngineError
from .functional_areas import compute_alignment_centers
from .penalties import compute_mask_penalty
from .qr_generator import evaluate_all_masks, make_qr
from .segments import alphanumeric_bit_length, byte_bit_length, is_alphanumeric
from .symbol import QRSymbol

__all__ = [
    'make_qr',
    'evaluate_all_masks',
    'QRSymbol',
    'compute_mask_penalty',
    'compute_alignment_centers',
    'alphanumeric_bit_length',
    'byte_bit_length',
    'is_alphanumeric',
    'QREngineError',
    'DataOverflowError',
    'InvalidCharacterError',
    'InternalError',
    'VERSION',
    'ECC_LEVEL',
    'SIZE',
    'ALPHANUMERIC_CAPACITY',
    'BYTE_CAPACITY',
]
