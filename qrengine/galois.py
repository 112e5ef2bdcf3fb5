# -*- coding: utf-8 -*-
"""
GF(2^8) arithmetic for Reed-Solomon coding.

Elements are integers 0..255 over the QR primitive polynomial
x^8 + x^4 + x^3 + x^2 + 1 (0x11D) with generator alpha = 2. Every non-zero
element is alpha**e for exactly one exponent e in 0..254. The two lookup
tables are built once at import time and never modified afterwards.

Functions:
    exponent_to_value: alpha**e (exponent wraps modulo 255)
    value_to_exponent: discrete log of a non-zero element
    shrink_exponent: reduce an exponent sum into 0..254
    multiply: field product of two elements
"""

from typing import Tuple

PRIMITIVE_POLYNOMIAL = 0x11D
FIELD_ORDER = 255


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp_table = [0] * FIELD_ORDER
    log_table = [0] * 256
    value = 1
    for exponent in range(FIELD_ORDER):
        exp_table[exponent] = value
        log_table[value] = exponent
        value <<= 1
        if value & 0x100:
            value ^= PRIMITIVE_POLYNOMIAL
    return tuple(exp_table), tuple(log_table)


EXP_TABLE, LOG_TABLE = _build_tables()


def shrink_exponent(exponent: int) -> int:
    """Wrap an exponent into 0..254 (alpha**255 == alpha**0)."""
    return exponent % FIELD_ORDER


def exponent_to_value(exponent: int) -> int:
    return EXP_TABLE[exponent % FIELD_ORDER]


def value_to_exponent(value: int) -> int:
    """
    Discrete logarithm of ``value``.

    Raises:
        ValueError: For 0 (log is undefined) or values outside 1..255
    """
    if not 0 < value < 256:
        raise ValueError(f"No alpha exponent for field element {value}")
    return LOG_TABLE[value]


def multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % FIELD_ORDER]
