# -*- coding: utf-8 -*-
"""
Reed-Solomon error correction codewords.

The data codewords of a block form the coefficients of a message polynomial;
the ECC codewords are the remainder of ``message * x**n`` divided by the
degree-n generator polynomial ``(x - a**0)(x - a**1)...(x - a**(n-1))``.

Functions:
    build_generator_polynomial: Generator polynomial for n ECC codewords
    message_polynomial: Data bits -> integer polynomial
    compute_ecc_codewords: Long division -> n ECC codewords
"""

import logging
from typing import List, Sequence

from . import galois
from .bitstream import bits_to_int
from .errors import InternalError
from .polynomials import (
    AlphaPolynomial, IntPolynomial, Term, multiply_alpha_polynomials, xor_polynomials,
)

logger = logging.getLogger(__name__)


def build_generator_polynomial(ecc_count: int) -> AlphaPolynomial:
    """
    Build the generator polynomial for ``ecc_count`` ECC codewords.

    Args:
        ecc_count (int): Number of ECC codewords (degree of the result)

    Returns:
        AlphaPolynomial: ``ecc_count + 1`` terms, coefficients in alpha
        notation, highest degree first

    Example:
        >>> build_generator_polynomial(2).coefficients
        [0, 25, 1]
    """
    if ecc_count < 1:
        raise ValueError(f"ecc_count must be positive, got {ecc_count}")

    generator = AlphaPolynomial([Term(0, 1), Term(0, 0)])
    for i in range(1, ecc_count):
        generator = multiply_alpha_polynomials(generator, AlphaPolynomial([Term(0, 1), Term(i, 0)]))
    return generator


def message_polynomial(bits: Sequence[bool], offset: int, bit_count: int) -> IntPolynomial:
    """Read ``bit_count`` bits from ``offset`` as 8-bit coefficients, zero-filling the last one."""
    chunk = list(bits[offset:offset + bit_count])
    if len(chunk) != bit_count:
        raise InternalError(
            f"Block spans bits {offset}..{offset + bit_count} but the stream has {len(bits)}")
    if bit_count % 8:
        chunk.extend([False] * (8 - bit_count % 8))
    return IntPolynomial.from_coefficients(bits_to_int(chunk, i, 8) for i in range(0, len(chunk), 8))


def compute_ecc_codewords(bits: Sequence[bool], offset: int, bit_count: int,
                          generator: AlphaPolynomial) -> List[int]:
    """
    Compute the ECC codewords of one block by polynomial long division.

    Each step takes the leading coefficient of the remainder. A zero lead is
    simply dropped, as if a zero generator had been XOR-ed in. Otherwise its alpha exponent scales the generator, which
    is shifted down one degree per step, converted back to integers and
    XOR-ed into the remainder, cancelling the lead. Division stops when the
    remainder's lowest term reaches degree 0.

    Args:
        bits (Sequence[bool]): Padded data bit stream
        offset (int): First bit of the block
        bit_count (int): Length of the block in bits
        generator (AlphaPolynomial): Result of ``build_generator_polynomial``

    Returns:
        List[int]: ``generator.degree`` codewords, highest degree first

    Raises:
        InternalError: If the division does not terminate or leaves a
            remainder of the wrong degree
    """
    ecc_count = generator.degree
    remainder = message_polynomial(bits, offset, bit_count).shifted(ecc_count)
    divisor = generator.shifted(len(remainder) - 1)

    max_steps = remainder.degree + 1
    step = 0
    while remainder.terms and remainder[-1].exponent > 0:
        if step > max_steps:
            raise InternalError("Reed-Solomon division did not terminate")
        lead = remainder[0]
        if lead.coefficient == 0:
            # Same shape as XOR-ing a zero generator: never fewer than
            # ecc_count terms below the dropped lead
            last_exponent = remainder[-1].exponent
            del remainder.terms[0]
            while len(remainder) < ecc_count:
                last_exponent -= 1
                remainder.terms.append(Term(0, last_exponent))
        else:
            scaled = divisor.scale(galois.value_to_exponent(lead.coefficient), step).to_int()
            remainder = xor_polynomials(remainder, scaled)
        step += 1

    codewords = [0] * ecc_count
    for term in remainder:
        if term.exponent >= ecc_count or term.exponent < 0:
            if term.coefficient:
                raise InternalError(f"Remainder term of degree {term.exponent} left after division")
            continue
        codewords[ecc_count - 1 - term.exponent] = term.coefficient

    logger.debug("ECC for bits %d..%d: %s", offset, offset + bit_count, codewords)
    return codewords
