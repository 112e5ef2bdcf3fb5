# -*- coding: utf-8 -*-
"""
Polynomials over GF(2^8).

A polynomial is a list of ``Term(coefficient, exponent)`` pairs kept in
descending exponent order. The coefficient means one of two things, and the
meaning is carried by the class:

    IntPolynomial: coefficients are field elements (0..255)
    AlphaPolynomial: coefficients are alpha exponents (0..254)

Converting between them is always explicit (``to_alpha`` / ``to_int``) and
the arithmetic helpers refuse operands of the wrong kind.

Functions:
    multiply_alpha_polynomials: Product of two alpha-notation polynomials
    xor_polynomials: One long-division step of two integer polynomials
"""

from typing import Dict, Iterable, List, NamedTuple, Type, TypeVar

from . import galois


class Term(NamedTuple):
    coefficient: int
    exponent: int


P = TypeVar('P', bound='Polynomial')


class Polynomial:
    """Common container behaviour; use one of the two subclasses."""

    __slots__ = ('terms',)

    def __init__(self, terms: Iterable[Term] = ()):
        self.terms: List[Term] = [Term(*t) for t in terms]

    @classmethod
    def from_coefficients(cls: Type[P], coefficients: Iterable[int]) -> P:
        """Build from coefficients listed highest degree first."""
        coefficients = list(coefficients)
        top = len(coefficients) - 1
        return cls(Term(c, top - i) for i, c in enumerate(coefficients))

    def __len__(self) -> int:
        return len(self.terms)

    def __getitem__(self, index: int) -> Term:
        return self.terms[index]

    def __iter__(self):
        return iter(self.terms)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.terms == other.terms

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.terms!r})"

    @property
    def degree(self) -> int:
        return self.terms[0].exponent if self.terms else -1

    @property
    def coefficients(self) -> List[int]:
        return [t.coefficient for t in self.terms]

    def sort(self) -> None:
        self.terms.sort(key=lambda t: t.exponent, reverse=True)

    def shifted(self: P, amount: int) -> P:
        """Multiply by x**amount (negative amounts divide)."""
        return type(self)(Term(t.coefficient, t.exponent + amount) for t in self.terms)


class IntPolynomial(Polynomial):
    __slots__ = ()

    def to_alpha(self) -> 'AlphaPolynomial':
        return AlphaPolynomial(
            Term(galois.value_to_exponent(t.coefficient), t.exponent) for t in self.terms)


class AlphaPolynomial(Polynomial):
    __slots__ = ()

    def to_int(self) -> IntPolynomial:
        return IntPolynomial(
            Term(galois.exponent_to_value(t.coefficient), t.exponent) for t in self.terms)

    def scale(self, lead_exponent: int, lower_by: int = 0) -> 'AlphaPolynomial':
        """Multiply every coefficient by alpha**lead_exponent and drop ``lower_by`` degrees."""
        return AlphaPolynomial(
            Term(galois.shrink_exponent(t.coefficient + lead_exponent), t.exponent - lower_by)
            for t in self.terms)


def _require(poly: Polynomial, kind: type, name: str) -> None:
    if not isinstance(poly, kind):
        raise TypeError(f"{name} must be {kind.__name__}, got {type(poly).__name__}")


def multiply_alpha_polynomials(a: AlphaPolynomial, b: AlphaPolynomial) -> AlphaPolynomial:
    """
    Multiply two polynomials in alpha notation.

    Each pair of terms yields alpha**(ca + cb) * x**(ea + eb). Pairs landing
    on the same degree are then merged: converted to integers, XOR-ed, and
    converted back. The result is sorted by descending exponent.

    Example:
        >>> g = AlphaPolynomial([(0, 1), (0, 0)])         # x + 1
        >>> multiply_alpha_polynomials(g, AlphaPolynomial([(0, 1), (1, 0)]))
        AlphaPolynomial([Term(coefficient=0, exponent=2), Term(coefficient=25, exponent=1), Term(coefficient=1, exponent=0)])
    """
    _require(a, AlphaPolynomial, 'a')
    _require(b, AlphaPolynomial, 'b')

    products: List[Term] = []
    for multiplier in b:
        for base in a:
            products.append(Term(galois.shrink_exponent(multiplier.coefficient + base.coefficient),
                                 multiplier.exponent + base.exponent))

    # Collapse like terms
    by_exponent: Dict[int, List[int]] = {}
    for term in products:
        by_exponent.setdefault(term.exponent, []).append(term.coefficient)

    result = AlphaPolynomial()
    for exponent, coefficients in by_exponent.items():
        if len(coefficients) == 1:
            result.terms.append(Term(coefficients[0], exponent))
            continue
        value = 0
        for coefficient in coefficients:
            value ^= galois.exponent_to_value(coefficient)
        # A cancelled term has no alpha exponent; it is simply absent
        if value:
            result.terms.append(Term(galois.value_to_exponent(value), exponent))

    result.sort()
    return result


def xor_polynomials(message: IntPolynomial, other: IntPolynomial) -> IntPolynomial:
    """
    XOR two aligned integer polynomials and drop the leading term.

    Both operands are expected to share the same leading exponent, whose
    coefficient cancels. Terms are paired by position; the result has
    ``max(len(message), len(other)) - 1`` terms with exponents counting
    down from the leading exponent of ``message`` minus one.
    """
    _require(message, IntPolynomial, 'message')
    _require(other, IntPolynomial, 'other')

    if len(message) >= len(other):
        longer, shorter = message, other
    else:
        longer, shorter = other, message

    lead = message[0].exponent
    result = IntPolynomial()
    for i in range(1, len(longer)):
        coefficient = longer[i].coefficient
        if i < len(shorter):
            coefficient ^= shorter[i].coefficient
        result.terms.append(Term(coefficient, lead - i))
    return result
