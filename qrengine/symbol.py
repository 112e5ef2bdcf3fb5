# -*- coding: utf-8 -*-
"""
The finished QR symbol.
"""

from typing import Iterable, List, Sequence

from .bitstream import bits_to_bytes
from .capacity import ECC_LEVEL, VERSION


class QRSymbol:
    """
    Immutable module matrix of a generated symbol.

    Attributes:
        matrix: rows of booleans (True = dark), ``matrix[row][col]``
        version: symbol version (always 2)
        ecc_level: error correction level (always 'M')
        mask: mask pattern applied to the data modules
    """

    __slots__ = ('matrix', 'version', 'ecc_level', 'mask')

    def __init__(self, rows: Iterable[Sequence[bool]], mask: int,
                 version: int = VERSION, ecc_level: str = ECC_LEVEL):
        matrix = tuple(tuple(bool(v) for v in row) for row in rows)
        if any(len(row) != len(matrix) for row in matrix):
            raise ValueError("Module matrix must be square")
        object.__setattr__(self, 'matrix', matrix)
        object.__setattr__(self, 'version', version)
        object.__setattr__(self, 'ecc_level', ecc_level)
        object.__setattr__(self, 'mask', mask)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QRSymbol):
            return NotImplemented
        return (self.matrix, self.mask, self.version, self.ecc_level) == \
            (other.matrix, other.mask, other.version, other.ecc_level)

    def __hash__(self) -> int:
        return hash((self.matrix, self.mask, self.version, self.ecc_level))

    def __repr__(self) -> str:
        return f"<QRSymbol version={self.version}-{self.ecc_level} mask={self.mask} size={self.size}>"

    @property
    def size(self) -> int:
        return len(self.matrix)

    def get_raw_data(self) -> bytes:
        """All rows concatenated MSB-first, zero-padded to a whole byte (79 bytes for 25x25)."""
        return bits_to_bytes([module for row in self.matrix for module in row])

    def hex(self) -> str:
        return self.get_raw_data().hex().upper()

    def rows_as_strings(self) -> List[str]:
        return [''.join('1' if module else '0' for module in row) for row in self.matrix]

    def to_text(self, border: int = 4, dark: str = '##', light: str = '  ') -> str:
        """Plain-text dump of the modules surrounded by ``border`` light modules."""
        width = self.size + 2 * border
        blank = light * width
        lines = [blank] * border
        for row in self.matrix:
            lines.append(light * border + ''.join(dark if m else light for m in row) + light * border)
        lines.extend([blank] * border)
        return '\n'.join(lines)

    def dark_count(self) -> int:
        return sum(sum(row) for row in self.matrix)

