# -*- coding: utf-8 -*-
"""
Data and format information placement.

Functions:
    data_module_positions: Zig-zag order of the unblocked modules
    place_data_bits: Write the interleaved stream into the matrix
    format_positions: The two module positions of each format bit
    place_format_bits: Write a 15-bit format string into the matrix
"""

from typing import Iterator, List, Sequence, Tuple

from .functional_areas import BlockedModules, Matrix

TIMING_COLUMN = 6


def data_module_positions(blocked: BlockedModules) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(x, y)`` of every unblocked module in placement order.

    Columns are walked right to left in pairs. The vertical timing column is
    skipped by moving the pair one column left. The scan goes upward in the
    first pair and alternates direction afterwards; within a row the right
    column comes first.
    """
    size = blocked.size
    upward = True
    x = size - 1
    while x >= 0:
        if x == TIMING_COLUMN:
            x -= 1
        rows = range(size - 1, -1, -1) if upward else range(size)
        for y in rows:
            for col in (x, x - 1):
                if col >= 0 and not blocked.is_blocked(col, y):
                    yield col, y
        upward = not upward
        x -= 2


def place_data_bits(matrix: Matrix, bits: Sequence[bool], blocked: BlockedModules) -> int:
    """
    Place ``bits`` on the unblocked modules.

    A short stream leaves the remaining modules light; a long one is cut off
    when the modules run out.

    Returns:
        int: Number of bits written
    """
    written = 0
    count = len(bits)
    for x, y in data_module_positions(blocked):
        if written >= count:
            break
        matrix[y][x] = bool(bits[written])
        written += 1
    return written


def format_positions(size: int) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    Module positions ``((x1, y1), (x2, y2))`` for scan positions 0..14.

    Copy 1 runs down column 8 next to the top-left finder and then left
    along row 8; copy 2 runs left along row 8 under the top-right finder and
    then down column 8 beside the bottom-left finder. The timing modules at
    (8, 6) and (6, 8) are stepped over.
    """
    positions = []
    for i in range(15):
        if i < 6:
            first = (8, i)
        elif i < 8:
            first = (8, i + 1)
        elif i == 8:
            first = (7, 8)
        else:
            first = (14 - i, 8)

        if i < 8:
            second = (size - 1 - i, 8)
        else:
            second = (8, size - 15 + i)
        positions.append((first, second))
    return positions


def place_format_bits(matrix: Matrix, format_bits: Sequence[bool]) -> None:
    """
    Write the format string; scan position ``i`` receives bit ``14 - i``.

    ``format_bits[0]`` is the most significant bit of the 15-bit word, so
    position 0 gets the least significant bit.
    """
    if len(format_bits) != 15:
        raise ValueError(f"Format string must have 15 bits, got {len(format_bits)}")
    for i, ((x1, y1), (x2, y2)) in enumerate(format_positions(len(matrix))):
        bit = bool(format_bits[14 - i])
        matrix[y1][x1] = bit
        matrix[y2][x2] = bit
