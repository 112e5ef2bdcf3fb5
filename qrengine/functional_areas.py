# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module draws the function patterns of a QR symbol and records which
modules they occupy, according to ISO/IEC 18004. Function patterns include
finder patterns, separators, timing patterns, alignment patterns, the dark
module and the format information strips. Data placement and masking must
leave every recorded module untouched.

Coordinates follow the matrix layout ``matrix[row][col]``; helpers that take
rectangles use ``(x, y, width, height)`` with x = column and y = row.

Functions:
    compute_alignment_centers: Calculate alignment pattern center positions
    place_finder_patterns: Draw the three 7x7 finder patterns
    reserve_separator_areas: Reserve the light strips around finders
    place_alignment_patterns: Draw the 5x5 alignment patterns
    place_timing_patterns: Draw the row 6 / column 6 timing strips
    place_dark_module: Set the always-dark module
    reserve_format_areas: Reserve the format information strips
    place_function_patterns: All of the above, in order
"""

from typing import List

Matrix = List[List[bool]]


class BlockedModules:
    """
    Dense grid of modules reserved for function patterns.

    Rectangles are added while the patterns are drawn; afterwards the grid is
    only read (by data placement and masking).
    """

    def __init__(self, size: int):
        self.size = size
        self._grid = [[False] * size for _ in range(size)]

    def add(self, x: int, y: int, width: int = 1, height: int = 1) -> None:
        for row in range(y, y + height):
            for col in range(x, x + width):
                self._grid[row][col] = True

    def is_blocked(self, x: int, y: int) -> bool:
        return self._grid[y][x]

    def count(self) -> int:
        return sum(sum(row) for row in self._grid)

    def rows(self) -> List[List[bool]]:
        return [list(row) for row in self._grid]


def new_matrix(size: int) -> Matrix:
    return [[False] * size for _ in range(size)]


def compute_alignment_centers(version: int) -> List[int]:
    """
    Calculate the center positions of alignment patterns for a given QR version.

    Alignment patterns are 5x5 modules used to correct for perspective distortion
    in QR codes. They are placed at specific positions based on the QR version.
    Version 1 has no alignment patterns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: List of center coordinates for alignment patterns

    Example:
        >>> compute_alignment_centers(2)
        [6, 18]
        >>> compute_alignment_centers(7)
        [6, 22, 38]
    """
    if version == 1:
        return []

    size = 21 + (version - 1) * 4

    # Number of alignment patterns per row/column
    num = version // 7 + 2

    first = 6
    last = size - 7

    if num == 2:
        return [first, last]

    step = (last - first) / (num - 1)
    return [int(round(first + i * step)) for i in range(num)]


def place_finder_patterns(matrix: Matrix, blocked: BlockedModules) -> None:
    """
    Draw the finder patterns at the top-left, top-right and bottom-left corners.

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111
    """
    size = len(matrix)
    for (r0, c0) in [(0, 0), (0, size - 7), (size - 7, 0)]:
        for r in range(7):
            for c in range(7):
                ring = max(abs(r - 3), abs(c - 3))
                matrix[r0 + r][c0 + c] = ring != 2
        blocked.add(c0, r0, 7, 7)


def reserve_separator_areas(size: int, blocked: BlockedModules) -> None:
    """Reserve the one-module light border around each finder pattern (nothing is drawn)."""
    # Top-left
    blocked.add(7, 0, 1, 8)
    blocked.add(0, 7, 7, 1)
    # Bottom-left
    blocked.add(0, size - 8, 8, 1)
    blocked.add(7, size - 7, 1, 7)
    # Top-right
    blocked.add(size - 8, 0, 1, 8)
    blocked.add(size - 7, 7, 7, 1)


def place_alignment_patterns(matrix: Matrix, blocked: BlockedModules, version: int) -> None:
    """
    Draw every alignment pattern that does not collide with a finder pattern.

    Pattern: 11111
             10001
             10101
             10001
             11111

    Version 2 has exactly one, centered at (18, 18).
    """
    size = len(matrix)
    centers = compute_alignment_centers(version)

    for cy in centers:
        for cx in centers:
            # Skip if alignment would overlap with finder patterns
            if (cy <= 6 and cx <= 6) or (cy <= 6 and cx >= size - 7) or (cy >= size - 7 and cx <= 6):
                continue
            for r in range(-2, 3):
                for c in range(-2, 3):
                    matrix[cy + r][cx + c] = max(abs(r), abs(c)) != 1
            blocked.add(cx - 2, cy - 2, 5, 5)


def place_timing_patterns(matrix: Matrix, blocked: BlockedModules) -> None:
    """Alternate dark/light along row 6 and column 6 between the finder patterns."""
    size = len(matrix)
    for i in range(8, size - 8):
        if i % 2 == 0:
            matrix[6][i] = True
            matrix[i][6] = True
    blocked.add(6, 8, 1, size - 16)
    blocked.add(8, 6, size - 16, 1)


def place_dark_module(matrix: Matrix, blocked: BlockedModules, version: int) -> None:
    row = 4 * version + 9
    matrix[row][8] = True
    blocked.add(8, row)


def reserve_format_areas(size: int, blocked: BlockedModules) -> None:
    """
    Reserve the two copies of the 15-bit format information.

    Version information blocks only exist from version 7 on, so nothing
    else is reserved here.
    """
    blocked.add(8, 0, 1, 6)
    blocked.add(8, 7, 1, 1)
    blocked.add(0, 8, 6, 1)
    blocked.add(7, 8, 2, 1)
    blocked.add(size - 8, 8, 8, 1)
    blocked.add(8, size - 7, 1, 7)


def place_function_patterns(matrix: Matrix, version: int) -> BlockedModules:
    """Run every function-pattern pass in placement order and return the blocked set."""
    size = len(matrix)
    blocked = BlockedModules(size)
    place_finder_patterns(matrix, blocked)
    reserve_separator_areas(size, blocked)
    place_alignment_patterns(matrix, blocked, version)
    place_timing_patterns(matrix, blocked)
    place_dark_module(matrix, blocked, version)
    reserve_format_areas(size, blocked)
    return blocked
