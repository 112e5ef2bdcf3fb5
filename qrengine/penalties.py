# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

This module implements the mask pattern evaluation rules of ISO/IEC 18004.
A candidate matrix (function patterns, data, format string and mask all in
place) is scored on four criteria (N1-N4); the mask with the lowest total
is used for the symbol.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N3: Evaluate finder-like patterns (Rule N3)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    penalty_breakdown: The four scores separately
    compute_mask_penalty: Calculate total penalty score
"""

from typing import List, Sequence, Tuple

# 1:1:3:1:1 finder silhouette with four light modules after / before it
_N3_PATTERNS = (
    (1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0),
    (0, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1),
)
_N3_WINDOW = 11


def penalty_N1(rows: Sequence[Sequence[bool]]) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    This rule penalizes long runs of consecutive modules of the same color
    in both horizontal and vertical directions. Runs of 5 or more modules
    receive penalties: 3 + (run_length - 5).

    Args:
        rows (Sequence[Sequence[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: Penalty score for rule N1
    """
    score = 0
    n = len(rows)

    # Check horizontal runs
    for r in range(n):
        run = 1
        for c in range(1, n):
            if rows[r][c] == rows[r][c-1]:
                run += 1
            else:
                if run >= 5:
                    score += 3 + (run - 5)
                run = 1
        if run >= 5:
            score += 3 + (run - 5)

    # Check vertical runs
    for c in range(n):
        run = 1
        for r in range(1, n):
            if rows[r][c] == rows[r-1][c]:
                run += 1
            else:
                if run >= 5:
                    score += 3 + (run - 5)
                run = 1
        if run >= 5:
            score += 3 + (run - 5)

    return score


def penalty_N2(rows: Sequence[Sequence[bool]]) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Every 2x2 block whose four modules share one color adds 3 points;
    overlapping blocks are counted separately.
    """
    score = 0
    n = len(rows)

    for r in range(n - 1):
        for c in range(n - 1):
            value = rows[r][c]
            if (rows[r][c+1] == value and
                rows[r+1][c] == value and
                rows[r+1][c+1] == value):
                score += 3

    return score


def _count_finder_like(seq: List[int]) -> int:
    """
    Count 11-module windows of ``seq`` matching either N3 pattern.

    A 1:1:3:1:1 run with four light modules on both sides matches both
    patterns and so counts twice.
    """
    hits = 0
    for i in range(len(seq) - _N3_WINDOW + 1):
        window = tuple(seq[i:i + _N3_WINDOW])
        for pattern in _N3_PATTERNS:
            if window == pattern:
                hits += 1
    return hits


def penalty_N3(rows: Sequence[Sequence[bool]]) -> int:
    """
    Calculate penalty for finder-like patterns (Rule N3).

    Each occurrence of dark-light-dark-dark-dark-light-dark followed or
    preceded by four light modules, in any row or column, adds 40 points.
    Windows must lie inside the matrix (there is no quiet zone here).

    Args:
        rows (Sequence[Sequence[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: Penalty score for rule N3
    """
    score = 0
    n = len(rows)

    for r in range(n):
        row = [1 if rows[r][c] else 0 for c in range(n)]
        score += 40 * _count_finder_like(row)

    for c in range(n):
        col = [1 if rows[r][c] else 0 for r in range(n)]
        score += 40 * _count_finder_like(col)

    return score


def penalty_N4(rows: Sequence[Sequence[bool]]) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    The dark percentage is rounded down to a multiple of 5; the penalty is
    10 points per 5% step between that multiple (or the next one up) and
    50%, whichever is closer.

    Example:
        >>> penalty_N4([[True, True, True, False]] * 4)   # 75% dark
        50
    """
    n = len(rows)
    total = n * n
    dark = sum(1 for r in range(n) for c in range(n) if rows[r][c])

    # floor(percent / 5) without float rounding
    step = (dark * 20) // total
    return 10 * min(abs(step - 10), abs(step - 9))


def penalty_breakdown(matrix_bool: Sequence[Sequence[bool]]) -> Tuple[int, int, int, int]:
    rows = [[bool(v) for v in row] for row in matrix_bool]
    return penalty_N1(rows), penalty_N2(rows), penalty_N3(rows), penalty_N4(rows)


def compute_mask_penalty(matrix_bool: Sequence[Sequence[bool]]) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    This function combines all four penalty rules (N1-N4). Lower scores
    indicate fewer scanner-confusing structures.

    Args:
        matrix_bool (Sequence[Sequence[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: Total penalty score (lower is better)
    """
    return sum(penalty_breakdown(matrix_bool))
