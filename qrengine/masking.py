# -*- coding: utf-8 -*-
"""
Data masking.

Eight mask predicates of ``(x, y)`` (x = column, y = row) decide which data
modules get inverted. Every candidate is tried on a scratch copy that also
carries its own format string, scored with the N1-N4 rules, and the lowest
score wins (the lower index on ties).

Functions:
    apply_mask: XOR a mask over every unblocked module
    score_masks: Penalty score of each of the 8 candidates
    select_mask: Pick the best candidate and apply it for real
"""

import logging
from typing import Callable, Dict, List

from .capacity import ECC_LEVEL
from .format_info import format_bits
from .functional_areas import BlockedModules, Matrix
from .penalties import compute_mask_penalty
from .placement import place_format_bits

logger = logging.getLogger(__name__)

MaskFunction = Callable[[int, int], bool]

MASK_PATTERNS: List[MaskFunction] = [
    lambda x, y: (x + y) % 2 == 0,
    lambda x, y: y % 2 == 0,
    lambda x, y: x % 3 == 0,
    lambda x, y: (x + y) % 3 == 0,
    lambda x, y: (y // 2 + x // 3) % 2 == 0,
    lambda x, y: (x * y) % 2 + (x * y) % 3 == 0,
    lambda x, y: ((x * y) % 2 + (x * y) % 3) % 2 == 0,
    lambda x, y: ((x + y) % 2 + (x * y) % 3) % 2 == 0,
]


def apply_mask(matrix: Matrix, mask_pattern: int, blocked: BlockedModules) -> None:
    predicate = MASK_PATTERNS[mask_pattern]
    size = len(matrix)
    for y in range(size):
        row = matrix[y]
        for x in range(size):
            if not blocked.is_blocked(x, y) and predicate(x, y):
                row[x] = not row[x]


def score_masks(matrix: Matrix, blocked: BlockedModules, ecc_level: str = ECC_LEVEL) -> Dict[int, int]:
    """
    Score all eight masks against the unmasked ``matrix`` (left untouched).

    Returns:
        Dict[int, int]: mask index -> total penalty
    """
    scores = {}
    for mask_pattern in range(len(MASK_PATTERNS)):
        scratch = [list(row) for row in matrix]
        place_format_bits(scratch, format_bits(mask_pattern, ecc_level))
        apply_mask(scratch, mask_pattern, blocked)
        scores[mask_pattern] = compute_mask_penalty(scratch)
    return scores


def best_mask(scores: Dict[int, int]) -> int:
    """Lowest score; ties go to the lowest index."""
    selected = -1
    selected_score = None
    for mask_pattern in sorted(scores):
        if selected_score is None or scores[mask_pattern] < selected_score:
            selected = mask_pattern
            selected_score = scores[mask_pattern]
    return selected


def select_mask(matrix: Matrix, blocked: BlockedModules, ecc_level: str = ECC_LEVEL) -> int:
    """
    Choose the mask with the lowest penalty and apply it to ``matrix``.

    Args:
        matrix (Matrix): Matrix with function patterns and data placed
        blocked (BlockedModules): Modules the mask must not touch
        ecc_level (str): ECC level written into the trial format strings

    Returns:
        int: Index of the applied mask (0-7)
    """
    scores = score_masks(matrix, blocked, ecc_level)
    selected = best_mask(scores)
    logger.debug("Mask scores %s -> mask %d", scores, selected)
    apply_mask(matrix, selected, blocked)
    return selected
