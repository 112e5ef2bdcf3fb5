# -*- coding: utf-8 -*-
from qrengine.penalties import (
    compute_mask_penalty, penalty_breakdown, penalty_N1, penalty_N2, penalty_N3, penalty_N4,
)


def _grid(size, dark=()):
    rows = [[False] * size for _ in range(size)]
    for r, c in dark:
        rows[r][c] = True
    return rows


def _with_row(size, row_bits):
    rows = _grid(size)
    rows[0] = [c == '1' for c in row_bits]
    return rows


def test_all_dark_5x5():
    rows = [[True] * 5 for _ in range(5)]
    assert penalty_breakdown(rows) == (30, 48, 0, 100)
    assert compute_mask_penalty(rows) == 178


def test_checkerboard_has_no_run_or_block_penalty():
    rows = [[(r + c) % 2 == 0 for c in range(6)] for r in range(6)]
    assert penalty_N1(rows) == 0
    assert penalty_N2(rows) == 0


def test_n1_longer_run():
    rows = [[c < 7 for c in range(8)] if r == 0 else [(r + c) % 2 == 0 for c in range(8)]
            for r in range(8)]
    # row 0: a run of 7 dark modules
    assert penalty_N1(rows) == 5


def test_n2_overlapping_blocks_count_separately():
    rows = [[(r + c) % 2 == 0 for c in range(4)] for r in range(4)]
    rows[0][0] = rows[0][1] = rows[0][2] = True
    rows[1][0] = rows[1][1] = rows[1][2] = True
    assert penalty_N2(rows) == 6


def test_n3_single_pattern():
    assert penalty_N3(_with_row(11, "10111010000")) == 40
    assert penalty_N3(_with_row(11, "00001011101")) == 40


def test_n3_pattern_with_light_on_both_sides_counts_twice():
    assert penalty_N3(_with_row(15, "000010111010000")) == 80


def test_n3_counts_columns():
    rows = _grid(11, dark=[(r, 3) for r, v in enumerate("10111010000") if v == '1'])
    assert penalty_N3(rows) == 40


def test_n3_ignores_short_quiet_run():
    assert penalty_N3(_with_row(11, "10111010001")) == 0


def test_n4_ratios():
    assert penalty_N4(_grid(5, dark=[(0, c) for c in range(5)] + [(1, c) for c in range(5)])) == 10
    assert penalty_N4([[c < 3 for c in range(5)] for _ in range(5)]) == 20
    assert penalty_N4([[c < 2 for c in range(4)] for _ in range(4)]) == 0
    assert penalty_N4(_grid(5)) == 90


def test_accepts_integer_matrix():
    rows = [[1] * 5 for _ in range(5)]
    assert compute_mask_penalty(rows) == 178
