from collections import Counter
from math import isqrt

import pytest

from contestkit.problems_b2 import (
    fill_red_blue,
    league_winners,
    mystic_permutation,
    nit_operations,
    odd_grasshopper,
    paint_strip_operations,
    perfect_permutation,
    promo_gains,
    rakhsh_revival,
    reading_hours,
    replacement_possible,
    shohag_substring,
    special_permutation,
    stabilize_matrix,
    transfusion_possible,
    xor_sequence_period,
)


def _neighbours(grid, i, j):
    rows, cols = len(grid), len(grid[0])
    for di, dj in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        ni, nj = i + di, j + dj
        yield grid[ni][nj] if 0 <= ni < rows and 0 <= nj < cols else 0


@pytest.mark.parametrize(
    "grid",
    [[[1, 2], [3, 4]], [[7, 4, 5], [1, 8, 10], [5, 2, 3]], [[92, 74], [31, 74]], [[9]]],
)
def test_stabilize_matrix_leaves_no_peaks(grid):
    result = stabilize_matrix(grid)
    assert len(result) == len(grid)
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            assert value <= grid[i][j]
            assert any(value <= other for other in _neighbours(result, i, j))


def test_stabilize_matrix_keeps_flat_grid():
    grid = [[3, 3], [3, 3]]
    assert stabilize_matrix(grid) == [[3, 3], [3, 3]]


@pytest.mark.parametrize("s", ["?R???BR", "???R???", "?", "B", "RRBB?", "????"])
def test_fill_red_blue_fills_and_preserves(s):
    result = fill_red_blue(s)
    assert len(result) == len(s)
    assert set(result) <= {"R", "B"}
    for original, filled in zip(s, result):
        if original != "?":
            assert filled == original


def test_fill_red_blue_all_unknown_alternates():
    result = fill_red_blue("????")
    assert all(a != b for a, b in zip(result, result[1:]))
    assert result[-1] == "R"


@pytest.mark.parametrize("p", [[1, 2, 3], [2, 3, 4, 1], [1, 2], [5, 2, 3, 4, 1]])
def test_mystic_permutation_has_no_matches(p):
    result = mystic_permutation(p)
    assert sorted(result) == list(range(1, len(p) + 1))
    assert all(a != b for a, b in zip(p, result))


def test_mystic_permutation_single_is_impossible():
    assert mystic_permutation([1]) is None


@pytest.mark.parametrize(
    "values, expected",
    [([0, 0, 0], 0), ([1, 2, 3], 1), ([0, 1, 2, 0], 1), ([1, 0, 2], 2), ([0, 3, 0, 4, 0], 2)],
)
def test_nit_operations(values, expected):
    assert nit_operations(values) == expected


@pytest.mark.parametrize("x", [0, 1, 10, -7])
@pytest.mark.parametrize("n", [0, 4, 8, 100])
def test_odd_grasshopper_returns_home_every_four_jumps(x, n):
    assert odd_grasshopper(x, n) == x


def test_odd_grasshopper_first_jump_from_even_goes_left():
    assert odd_grasshopper(0, 1) == -1


def test_paint_strip_operations_monotone():
    results = [paint_strip_operations(n) for n in range(1, 200)]
    assert results[0] == 1
    assert all(0 <= b - a <= 1 for a, b in zip(results, results[1:]))
    assert paint_strip_operations(5) == paint_strip_operations(4) + 1


def test_perfect_permutation_impossible_when_total_square():
    assert perfect_permutation(1) is None
    assert perfect_permutation(8) is None


@pytest.mark.parametrize("n", [k for k in range(2, 40) if k not in (8, 1)])
def test_perfect_permutation_prefixes_not_square(n):
    result = perfect_permutation(n)
    assert sorted(result) == list(range(1, n + 1))
    total = 0
    for value in result:
        total += value
        assert isqrt(total) ** 2 != total


def test_promo_gains():
    prices = [5, 3, 1, 2]
    assert promo_gains(prices, [(4, 4), (2, 1), (1, 1)]) == [11, 3, 5]


def test_rakhsh_revival_no_weak_spots():
    assert rakhsh_revival("11111", 2, 1) == 0


@pytest.mark.parametrize("s", ["10101", "000", "0100010"])
def test_rakhsh_revival_single_spot_windows_count_zeros(s):
    assert rakhsh_revival(s, 1, 1) == s.count("0")


def test_reading_hours():
    levels = [20, 10, 30, 40, 10]
    dimmest, hours = reading_hours(levels, 3)
    assert dimmest == 20
    assert hours == [1, 3, 4]


def test_reading_hours_invariants():
    levels = [5, 9, 1, 9, 3, 7]
    for k in range(1, len(levels) + 1):
        dimmest, hours = reading_hours(levels, k)
        assert len(set(hours)) == k
        assert dimmest == min(levels[h - 1] for h in hours)
        assert dimmest == sorted(levels, reverse=True)[k - 1]


def test_reading_hours_rejects_bad_k():
    with pytest.raises(ValueError):
        reading_hours([1, 2], 3)


@pytest.mark.parametrize(
    "s, r, expected",
    [("11", "0", False), ("01", "1", True), ("1101", "001", True), ("0000", "111", False)],
)
def test_replacement_possible(s, r, expected):
    assert replacement_possible(s, r) is expected


def test_league_winners_valid():
    result = league_winners(5, 2, 0)
    assert result == [2, 2, 4, 4]
    assert result == league_winners(5, 0, 2)


@pytest.mark.parametrize("n, x, y", [(8, 1, 1), (2, 0, 0), (6, 0, 2)])
def test_league_winners_impossible(n, x, y):
    assert league_winners(n, x, y) is None


@pytest.mark.parametrize("n, y", [(7, 3), (10, 1), (9, 4)])
def test_league_winners_counts(n, y):
    result = league_winners(n, 0, y)
    assert len(result) == n - 1
    assert set(Counter(result).values()) == {y}


@pytest.mark.parametrize("s", ["aa", "abc", "dcabaac", "youknowwho", "codeforces"])
def test_shohag_substring_even_distinct(s):
    result = shohag_substring(s)
    assert result in s
    distinct = {result[i:j] for i in range(len(result)) for j in range(i + 1, len(result) + 1)}
    assert len(distinct) % 2 == 0


@pytest.mark.parametrize("s", ["a", "abab", "bababa"])
def test_shohag_substring_none(s):
    assert shohag_substring(s) is None


@pytest.mark.parametrize(
    "values, expected",
    [([1, 1, 1], True), ([3, 2, 1], True), ([1, 2, 5, 4], True), ([1, 6, 6, 1], False)],
)
def test_transfusion_possible(values, expected):
    assert transfusion_possible(values) is expected


def test_transfusion_requires_two_values():
    with pytest.raises(ValueError):
        transfusion_possible([4])


@pytest.mark.parametrize("x, y", [(0, 1), (12, 4), (57, 37), (316560849, 14570961)])
def test_xor_sequence_period_lowest_differing_bit(x, y):
    result = xor_sequence_period(x, y)
    assert result & (result - 1) == 0
    assert (x ^ y) & result
    assert (x ^ y) % result == 0


def test_xor_sequence_period_equal_inputs():
    with pytest.raises(ValueError):
        xor_sequence_period(5, 5)