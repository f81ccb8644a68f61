"""Solutions to the second half of the B-level contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt


def stabilize_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Lower every cell that is strictly greater than all its neighbours, in row-major order.

    Cells outside the grid count as zero.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    padded = [[0] * (cols + 2)]
    padded.extend([0, *row, 0] for row in grid)
    padded.append([0] * (cols + 2))

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            neighbours = (
                padded[i][j + 1],
                padded[i + 1][j],
                padded[i - 1][j],
                padded[i][j - 1],
            )
            if all(padded[i][j] > value for value in neighbours):
                padded[i][j] = max(neighbours)
    return [row[1:-1] for row in padded[1:-1]]


def fill_red_blue(s: str) -> str:
    """Replace every '?' with 'R' or 'B' so that few adjacent squares share a colour."""
    chars = list(s)
    if not chars:
        return ""
    for index in range(1, len(chars)):
        previous = chars[index - 1]
        if chars[index] == "?" and previous != "?":
            chars[index] = "R" if previous == "B" else "B"
    if chars[-1] == "?":
        chars[-1] = "R"
    for index in range(len(chars) - 2, -1, -1):
        if chars[index] == "?":
            chars[index] = "R" if chars[index + 1] == "B" else "B"
    return "".join(chars)


def mystic_permutation(p: Sequence[int]) -> list[int] | None:
    """Return the smallest permutation differing from ``p`` at every position, or ``None``."""
    n = len(p)
    if n < 1:
        raise ValueError("p must not be empty")
    if n == 1:
        return None
    result = list(range(1, n + 1))
    for index, value in enumerate(p[:-1]):
        if value == result[index]:
            result[index], result[index + 1] = result[index + 1], result[index]
    if p[-1] == result[-1]:
        result[-1], result[-2] = result[-2], result[-1]
    return result


def nit_operations(values: Sequence[int]) -> int:
    """Return the fewest MEX-replacement operations needed to make every value zero."""
    nonzero = [index for index, value in enumerate(values) if value != 0]
    if not nonzero:
        return 0
    inner = values[nonzero[0] : nonzero[-1] + 1]
    return 1 if 0 not in inner else 2


def odd_grasshopper(x: int, n: int) -> int:
    """Return the grasshopper's position after ``n`` jumps starting from ``x``."""
    for step in range(n // 4 * 4 + 1, n + 1):
        if x & 1:
            x += step
        else:
            x -= step
    return x


def paint_strip_operations(n: int) -> int:
    """Return the fewest first-type operations needed to paint a strip of length ``n``."""
    operations = 1
    covered = 1
    while covered < n:
        covered = covered * 2 + 2
        operations += 1
    return operations


def _is_square(value: int) -> bool:
    root = isqrt(value)
    return root * root == value


def perfect_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no prefix sum a perfect square, or ``None``."""
    if n < 1:
        raise ValueError("n must be positive")
    if _is_square(n * (n + 1) // 2):
        return None
    result = list(range(1, n + 1))
    for i in range(1, n):
        if _is_square(i * (i + 1) // 2):
            result[i], result[i - 1] = result[i - 1], result[i]
    return result


def promo_gains(prices: Iterable[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each ``(x, y)`` query, the largest value of free items when buying ``x``."""
    prefix = list(accumulate(sorted(prices, reverse=True), initial=0))
    return [prefix[x] - prefix[x - y] for x, y in queries]


def rakhsh_revival(s: str, m: int, k: int) -> int:
    """Return the fewest strengthening operations so no ``m`` consecutive spots are weak."""
    run = 0
    operations = 0
    for char in s:
        if run < 0:
            run += 1
            continue
        if char == "0":
            run += 1
            if run == m:
                run = -k + 1
                operations += 1
        else:
            run = 0
    return operations


def reading_hours(levels: Sequence[int], k: int) -> tuple[int, list[int]]:
    """Choose ``k`` hours maximising the dimmest light; return it and the 1-based hours."""
    if not 1 <= k <= len(levels):
        raise ValueError("k must be between 1 and the number of hours")
    ranked = sorted((level, hour) for hour, level in enumerate(levels, start=1))
    chosen = ranked[len(ranked) - k :]
    return chosen[0][0], [hour for _, hour in chosen]


def replacement_possible(s: str, r: str) -> bool:
    """Return whether all ``len(s) - 1`` replacements using ``r`` can be carried out."""
    zeros = s.count("0")
    ones = len(s) - zeros
    for char in r[: len(s) - 1]:
        if zeros == 0 or ones == 0:
            return False
        if char == "1":
            zeros -= 1
        else:
            ones -= 1
    return True


def league_winners(n: int, x: int, y: int) -> list[int] | None:
    """Return the winners of the ``n - 1`` games when every player won ``x`` or ``y``, or ``None``."""
    low, high = sorted((x, y))
    if low or not high or (n - 1) % high:
        return None
    return [player for player in range(2, n + 1, high) for _ in range(high)]


def shohag_substring(s: str) -> str | None:
    """Return a substring with an even number of distinct substrings, or ``None``."""
    for first, second in zip(s, s[1:]):
        if first == second:
            return first + second
    for a, b, c in zip(s, s[1:], s[2:]):
        if a != b and a != c and b != c:
            return a + b + c
    return None


def special_permutation(n: int, a: int, b: int) -> list[int] | None:
    """Return a permutation whose left half has minimum ``a`` and right half maximum ``b``."""
    half = n // 2 - 1
    if n - a - (b > a) < half or b - 1 - (a < b) < half:
        return None
    result: list[int] = []
    candidate = n
    while len(result) < half:
        if candidate != b:
            result.append(candidate)
        candidate -= 1
    result.append(a)
    candidate = 1
    while len(result) < n - 1:
        if candidate != a:
            result.append(candidate)
        candidate += 1
    result.append(b)
    return result


def transfusion_possible(values: Sequence[int]) -> bool:
    """Return whether transfusions between neighbours' neighbours can equalise all values."""
    n = len(values)
    if n < 2:
        raise ValueError("at least two values are required")
    odd_sum = sum(values[1::2])
    even_sum = sum(values[::2])
    odd_count = n // 2
    even_count = n - odd_count
    return (
        odd_sum % odd_count == 0
        and even_sum % even_count == 0
        and odd_sum // odd_count == even_sum // even_count
    )


def xor_sequence_period(x: int, y: int) -> int:
    """Return the longest common segment of ``i ^ x`` and ``i ^ y``: the lowest differing bit."""
    diff = x ^ y
    if diff == 0:
        raise ValueError("x and y must differ")
    return diff & -diff