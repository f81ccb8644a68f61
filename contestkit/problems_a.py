"""Solutions to the introductory (A-level) contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

_MINUTES_PER_DAY = 24 * 60


def sleep_time(hour: int, minute: int, alarms: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Return (hours, minutes) until the nearest alarm rings after ``hour:minute``."""
    now = hour * 60 + minute
    waits = ((h * 60 + m - now) % _MINUTES_PER_DAY for h, m in alarms)
    shortest = min(waits, default=None)
    if shortest is None:
        raise ValueError("at least one alarm is required")
    return divmod(shortest, 60)


def fibonacciness(a1: int, a2: int, a4: int, a5: int) -> int:
    """Return the best number of Fibonacci-like positions when choosing a3."""
    middle = a1 + a2
    by_sum = 1 + (middle + a2 == a4) + (a4 + middle == a5)

    middle = a4 - a2
    by_difference = (a1 + a2 == middle) + (a2 + middle == a4) + (middle + a4 == a5)
    return max(by_sum, by_difference)


def kevin_points(values: Iterable[int]) -> int:
    """Return the maximum number of points Kevin can earn by rearranging ``values``."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    odd = sum(1 for value in items if value % 2)
    even = len(items) - odd
    return odd - 1 if even == 0 else odd + 1


def little_elephant_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n that the recursive sort turns into sorted order."""
    if n < 1:
        raise ValueError("n must be positive")
    return [n, *range(1, n)]


def compare_long(x1: int, p1: int, x2: int, p2: int) -> str:
    """Compare ``x1`` followed by ``p1`` zeros with ``x2`` followed by ``p2`` zeros.

    Returns one of ``"<"``, ``">"`` or ``"="``.
    """
    shift = min(p1, p2)
    p1 -= shift
    p2 -= shift
    if p1 >= 7:
        return ">"
    if p2 >= 7:
        return "<"
    left = x1 * 10**p1
    right = x2 * 10**p2
    if left < right:
        return "<"
    if left > right:
        return ">"
    return "="


def mainak_max_difference(values: Sequence[int]) -> int:
    """Return the largest ``a[-1] - a[0]`` reachable by rotating one subarray once."""
    if not values:
        raise ValueError("values must not be empty")
    first, last = values[0], values[-1]
    candidates = [last - first]
    candidates.extend(a - b for a, b in pairwise(values))
    candidates.extend(value - first for value in values[1:])
    candidates.extend(last - value for value in values[:-1])
    return max(candidates)


def minimal_coprime_count(l: int, r: int) -> int:
    """Return the number of minimal coprime segments inside ``[l, r]``."""
    if l == 1 and r == 1:
        return 1
    return r - l


def min_new_cards(n: int, k: int, p: int) -> int | None:
    """Return the fewest cards (values within ``[-p, p]``) giving total ``k``.

    ``None`` means the total cannot be reached with at most ``n`` cards.
    """
    target = abs(k)
    if n * p < target:
        return None
    return (target + p - 1) // p


def count_ones(s: str) -> int:
    """Return the number of operations needed to turn a binary string into zeros."""
    return s.count("1")


def play_never_ends(k: int) -> bool:
    """Return whether the k-th match can be played by the two initial spectators."""
    return (k - 1) % 3 == 0