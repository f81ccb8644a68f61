"""Solutions to the harder (C- and D-level) contest problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from functools import reduce
from operator import or_


def storage_keys(n: int, x: int) -> list[int]:
    """Return ``n`` numbers whose bitwise OR is ``x`` and whose MEX is as large as possible."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [x]
    if n == 2:
        return [0, x]

    bits = []
    value = x
    while value > 0:
        bits.append(value & 1)
        value >>= 1
    first_zero = next((i for i, bit in enumerate(bits) if bit == 0), None)

    if first_zero is None:
        filled = min(n, x + 1)
    else:
        filled = min(n, 1 << first_zero)
    result = list(range(filled)) + [0] * (n - filled)

    if reduce(or_, result, 0) != x:
        result[-1] = x
    return result


def mathletes_score(values: Iterable[int], k: int) -> int:
    """Return the number of pairs summing to ``k`` that the score keeper can secure."""
    pool = deque(sorted(value for value in values if value < k))
    score = 0
    while len(pool) >= 2:
        total = pool[0] + pool[-1]
        if total == k:
            score += 1
            pool.popleft()
            pool.pop()
        elif total < k:
            pool.popleft()
        else:
            pool.pop()
    return score


def good_prefixes(values: Iterable[int]) -> int:
    """Return how many prefixes contain an element equal to the sum of the others."""
    total = 0
    largest = 0
    count = 0
    for value in values:
        total += value
        largest = max(largest, value)
        if total - largest == largest:
            count += 1
    return count


def _previous_occurrences(items: Iterable[Hashable]) -> list[int]:
    last_seen: dict[Hashable, int] = {}
    previous = []
    for index, item in enumerate(items):
        previous.append(last_seen.get(item, -1))
        last_seen[item] = index
    return previous


def template_matches(template: Sequence[int], strings: Iterable[str]) -> list[bool]:
    """Return, for each string, whether it matches the numeric template one-to-one."""
    pattern = _previous_occurrences(template)
    return [
        len(s) == len(template) and _previous_occurrences(s) == pattern
        for s in strings
    ]


def exam_readiness(n: int, lists: Sequence[int], known: Sequence[int]) -> str:
    """Return a '0'/'1' string telling for each list (given by its missing question) if it passes."""
    if len(known) == n:
        return "1" * len(lists)
    if n - 1 > len(known):
        return "0" * len(lists)
    missing = n * (n + 1) // 2 - sum(known)
    return "".join("1" if question == missing else "0" for question in lists)


def splitting_items_score(costs: Iterable[int], k: int) -> int:
    """Return Alice's minus Bob's total when Bob may raise costs by at most ``k`` in total."""
    ordered = sorted(costs, reverse=True)
    score = sum(ordered[::2])
    remaining = k
    for alice, bob in zip(ordered[::2], ordered[1::2]):
        boost = min(remaining, alice - bob)
        remaining -= boost
        score -= bob + boost
    return score


def superultra_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n whose adjacent sums are all composite, or ``None``."""
    if n <= 4:
        return None
    evens = [i for i in range(2, n + 1, 2) if i != 4]
    odds = [i for i in range(1, n + 1, 2) if i != 5]
    return [*evens, 4, 5, *odds]


def frog_moves(x: int, y: int, k: int) -> int:
    """Return the fewest alternating jumps (at most ``k`` each) to reach ``(x, y)``."""
    steps_x = -(-x // k)
    steps_y = -(-y // k)
    return max(2 * steps_x - 1, 2 * steps_y)


def two_arrays_possible(a: Iterable[int], b: Iterable[int]) -> bool:
    """Return whether adding 0 or 1 to each element of ``a`` can make it a permutation of ``b``."""
    return all(0 <= y - x <= 1 for x, y in zip(sorted(a), sorted(b)))


def harder_problem(values: Iterable[int]) -> list[int]:
    """Return a sequence of distinct values where each prefix's mode includes the original element."""
    seen: set[int] = set()
    candidate = 1
    result = []
    for value in values:
        if value not in seen:
            chosen = value
        else:
            while candidate in seen:
                candidate += 1
            chosen = candidate
        seen.add(chosen)
        result.append(chosen)
    return result


def slavic_exam(s: str, t: str) -> str | None:
    """Replace each '?' in ``s`` so that ``t`` is a subsequence; ``None`` if impossible."""
    chars = list(s)
    matched = 0
    for index, char in enumerate(chars):
        if matched == len(t):
            break
        if char == t[matched] or char == "?":
            chars[index] = t[matched]
            matched += 1
    if matched < len(t):
        return None
    return "".join(chars).replace("?", "a")


def subtract_min_sortable(values: Iterable[int]) -> bool:
    """Return whether subtracting pairwise minimums can make the sequence non-decreasing."""
    items = iter(values)
    first = next(items, None)
    second = next(items, None)
    if first is None or second is None:
        return True
    carry = second - first
    if carry < 0:
        return False
    for value in items:
        carry = value - carry
        if carry < 0:
            return False
    return True