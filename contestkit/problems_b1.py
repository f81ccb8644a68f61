"""Solutions to the first half of the B-level contest problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def strict_teacher_moves(n: int, teachers: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Return, for each of David's starting cells, how many moves the teachers need to catch him."""
    positions = sorted(teachers)
    if not positions:
        raise ValueError("at least one teacher is required")
    answers = []
    for cell in queries:
        index = bisect_left(positions, cell)
        if index == 0:
            answers.append(positions[0] - 1)
        elif index == len(positions):
            answers.append(n - positions[-1])
        else:
            answers.append((positions[index] - positions[index - 1]) // 2)
    return answers


def mocha_beautiful(values: Iterable[int]) -> bool:
    """Return whether two elements exist such that every element is divisible by one of them."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("values must not be empty")
    smallest = ordered[0]
    rest = [value for value in ordered if value % smallest]
    if not rest:
        return True
    divisor = rest[0]
    return all(value % divisor == 0 for value in rest)


def almost_ternary_matrix(n: int, m: int) -> list[list[int]]:
    """Return an ``n`` by ``m`` 0/1 matrix where every cell has exactly two differing neighbours."""
    return [
        [int((row % 4 <= 1) != (col % 4 <= 1)) for col in range(1, m + 1)]
        for row in range(1, n + 1)
    ]


def eversion_count(values: Sequence[int]) -> int:
    """Return how many eversions change the array before it becomes stable."""
    if not values:
        raise ValueError("values must not be empty")
    count = 0
    current = values[-1]
    for value in reversed(values):
        if value > current:
            count += 1
            current = value
    return count


def ban_ban_swaps(n: int) -> list[tuple[int, int]]:
    """Return the fewest swaps (1-based positions) removing "BAN" as a subsequence of "BAN" * n."""
    swaps = []
    left, right = 1, 3 * n
    while left < right:
        swaps.append((left, right))
        left += 3
        right -= 3
    return swaps


def min_lemonade_presses(k: int, slots: Iterable[int]) -> int:
    """Return the presses needed to be sure of ``k`` cans from unlabeled slots holding ``slots`` cans."""
    ordered = sorted(slots)
    presses = 0
    previous = 0
    remaining_slots = len(ordered)
    for cans in ordered:
        batch = (cans - previous) * remaining_slots
        remaining_slots -= 1
        if k <= batch:
            presses += k
            break
        k -= batch
        presses += batch + 1
        previous = cans
    return presses


def clockwork_possible(times: Sequence[int]) -> bool:
    """Return whether the clock chain can be kept running forever."""
    last = len(times) - 1
    return all(time > 2 * max(last - index, index) for index, time in enumerate(times))


def crafting_possible(have: Sequence[int], need: Sequence[int]) -> bool:
    """Return whether the materials can be rebalanced to meet every requirement."""
    pairs = list(zip(have, need, strict=True))
    deficits = [b - a for a, b in pairs if a < b]
    if not deficits:
        return True
    if len(deficits) >= 2:
        return False
    shortfall = deficits[0]
    return all(a - shortfall >= b for a, b in pairs if a >= b)


def div_mod_max(l: int, r: int, a: int) -> int:
    """Return the maximum of ``x // a + x % a`` over ``l <= x <= r``."""
    if a <= 0:
        raise ValueError("a must be positive")
    best_at_r = r // a + r % a
    if l // a == r // a:
        return best_at_r
    return max(best_at_r, r // a - 1 + a - 1)


def death_blessing_time(attacks: Sequence[int], spells: Sequence[int]) -> int:
    """Return the least total time to kill every monster in the row."""
    if len(attacks) != len(spells):
        raise ValueError("attacks and spells must have the same length")
    return sum(attacks) + sum(spells) - max(spells, default=0)


def odd_digits(n: int, d: int) -> list[int]:
    """Return the odd digits dividing the number made of ``n!`` copies of digit ``d``."""
    digits = [1]
    if n >= 3 or d % 3 == 0:
        digits.append(3)
    if d == 5:
        digits.append(5)
    if n >= 3 or d == 7:
        digits.append(7)
    if n >= 6 or d % 9 == 0 or (n >= 3 and d % 3 == 0):
        digits.append(9)
    return digits


def card_game_order(decks: Sequence[Sequence[int]]) -> list[int] | None:
    """Return a 1-based turn order letting every cow play all cards, or ``None``."""
    n = len(decks)
    residues = []
    for cow, deck in enumerate(decks, start=1):
        kinds = {card % n for card in deck}
        if len(kinds) > 1:
            return None
        residue = next(iter(kinds), 0)
        residues.append((residue, cow))
    return [cow for _, cow in sorted(residues)]


def gorilla_min_distinct(values: Iterable[int], k: int) -> int:
    """Return the fewest distinct values left after changing at most ``k`` elements."""
    frequencies = sorted(Counter(values).values())
    for index, frequency in enumerate(frequencies):
        if frequency > k:
            return len(frequencies) - index
        k -= frequency
    return 1


def goblin_deceit_count(s: str) -> int:
    """Return the most "-_-" subsequences obtainable by rearranging ``s``."""
    if len(s) < 3:
        return 0
    underscores = s.count("_")
    dashes = len(s) - underscores
    if underscores == 0 or dashes < 2:
        return 0
    left = (dashes + 1) // 2
    right = dashes - left
    return left * right * underscores


def k_sort_cost(values: Iterable[int]) -> int:
    """Return the fewest coins needed to make the array non-decreasing."""
    largest = 0
    total = 0
    widest = 0
    for value in values:
        largest = max(largest, value)
        gap = largest - value
        total += gap
        widest = max(widest, gap)
    return total + widest


def isosceles_trapezoid(lengths: Iterable[int]) -> tuple[int, int, int, int] | None:
    """Return four sticks forming an isosceles trapezoid of positive area, or ``None``."""
    sticks = sorted(lengths)
    pair_index = None
    for index in range(1, len(sticks)):
        if sticks[index] == sticks[index - 1]:
            pair_index = index
    if pair_index is None:
        return None
    leg = sticks[pair_index]
    del sticks[pair_index - 1 : pair_index + 1]
    for shorter, longer in zip(sticks, sticks[1:]):
        if longer < shorter + 2 * leg:
            return (leg, leg, shorter, longer)
    return None


def can_make_ap(a: int, b: int, c: int) -> bool:
    """Return whether multiplying one of ``a``, ``b``, ``c`` by a positive integer yields an AP."""
    first = 2 * b - c
    if first >= a and first % a == 0 and first != 0:
        return True
    if (c - a) % 2 == 0:
        middle = a + (c - a) // 2
        if middle >= b and middle % b == 0 and middle != 0:
            return True
    last = 2 * b - a
    return last >= c and last % c == 0 and last != 0