"""Command-line runner that reads a problem's input format and prints its answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from contestkit.problems_a import (
    compare_long,
    count_ones,
    fibonacciness,
    kevin_points,
    little_elephant_permutation,
    mainak_max_difference,
    min_new_cards,
    minimal_coprime_count,
    play_never_ends,
    sleep_time,
)
from contestkit.problems_b1 import (
    almost_ternary_matrix,
    ban_ban_swaps,
    can_make_ap,
    card_game_order,
    clockwork_possible,
    crafting_possible,
    death_blessing_time,
    div_mod_max,
    eversion_count,
    goblin_deceit_count,
    gorilla_min_distinct,
    isosceles_trapezoid,
    k_sort_cost,
    min_lemonade_presses,
    mocha_beautiful,
    odd_digits,
    strict_teacher_moves,
)
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
from contestkit.problems_cd import (
    exam_readiness,
    frog_moves,
    good_prefixes,
    harder_problem,
    mathletes_score,
    slavic_exam,
    splitting_items_score,
    storage_keys,
    subtract_min_sortable,
    superultra_permutation,
    template_matches,
    two_arrays_possible,
)


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


_Handler = Callable[[_Tokens], Iterator[str]]
_HANDLERS: dict[str, _Handler] = {}


def _problem(name: str, *, cases: bool = True) -> Callable[[_Handler], _Handler]:
    """Register a solver; with ``cases`` the input starts with a test-case count."""

    def register(solve: _Handler) -> _Handler:
        if cases:

            def handler(tokens: _Tokens) -> Iterator[str]:
                for _ in range(tokens.int()):
                    yield from solve(tokens)

        else:
            handler = solve
        _HANDLERS[name] = handler
        return solve

    return register


def _join(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def _verdict(flag: bool, yes: str = "YES", no: str = "NO") -> str:
    return yes if flag else no


def _sized(tokens: _Tokens) -> list[int]:
    return tokens.ints(tokens.int())


# A-level problems


@_problem("sleep")
def _sleep(tokens: _Tokens) -> Iterator[str]:
    n, hour, minute = tokens.ints(3)
    alarms = [(tokens.int(), tokens.int()) for _ in range(n)]
    yield _join(sleep_time(hour, minute, alarms))


@_problem("fibonacciness")
def _fibonacciness(tokens: _Tokens) -> Iterator[str]:
    yield str(fibonacciness(*tokens.ints(4)))


@_problem("kevin-arithmetic")
def _kevin(tokens: _Tokens) -> Iterator[str]:
    yield str(kevin_points(_sized(tokens)))


@_problem("little-elephant", cases=False)
def _little_elephant(tokens: _Tokens) -> Iterator[str]:
    yield _join(little_elephant_permutation(tokens.int()))


@_problem("long-comparison")
def _long_comparison(tokens: _Tokens) -> Iterator[str]:
    yield compare_long(*tokens.ints(4))


@_problem("mainak-array")
def _mainak(tokens: _Tokens) -> Iterator[str]:
    yield str(mainak_max_difference(_sized(tokens)))


@_problem("minimal-coprime")
def _minimal_coprime(tokens: _Tokens) -> Iterator[str]:
    yield str(minimal_coprime_count(*tokens.ints(2)))


@_problem("new-array")
def _new_array(tokens: _Tokens) -> Iterator[str]:
    result = min_new_cards(*tokens.ints(3))
    yield "-1" if result is None else str(result)


@_problem("string")
def _string(tokens: _Tokens) -> Iterator[str]:
    yield str(count_ones(tokens.word()))


@_problem("play-never-ends")
def _play(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(play_never_ends(tokens.int()))


# First half of the B-level problems


@_problem("strict-teacher")
def _strict_teacher(tokens: _Tokens) -> Iterator[str]:
    n, m, q = tokens.ints(3)
    teachers = tokens.ints(m)
    queries = tokens.ints(q)
    yield from (str(moves) for moves in strict_teacher_moves(n, teachers, queries))


@_problem("mocha-array")
def _mocha(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(mocha_beautiful(_sized(tokens)), "Yes", "No")


@_problem("almost-ternary-matrix")
def _almost_ternary(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.ints(2)
    yield from (_join(row) for row in almost_ternary_matrix(n, m))


@_problem("array-eversion")
def _eversion(tokens: _Tokens) -> Iterator[str]:
    yield str(eversion_count(_sized(tokens)))


@_problem("ban-ban")
def _ban_ban(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    yield str(n // 2 + n % 2)
    yield from (_join(swap) for swap in ban_ban_swaps(n))


@_problem("buying-lemonade")
def _lemonade(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.ints(2)
    yield str(min_lemonade_presses(k, tokens.ints(n)))


@_problem("clockwork")
def _clockwork(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(clockwork_possible(_sized(tokens)))


@_problem("crafting")
def _crafting(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    have = tokens.ints(n)
    need = tokens.ints(n)
    yield _verdict(crafting_possible(have, need))


@_problem("div-mod")
def _div_mod(tokens: _Tokens) -> Iterator[str]:
    yield str(div_mod_max(*tokens.ints(3)))


@_problem("death-blessing")
def _death_blessing(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    attacks = tokens.ints(n)
    spells = tokens.ints(n)
    yield str(death_blessing_time(attacks, spells))


@_problem("digits")
def _digits(tokens: _Tokens) -> Iterator[str]:
    yield _join(odd_digits(*tokens.ints(2)))


@_problem("card-game")
def _card_game(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.ints(2)
    decks = [tokens.ints(m) for _ in range(n)]
    order = card_game_order(decks)
    yield "-1" if order is None else _join(order)


@_problem("gorilla-exam")
def _gorilla(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.ints(2)
    yield str(gorilla_min_distinct(tokens.ints(n), k))


@_problem("goblins")
def _goblins(tokens: _Tokens) -> Iterator[str]:
    tokens.int()
    yield str(goblin_deceit_count(tokens.word()))


@_problem("k-sort")
def _k_sort(tokens: _Tokens) -> Iterator[str]:
    yield str(k_sort_cost(_sized(tokens)))


@_problem("kevin-geometry")
def _kevin_geometry(tokens: _Tokens) -> Iterator[str]:
    sticks = isosceles_trapezoid(_sized(tokens))
    yield "-1" if sticks is None else _join(sticks)


@_problem("make-ap")
def _make_ap(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(can_make_ap(*tokens.ints(3)))


# Second half of the B-level problems


@_problem("matrix-stabilization")
def _matrix(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.ints(2)
    grid = [tokens.ints(m) for _ in range(n)]
    yield from (_join(row) for row in stabilize_matrix(grid))


@_problem("red-and-blue")
def _red_blue(tokens: _Tokens) -> Iterator[str]:
    tokens.int()
    yield fill_red_blue(tokens.word())


@_problem("mystic-permutation")
def _mystic(tokens: _Tokens) -> Iterator[str]:
    result = mystic_permutation(_sized(tokens))
    yield "-1" if result is None else _join(result)


@_problem("nit-destroys")
def _nit(tokens: _Tokens) -> Iterator[str]:
    yield str(nit_operations(_sized(tokens)))


@_problem("odd-grasshopper")
def _grasshopper(tokens: _Tokens) -> Iterator[str]:
    yield str(odd_grasshopper(*tokens.ints(2)))


@_problem("paint-strip")
def _paint_strip(tokens: _Tokens) -> Iterator[str]:
    yield str(paint_strip_operations(tokens.int()))


@_problem("perfecto")
def _perfecto(tokens: _Tokens) -> Iterator[str]:
    result = perfect_permutation(tokens.int())
    yield "-1" if result is None else _join(result)


@_problem("promo", cases=False)
def _promo(tokens: _Tokens) -> Iterator[str]:
    n, q = tokens.ints(2)
    prices = tokens.ints(n)
    queries = [(tokens.int(), tokens.int()) for _ in range(q)]
    yield from (str(gain) for gain in promo_gains(prices, queries))


@_problem("rakhsh-revival")
def _rakhsh(tokens: _Tokens) -> Iterator[str]:
    _, m, k = tokens.ints(3)
    yield str(rakhsh_revival(tokens.word(), m, k))


@_problem("reading", cases=False)
def _reading(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.ints(2)
    level, hours = reading_hours(tokens.ints(n), k)
    yield str(level)
    yield _join(hours)


@_problem("replacement")
def _replacement(tokens: _Tokens) -> Iterator[str]:
    tokens.int()
    s = tokens.word()
    r = tokens.word()
    yield _verdict(replacement_possible(s, r))


@_problem("rule-of-league")
def _league(tokens: _Tokens) -> Iterator[str]:
    winners = league_winners(*tokens.ints(3))
    yield "-1" if winners is None else _join(winners)


@_problem("shohag-strings")
def _shohag(tokens: _Tokens) -> Iterator[str]:
    found = shohag_substring(tokens.word())
    yield "-1" if found is None else found


@_problem("special-permutation")
def _special(tokens: _Tokens) -> Iterator[str]:
    result = special_permutation(*tokens.ints(3))
    yield "-1" if result is None else _join(result)


@_problem("transfusion")
def _transfusion(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(transfusion_possible(_sized(tokens)))


@_problem("xor-sequences")
def _xor(tokens: _Tokens) -> Iterator[str]:
    yield str(xor_sequence_period(*tokens.ints(2)))


# C- and D-level problems


@_problem("storage-keys")
def _storage(tokens: _Tokens) -> Iterator[str]:
    yield _join(storage_keys(*tokens.ints(2)))


@_problem("mathletes")
def _mathletes(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.ints(2)
    yield str(mathletes_score(tokens.ints(n), k))


@_problem("good-prefixes")
def _good_prefixes(tokens: _Tokens) -> Iterator[str]:
    yield str(good_prefixes(_sized(tokens)))


@_problem("numeric-template")
def _numeric_template(tokens: _Tokens) -> Iterator[str]:
    template = _sized(tokens)
    strings = [tokens.word() for _ in range(tokens.int())]
    yield from (_verdict(match) for match in template_matches(template, strings))


@_problem("preparing-exam")
def _exam(tokens: _Tokens) -> Iterator[str]:
    n, m, k = tokens.ints(3)
    lists = tokens.ints(m)
    known = tokens.ints(k)
    yield exam_readiness(n, lists, known)


@_problem("splitting-items")
def _splitting(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.ints(2)
    yield str(splitting_items_score(tokens.ints(n), k))


@_problem("superultra-permutation")
def _superultra(tokens: _Tokens) -> Iterator[str]:
    result = superultra_permutation(tokens.int())
    yield "-1" if result is None else _join(result)


@_problem("freya-frog")
def _frog(tokens: _Tokens) -> Iterator[str]:
    yield str(frog_moves(*tokens.ints(3)))


@_problem("two-arrays")
def _two_arrays(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    a = tokens.ints(n)
    b = tokens.ints(n)
    yield _verdict(two_arrays_possible(a, b))


@_problem("harder-problem")
def _harder(tokens: _Tokens) -> Iterator[str]:
    yield _join(harder_problem(_sized(tokens)))


@_problem("slavic-exam")
def _slavic(tokens: _Tokens) -> Iterator[str]:
    s = tokens.word()
    t = tokens.word()
    result = slavic_exam(s, t)
    if result is None:
        yield "NO"
    else:
        yield "YES"
        yield result


@_problem("subtract-min-sort")
def _subtract_min(tokens: _Tokens) -> Iterator[str]:
    yield _verdict(subtract_min_sortable(_sized(tokens)))


def problem_names() -> list[str]:
    """Return the names of all problems the runner knows, sorted."""
    return sorted(_HANDLERS)


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output text."""
    try:
        handler = _HANDLERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    lines = list(handler(_Tokens(text)))
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Entry point: read a problem's input and write its answers."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from its input format."
    )
    parser.add_argument("problem", choices=problem_names(), help="problem to solve")
    parser.add_argument("-i", "--input", type=Path, help="read input from this file")
    parser.add_argument("-o", "--output", type=Path, help="write output to this file")
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        output = run(args.problem, text)
    except ValueError as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(output)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())