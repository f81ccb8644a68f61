# contestkit

Solutions to short competitive-programming problems. Each problem is a plain
Python function that takes ordinary values and returns the answer, and every
problem can also be run from the command line on its usual input format.

## Installing

```
pip install .
```

## Using the functions

```python
from contestkit.problems_a import sleep_time, compare_long
from contestkit.problems_b1 import can_make_ap
from contestkit.problems_b2 import shohag_substring
from contestkit.problems_cd import frog_moves

sleep_time(6, 13, [(8, 0)])   # (1, 47): hours and minutes until the nearest alarm
compare_long(2, 1, 19, 0)     # ">": 20 compared with 19
can_make_ap(10, 5, 30)        # True
shohag_substring("dcabaac")   # "aa"
frog_moves(9, 11, 3)          # 8
```

The functions are grouped by module:

- `contestkit.problems_a`: `sleep_time`, `fibonacciness`, `kevin_points`,
  `little_elephant_permutation`, `compare_long`, `mainak_max_difference`,
  `minimal_coprime_count`, `min_new_cards`, `count_ones`, `play_never_ends`.
- `contestkit.problems_b1`: `strict_teacher_moves`, `mocha_beautiful`,
  `almost_ternary_matrix`, `eversion_count`, `ban_ban_swaps`,
  `min_lemonade_presses`, `clockwork_possible`, `crafting_possible`,
  `div_mod_max`, `death_blessing_time`, `odd_digits`, `card_game_order`,
  `gorilla_min_distinct`, `goblin_deceit_count`, `k_sort_cost`,
  `isosceles_trapezoid`, `can_make_ap`.
- `contestkit.problems_b2`: `stabilize_matrix`, `fill_red_blue`,
  `mystic_permutation`, `nit_operations`, `odd_grasshopper`,
  `paint_strip_operations`, `perfect_permutation`, `promo_gains`,
  `rakhsh_revival`, `reading_hours`, `replacement_possible`,
  `league_winners`, `shohag_substring`, `special_permutation`,
  `transfusion_possible`, `xor_sequence_period`.
- `contestkit.problems_cd`: `storage_keys`, `mathletes_score`,
  `good_prefixes`, `template_matches`, `exam_readiness`,
  `splitting_items_score`, `superultra_permutation`, `frog_moves`,
  `two_arrays_possible`, `harder_problem`, `slavic_exam`,
  `subtract_min_sortable`.

Where a problem has no answer, the function returns `None` (or `False` for
yes/no questions). Input that the function cannot work with, such as an empty
list where one value is needed, raises `ValueError`.

## Using the command line

The `contestkit` command solves a named problem. It reads the problem's input
from standard input, or from a file given with `-i`/`--input`, and writes the
answers to standard output, or to a file given with `-o`/`--output`:

```
contestkit sleep < input.txt
contestkit reading -i input.txt -o output.txt
```

Most problems expect the input to begin with the number of test cases; the
`little-elephant`, `promo` and `reading` problems take a single case. Answers
that do not exist are printed as `-1` or `NO`, as each problem's format asks.
Malformed input ends the command with a message on standard error and exit
status 1.

`contestkit --help` lists every problem name. From Python,
`contestkit.cli.problem_names()` returns the same names, and
`contestkit.cli.run(problem, text)` solves a problem for an input string and
returns the output as a string.

## Running the tests

```
pip install ".[test]"
pytest
```