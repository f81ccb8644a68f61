import io

import pytest

from contestkit.cli import main, problem_names, run
from contestkit.problems_b2 import promo_gains, reading_hours
from contestkit.problems_cd import superultra_permutation

SLEEP_INPUT = """3
1 6 13
8 0
3 6 0
12 30
14 45
6 0
2 23 35
20 15
10 30
"""


def test_sleep_worked_example():
    assert run("sleep", SLEEP_INPUT) == "1 47\n0 0\n10 55\n"


def test_problem_names_sorted_and_include_planned_problems():
    names = problem_names()
    assert names == sorted(names)
    assert {"sleep", "promo", "reading"} <= set(names)
    assert len(names) == len(set(names))


def test_promo_matches_library_function():
    prices = [5, 3, 1, 5, 2]
    queries = [(3, 2), (1, 1), (5, 3)]
    text = "5 3\n5 3 1 5 2\n3 2\n1 1\n5 3\n"
    expected = "".join(f"{gain}\n" for gain in promo_gains(prices, queries))
    assert run("promo", text) == expected


def test_reading_matches_library_function():
    levels = [20, 10, 30, 40, 10]
    level, hours = reading_hours(levels, 3)
    output = run("reading", "5 3\n20 10 30 40 10\n").splitlines()
    assert output[0] == str(level)
    assert output[1].split() == [str(hour) for hour in hours]


def test_impossible_answer_printed_as_minus_one():
    assert superultra_permutation(3) is None
    assert run("superultra-permutation", "1\n3\n") == "-1\n"


def test_little_elephant_single_element():
    assert run("little-elephant", "1\n") == "1\n"


def test_slavic_exam_no_answer():
    assert run("slavic-exam", "1\nab\nabc\n") == "NO\n"


def test_slavic_exam_yes_answer_contains_subsequence():
    lines = run("slavic-exam", "1\n?????\nxbx\n").splitlines()
    assert lines[0] == "YES"
    assert len(lines[1]) == 5
    assert "?" not in lines[1]


def test_multiple_cases_give_one_line_each():
    output = run("string", "3\n000\n101\n1111\n")
    assert output.splitlines() == ["0", "2", "4"]


def test_unknown_problem_raises():
    with pytest.raises(ValueError):
        run("no-such-problem", "1\n")


def test_truncated_input_raises():
    with pytest.raises(ValueError, match="end of input"):
        run("sleep", "1\n2 6 13\n8 0\n")


def test_non_integer_input_raises():
    with pytest.raises(ValueError, match="integer"):
        run("paint-strip", "1\nabc\n")


def test_main_reads_and_writes_files(tmp_path):
    source = tmp_path / "input.txt"
    target = tmp_path / "output.txt"
    source.write_text(SLEEP_INPUT)
    assert main(["sleep", "-i", str(source), "-o", str(target)]) == 0
    assert target.read_text() == run("sleep", SLEEP_INPUT)


def test_main_uses_stdin_and_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n2\n"))
    assert main(["play-never-ends"]) == 0
    assert capsys.readouterr().out == run("play-never-ends", "2\n1\n2\n")


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["sleep"]) == 1
    assert "contestkit" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-problem"])
    assert excinfo.value.code == 2