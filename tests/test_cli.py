import itertools

import pytest

from pushswap.cli import main, solve
from pushswap.parsing import InputError
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        assert getattr(stacks, name)()
    return stacks


def test_solve_three_from_single_argument():
    assert solve(["3 2 1"]) == ["sa", "rra"]


def test_solve_sorted_input_is_empty():
    assert solve(["1", "2", "3"]) == []


@pytest.mark.parametrize(
    "args",
    [
        [],
        [""],
        [" "],
        ["1", "a"],
        ["1 2 2"],
        ["4", "4"],
        ["2147483648"],
        ["1 2 "],
        ["1  2"],
    ],
)
def test_solve_rejects_bad_input(args):
    with pytest.raises(InputError):
        solve(args)


def test_solve_every_permutation_of_five():
    values = [-7, 0, 3, 42, 100]
    for perm in itertools.permutations(values):
        args = [str(v) for v in perm]
        operations = solve(args)
        assert _replay(list(perm), operations).a == sorted(values)


@pytest.mark.parametrize(
    "values",
    [
        [50, 40, 30, 20, 10, 0],
        [-1, -10, 0, 5, 9, 100],
    ],
)
def test_solve_large_input_sorts(values):
    operations = solve([str(v) for v in values])
    replayed = _replay(values, operations)
    assert replayed.a == sorted(values)
    assert replayed.b == []


def test_solve_same_result_from_one_or_many_arguments():
    assert solve(["5 1 4 2 3"]) == solve(["5", "1", "4", "2", "3"])


def test_main_prints_operations(capsys):
    assert main(["2", "1", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_reports_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments_is_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_output_replays_to_sorted(capsys):
    values = [50, 40, 30, 20, 10, 0]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay(values, lines).a == sorted(values)