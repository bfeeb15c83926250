"""Tests for the benchmark helpers."""

import pytest

from pointpath import InputError
from pointpath.bench import main, run_once


def test_run_once_agrees():
    res = run_once(40, 90, seed=2, queries=4)
    assert res.mismatches == 0
    assert res.queries == 4
    assert res.relaxation.strategy == "relaxation"
    assert res.priority.strategy == "priority"
    assert res.relaxation.points == 40


def test_run_once_rejects_empty_graph():
    with pytest.raises(InputError):
        run_once(0, 0)


def test_main_prints_table(capsys):
    assert main(["--sizes", "10,20", "15,30", "--trials", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split()[:2] == ["n", "m"]
    assert len(lines) == 3


@pytest.mark.parametrize("trials", ["0", "-1"])
def test_main_rejects_non_positive_trials(capsys, trials):
    with pytest.raises(SystemExit) as exc:
        main(["--sizes", "10,20", "--trials", trials])
    assert exc.value.code == 2
    assert "--trials must be >= 1" in capsys.readouterr().err
