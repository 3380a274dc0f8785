import io

import pytest

from classkit.interval import Interval
from classkit.interval_calc import main, run


def test_addition_prints_result():
    results = list(run(["[1, 2]\n", "[3, 4]\n", "+\n"]))
    assert results == [str(Interval(1, 2) + Interval(3, 4))]


def test_operand_order_for_subtraction():
    results = list(run(["[10, 20]", "[1, 2]", "-"]))
    assert results == [str(Interval(10, 20) - Interval(1, 2))]


def test_results_are_reused_on_the_stack():
    lines = ["[1, 2]", "[3, 4]", "+", "[0.5, 1]", "*"]
    expected_sum = Interval(1, 2) + Interval(3, 4)
    results = list(run(lines))
    assert results == [str(expected_sum), str(expected_sum * Interval(0.5, 1))]


def test_division():
    results = list(run(["[2, 6]", "[1, 2]", "/"]))
    assert results == [str(Interval(2, 6) / Interval(1, 2))]


def test_empty_line_stops_processing():
    results = list(run(["[1, 2]", "[3, 4]", "", "+"]))
    assert results == []


def test_pushing_produces_no_output():
    assert list(run(["[1, 2]", "[3, 4]"])) == []


def test_operator_with_too_few_operands():
    with pytest.raises(IndexError):
        list(run(["[1, 2]", "+"]))


def test_malformed_operand():
    with pytest.raises(ValueError):
        list(run(["hello"]))


def test_main_prompts_and_prints(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]\n[3, 4]\n+\n"))
    status = main([])
    captured = capsys.readouterr()
    assert status == 0
    expected = str(Interval(1, 2) + Interval(3, 4))
    assert captured.out == "> > > " + expected + "\n> "


def test_main_stops_at_empty_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]\n\n[3, 4]\n+\n"))
    status = main()
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "> > "


def test_main_reports_stack_underflow(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("*\n"))
    status = main()
    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("error:")