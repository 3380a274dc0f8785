import io

import pytest

from classkit.date_demo import compare_birthdays, main
from classkit.dates import Date, difference


def test_compare_birthdays_older():
    first = Date(1990, 3, 1)
    second = Date(1991, 3, 1)
    message = compare_birthdays(first, second)
    assert message == (
        f"You are older than your friend by {difference(second, first)} days."
    )
    assert difference(second, first) > 0


def test_compare_birthdays_younger():
    first = Date(2005, 6, 15)
    second = Date(2001, 1, 2)
    message = compare_birthdays(first, second)
    assert message == (
        f"You are younger than your friend by {difference(first, second)} days."
    )


def test_compare_birthdays_same_age():
    assert (
        compare_birthdays(Date(1999, 12, 31), Date(1999, 12, 31))
        == "You and your friend are the same age."
    )


def test_compare_birthdays_is_antisymmetric_in_count():
    a = Date(1980, 2, 28)
    b = Date(1980, 3, 1)
    older = compare_birthdays(a, b)
    younger = compare_birthdays(b, a)
    count = str(difference(b, a))
    assert count in older and count in younger
    assert older.startswith("You are older")
    assert younger.startswith("You are younger")


def test_main_runs_and_fails_on_2100_leap_day(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1990-03-01\n03/01/1991\n"))
    status = main([])
    captured = capsys.readouterr()
    assert status == 1
    lines = captured.out.splitlines()
    assert lines[0] == "|**********2020-09-16|"
    assert lines[1] == "|42******************|"
    assert "What is your birthday? " in captured.out
    assert compare_birthdays(Date(1990, 3, 1), Date(1991, 3, 1)) in captured.out
    assert captured.err.startswith("Unhandled exception:")


def test_main_reports_bad_birthday(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("not-a-date 2000-01-01\n"))
    status = main()
    captured = capsys.readouterr()
    assert status == 1
    assert "Unhandled exception" in captured.err
    assert "same age" not in captured.out


@pytest.mark.parametrize("text", ["2000-01-01 2000-01-01", "1/1/2000 2000-01-01"])
def test_main_same_age(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main()
    captured = capsys.readouterr()
    assert "You and your friend are the same age." in captured.out