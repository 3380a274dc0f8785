"""Interactive demonstration of the Date class: formatting, birthdays, leap years."""

from __future__ import annotations

import copy
import sys
from typing import Sequence

from classkit.dates import Date, difference, read_date


def compare_birthdays(first: Date, second: Date) -> str:
    """Describe how the owner of ``first`` compares in age with the owner of ``second``."""
    if first < second:
        return f"You are older than your friend by {difference(second, first)} days."
    if first > second:
        return f"You are younger than your friend by {difference(first, second)} days."
    return "You and your friend are the same age."


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration, reading two birthdays from standard input."""
    out = sys.stdout
    try:
        today = Date(2020, 9, 15)
        tomorrow = copy.copy(today)
        tomorrow.advance()

        out.write(f"|{tomorrow:*>20}|\n")
        out.write(f"|{42:*<20}|\n")

        out.write("What is your birthday? ")
        out.flush()
        user1_birthday = read_date(sys.stdin)
        out.write("What is your friend's birthday? ")
        out.flush()
        user2_birthday = read_date(sys.stdin)
        out.write(compare_birthdays(user1_birthday, user2_birthday) + "\n")

        # 2000 is a leap year because of the 400 year rule.
        today.set_from_string("2000-02-29")
        if today != Date(2000, 2, 29):
            sys.stderr.write("ERROR: today != Date(2000, 2, 29)\n")
            return 1

        # 2100 is not a leap year because of the 100 year rule; this raises.
        today.set_from_string("2100-02-29")
        return 0
    except Exception as error:  # noqa: BLE001 - report anything that escapes the demo
        out.flush()
        sys.stderr.write(f"Unhandled exception: {error}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())