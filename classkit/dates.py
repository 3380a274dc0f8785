"""Calendar dates restricted to the years 1950 through 2199."""

from __future__ import annotations

import datetime
import re
from typing import TextIO

MINIMUM_YEAR = 1950
MAXIMUM_YEAR = 2199

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_DATE_PATTERN = re.compile(
    r"(?P<iso_year>\d{4})-(?P<iso_month>\d{2})-(?P<iso_day>\d{2})"
    r"|(?P<us_month>\d{1,2})/(?P<us_day>\d{1,2})/(?P<us_year>\d{4})",
    re.ASCII,
)


class DateOutOfRange(ValueError):
    """Raised when a date would fall outside the supported range of years."""


class InvalidDate(ValueError):
    """Raised when a date is malformed or names a day that does not exist."""


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid month: {month}")
    length = _MONTH_LENGTHS[month - 1]
    if month == 2 and is_leap_year(year):
        length += 1
    return length


def _validate(year: int, month: int, day: int) -> None:
    if not MINIMUM_YEAR <= year <= MAXIMUM_YEAR:
        raise DateOutOfRange(f"Date out of range: year {year}")
    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid month: {month}")
    if not 1 <= day <= 31 or day > month_length(year, month):
        raise InvalidDate(f"Invalid day: {day}")


def _parse(text: str) -> tuple[int, int, int]:
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidDate(f"Invalid date string format: {text!r}")
    if match.group("iso_year") is not None:
        return (
            int(match.group("iso_year")),
            int(match.group("iso_month")),
            int(match.group("iso_day")),
        )
    return (
        int(match.group("us_year")),
        int(match.group("us_month")),
        int(match.group("us_day")),
    )


class Date:
    """A mutable calendar date between 1950-01-01 and 2199-12-31.

    Months and days are numbered from 1. Dates print as ``yyyy-mm-dd``; they
    can be read from that form or from ``mm/dd/yyyy`` with one- or two-digit
    month and day.
    """

    minimum_year = MINIMUM_YEAR
    maximum_year = MAXIMUM_YEAR

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int = MINIMUM_YEAR, month: int = 1, day: int = 1) -> None:
        _validate(year, month, day)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Build a date from ``yyyy-mm-dd`` or ``mm/dd/yyyy`` text."""
        return cls(*_parse(text))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def set(self, year: int, month: int, day: int) -> None:
        """Change this date; it is left unchanged if the new values are rejected."""
        _validate(year, month, day)
        self._year, self._month, self._day = year, month, day

    def set_from_string(self, text: str) -> None:
        """Change this date from text; it is left unchanged on error."""
        self.set(*_parse(text))

    def advance(self, delta: int = 1) -> None:
        """Move the date by ``delta`` days, backwards if negative.

        Raises DateOutOfRange, leaving the date unchanged, if the result
        would fall outside the supported range.
        """
        if delta == 0:
            return
        direction = "overflow" if delta > 0 else "underflow"
        try:
            moved = self._as_date() + datetime.timedelta(days=delta)
        except OverflowError:
            raise DateOutOfRange(f"Date {direction} in Date.advance") from None
        if not MINIMUM_YEAR <= moved.year <= MAXIMUM_YEAR:
            raise DateOutOfRange(f"Date {direction} in Date.advance")
        self._year, self._month, self._day = moved.year, moved.month, moved.day

    def _as_date(self) -> datetime.date:
        return datetime.date(self._year, self._month, self._day)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __copy__(self) -> Date:
        return Date(self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def __format__(self, spec: str) -> str:
        """Format as ``yyyy-mm-dd`` padded by the usual fill, align and width."""
        return format(str(self), spec)

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"


def difference(future: Date, past: Date) -> int:
    """Return the number of days from ``past`` to ``future`` (negative if earlier)."""
    return future._as_date().toordinal() - past._as_date().toordinal()


def read_date(stream: TextIO) -> Date:
    """Read one whitespace-delimited word from ``stream`` and parse it as a date."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    word = []
    while char and not char.isspace():
        word.append(char)
        char = stream.read(1)
    return Date.from_string("".join(word))