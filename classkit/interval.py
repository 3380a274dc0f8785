"""Closed floating point intervals for representing uncertain values."""

from __future__ import annotations

import re

_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:infinity|inf|nan)",
    re.IGNORECASE | re.ASCII,
)


class _Reader:
    """Reads single characters and numbers from text, skipping whitespace."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _fail(self) -> ValueError:
        return ValueError(f"cannot read an interval from {self._text!r}")

    def char(self) -> str:
        self._skip_space()
        if self._pos >= len(self._text):
            raise self._fail()
        found = self._text[self._pos]
        self._pos += 1
        return found

    def number(self) -> float:
        self._skip_space()
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            raise self._fail()
        self._pos = match.end()
        return float(match.group())


class Interval:
    """A range ``[lower, upper]`` standing for an uncertain value.

    Addition and subtraction combine matching bounds. Multiplication and
    division follow interval arithmetic. Comparisons are made on the
    half-width of each interval.
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, lower: float, upper: float) -> None:
        self._lower = float(lower)
        self._upper = float(upper)

    @classmethod
    def parse(cls, text: str) -> Interval:
        """Read an interval written as ``[lower, upper]``.

        Any single non-blank character is accepted as a delimiter; text after
        the closing delimiter is ignored.
        """
        reader = _Reader(text)
        reader.char()
        lower = reader.number()
        reader.char()
        upper = reader.number()
        reader.char()
        return cls(lower, upper)

    @property
    def lower(self) -> float:
        return self._lower

    @property
    def upper(self) -> float:
        return self._upper

    def _half_width(self) -> float:
        return (self._upper - self._lower) / 2.0

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._lower + other._lower, self._upper + other._upper)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._lower - other._lower, self._upper - other._upper)

    def __mul__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        products = (
            self._lower * other._lower,
            self._lower * other._upper,
            self._upper * other._lower,
            self._upper * other._upper,
        )
        return Interval(min(products), max(products))

    def __truediv__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        if other._lower <= 0.0 <= other._upper:
            raise ZeroDivisionError("division by an interval that contains zero")
        return self * Interval(1.0 / other._upper, 1.0 / other._lower)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._half_width() == other._half_width()

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._half_width() < other._half_width()

    def __le__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return not self < other

    def __hash__(self) -> int:
        return hash(self._half_width())

    def __str__(self) -> str:
        return f"[{self._lower:g}, {self._upper:g}]"

    def __repr__(self) -> str:
        return f"Interval({self._lower!r}, {self._upper!r})"