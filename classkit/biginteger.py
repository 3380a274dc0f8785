"""Unsigned extended precision integers with a fixed maximum number of digits."""

from __future__ import annotations

import functools
from typing import Union

MAXIMUM_DIGITS = 128

_DIGITS = frozenset("0123456789")


class InvalidFormat(ValueError):
    """Raised when text used to build a BigInteger holds anything but decimal digits."""


_Operand = Union["BigInteger", int, str]


def _check_size(value: int, where: str) -> int:
    if value < 0:
        raise ArithmeticError(f"Underflow in {where}")
    if len(str(value)) > MAXIMUM_DIGITS:
        raise OverflowError(f"Overflow in {where}")
    return value


@functools.total_ordering
class BigInteger:
    """An unsigned integer of at most 128 decimal digits.

    A BigInteger is built from a non-negative ``int``, from a string of
    decimal digits (most significant first, leading zeros allowed, the empty
    string meaning zero) or from another BigInteger. Arithmetic with other
    BigIntegers, ints or digit strings gives a new BigInteger. Results that
    need more than 128 digits raise OverflowError; results below zero raise
    ArithmeticError.
    """

    maximum_digits = MAXIMUM_DIGITS

    __slots__ = ("_value",)

    def __init__(self, value: _Operand = 0) -> None:
        if isinstance(value, BigInteger):
            self._value = value._value
        elif isinstance(value, str):
            if not set(value) <= _DIGITS:
                raise InvalidFormat("Non-digit in BigInteger construction from text")
            self._value = _check_size(int(value) if value else 0, "BigInteger construction")
        elif isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise ValueError("BigInteger cannot hold a negative value")
            self._value = _check_size(value, "BigInteger construction")
        else:
            raise TypeError(f"cannot build a BigInteger from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> BigInteger | None:
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return BigInteger(other)
        return None

    def number_of_digits(self) -> int:
        """Return the count of significant decimal digits; zero has none."""
        return len(str(self._value)) if self._value else 0

    def __add__(self, other: _Operand) -> BigInteger:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return BigInteger(_check_size(self._value + right._value, "BigInteger addition"))

    def __radd__(self, other: _Operand) -> BigInteger:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left + self

    def __sub__(self, other: _Operand) -> BigInteger:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return BigInteger(_check_size(self._value - right._value, "BigInteger subtraction"))

    def __rsub__(self, other: _Operand) -> BigInteger:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left - self

    def __mul__(self, other: _Operand) -> BigInteger:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return BigInteger(_check_size(self._value * right._value, "BigInteger multiplication"))

    def __rmul__(self, other: _Operand) -> BigInteger:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left * self

    def __floordiv__(self, other: _Operand) -> BigInteger:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        if right._value == 0:
            raise ZeroDivisionError("BigInteger division by zero")
        return BigInteger(self._value // right._value)

    def __rfloordiv__(self, other: _Operand) -> BigInteger:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left // self

    def __mod__(self, other: _Operand) -> BigInteger:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        if right._value == 0:
            raise ZeroDivisionError("BigInteger modulo by zero")
        return BigInteger(self._value % right._value)

    def __rmod__(self, other: _Operand) -> BigInteger:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left % self

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInteger('{self._value}')"

    def __eq__(self, other: object) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return self._value == right._value

    def __lt__(self, other: _Operand) -> bool:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return self._value < right._value

    def __hash__(self) -> int:
        return hash(self._value)