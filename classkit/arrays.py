"""Fixed-size arrays with bounds-checked element access."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Sequence

DEFAULT_SIZE = 32


class _FixedArray:
    """Storage and bounds checking shared by the fixed-size array types."""

    __slots__ = ("_items",)

    def __init__(self, size: int, default: Any = None) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"array size must be an int, not {type(size).__name__}")
        if size < 0:
            raise ValueError(f"array size must not be negative: {size}")
        self._items: list[Any] = [default] * size

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"array index must be an int, not {type(index).__name__}")
        if not 0 <= index < len(self._items):
            raise IndexError(f"{type(self).__name__}: Index out of range")
        return index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class StaticArray(_FixedArray):
    """An array whose size is part of its identity.

    Arrays of different sizes cannot be assigned to one another or ordered
    against one another. Equality is element by element and ordering is
    lexicographic.
    """

    __slots__ = ()

    def __init__(self, size: int, default: Any = None) -> None:
        super().__init__(size, default)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticArray) or len(other) != len(self):
            return NotImplemented
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __lt__(self, other: StaticArray) -> bool:
        if not isinstance(other, StaticArray) or len(other) != len(self):
            return NotImplemented
        for mine, theirs in zip(self, other):
            if mine < theirs:
                return True
            if not mine == theirs:
                return False
        return False

    def assign(self, other: StaticArray) -> None:
        """Copy every element of ``other``, which must have the same size."""
        if not isinstance(other, StaticArray) or len(other) != len(self):
            raise TypeError("StaticArray.assign: arrays of different sizes are different types")
        self._items = list(other._items)


class DynamicArray(_FixedArray):
    """An array whose size is fixed when it is made but checked only at run time."""

    __slots__ = ()

    def __init__(self, size: int, default: Any = None) -> None:
        super().__init__(size, default)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def assign(self, other: DynamicArray) -> None:
        """Copy every element of ``other``; raise ValueError if the sizes differ."""
        if not isinstance(other, DynamicArray):
            raise TypeError(f"cannot assign {type(other).__name__} to a DynamicArray")
        if other is self:
            return
        if len(other) != len(self):
            raise ValueError("DynamicArray.assign: Incompatible lengths")
        self._items = list(other._items)

    def copy(self) -> DynamicArray:
        """Return an independent array with the same size and elements."""
        result = DynamicArray(0)
        result._items = list(self._items)
        return result


def main(argv: Sequence[str] | None = None) -> int:
    """Compare, order and overrun character arrays."""
    out = sys.stdout
    array1 = StaticArray(DEFAULT_SIZE, "x")
    array2 = StaticArray(DEFAULT_SIZE, "\0")

    array2.assign(array1)
    if array1 == array2:
        out.write("Hello ")
    array2[0] = "y"
    if array1 < array2:
        out.write("World!\n")
    if array1 != array2:
        out.write("They are not equal!\n")
    out.flush()

    try:
        array1[DEFAULT_SIZE] = "z"
    except IndexError as error:
        sys.stderr.write(f"Unhandled exception: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())