"""A stack-based four-function calculator working on intervals."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from classkit.interval import Interval

_OPERATIONS: dict[str, Callable[[Interval, Interval], Interval]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": lambda left, right: left / right,
}


def run(lines: Iterable[str]) -> Iterator[str]:
    """Evaluate calculator input, yielding the result printed for each operator.

    A line starting with ``+``, ``-``, ``*`` or ``/`` pops two intervals and
    pushes the result; any other line is read as an interval and pushed. An
    empty line ends the session.
    """
    stack: list[Interval] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            return
        operation = _OPERATIONS.get(line[0])
        if operation is None:
            stack.append(Interval.parse(line))
            continue
        if len(stack) < 2:
            raise IndexError("not enough operands on the stack")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
        yield str(stack[-1])


def _prompted(stream: TextIO, out: TextIO) -> Iterator[str]:
    out.write("> ")
    out.flush()
    for line in stream:
        yield line
        out.write("> ")
        out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on standard input."""
    out = sys.stdout
    try:
        for result in run(_prompted(sys.stdin, out)):
            out.write(result + "\n")
    except (ValueError, IndexError, ZeroDivisionError) as error:
        out.flush()
        sys.stderr.write(f"error: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())