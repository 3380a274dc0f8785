"""Demonstration of BigInteger addition on a large number."""

from __future__ import annotations

import sys
from typing import Sequence

from classkit.biginteger import BigInteger


def main(argv: Sequence[str] | None = None) -> int:
    """Add a large number to two small ones and print the sum."""
    w = BigInteger("1234567890987654321012345678909876543210000000000")
    x = BigInteger(9999)
    y = BigInteger(x)
    z = w + x + y
    sys.stdout.write(f"The sum is {z}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())