"""Listing the names of the entries in a directory."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Sequence


class DirectoryScanner:
    """Yields the names (without path) of the entries in a directory.

    A directory that cannot be opened yields no names.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = directory
        try:
            self._entries: Iterator[os.DirEntry[str]] | None = os.scandir(directory)
        except OSError:
            self._entries = None

    def __iter__(self) -> Iterator[str]:
        while self._entries is not None:
            try:
                entry = next(self._entries)
            except StopIteration:
                return
            yield entry.name

    def close(self) -> None:
        """Release the directory handle; later iteration yields nothing."""
        if self._entries is not None:
            self._entries.close()  # type: ignore[attr-defined]
            self._entries = None

    def __enter__(self) -> DirectoryScanner:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the entry names of the directory given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Usage: dirscan directory_name\n")
        return 1
    with DirectoryScanner(args[0]) as scanner:
        for name in scanner:
            sys.stdout.write(name + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())