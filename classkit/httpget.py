"""A minimal HTTP/1.0 client that fetches pages over a plain TCP connection."""

from __future__ import annotations

import socket
import sys
from typing import Sequence

NOT_CONNECTED = "not connected"
_BUFFER_SIZE = 1024


class HttpConnection:
    """A TCP connection to a web server, opened when the object is made.

    If the host cannot be resolved or the connection is refused the object
    is simply left unconnected, and ``get`` reports ``"not connected"``.
    """

    def __init__(self, host: str, port: int = 80) -> None:
        self._host = host
        self._port = port
        self._socket: socket.socket | None = None
        self._connect()

    def _connect(self) -> None:
        try:
            address = socket.gethostbyname(self._host)
        except (OSError, UnicodeError):
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((address, self._port))
        except (OSError, OverflowError, TypeError):
            sock.close()
            return
        self._socket = sock

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def connected(self) -> bool:
        """True while the connection to the server is open."""
        return self._socket is not None

    def get(self, absolute_path: str) -> str:
        """Send a GET request for ``absolute_path`` and return the whole response."""
        if self._socket is None:
            return NOT_CONNECTED
        request = f"GET {absolute_path} HTTP/1.0\r\n\r\n"
        self._socket.sendall(request.encode("latin-1"))
        chunks = []
        while chunk := self._socket.recv(_BUFFER_SIZE):
            chunks.append(chunk)
        return b"".join(chunks).decode("latin-1")

    def copy(self) -> HttpConnection:
        """Open a new, separate connection to the same host and port."""
        return HttpConnection(self._host, self._port)

    def close(self) -> None:
        """Close the connection; further requests report ``"not connected"``."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> HttpConnection:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "connected" if self.connected else "not connected"
        return f"HttpConnection({self._host!r}, {self._port}) [{state}]"


def make_multiple(primary: HttpConnection, count: int) -> list[HttpConnection]:
    """Return ``count`` fresh connections to the server ``primary`` talks to."""
    return [primary.copy() for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch ``/`` over five connections. Arguments: [host [port]]."""
    args = list(sys.argv[1:] if argv is None else argv)
    host = args[0] if args else "localhost"
    try:
        port = int(args[1]) if len(args) > 1 else 80
    except ValueError:
        sys.stderr.write(f"invalid port: {args[1]}\n")
        return 1

    out = sys.stdout
    with HttpConnection(host, port) as primary:
        connections = make_multiple(primary, 5)
        try:
            for count, connection in enumerate(connections, start=1):
                out.write(f"==========> {count}\n")
                out.write(connection.get("/") + "\n")
        finally:
            for connection in connections:
                connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())