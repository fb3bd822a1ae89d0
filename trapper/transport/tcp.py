# trapper/transport/tcp.py
from __future__ import annotations

import socket
from typing import Optional

from .base import Transport
from .errors import TransportIOError, TransportOpenError


class TCPTransport(Transport):
    """
    One TCP connection to a collector.

    Errors from the socket layer are re-raised with their message untouched.
    timeout applies to connect, read and write alike; None blocks forever.
    """

    def __init__(self, host: str, port: int, timeout: Optional[float] = None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.sock: Optional[socket.socket] = None

    def open(self) -> None:
        try:
            self.sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as e:
            self.sock = None
            raise TransportOpenError(str(e), details=_os_details(e, self)) from None

    def close(self) -> None:
        if self.sock is not None:
            try:
                self.sock.close()
            finally:
                self.sock = None

    def is_open(self) -> bool:
        return self.sock is not None

    def read(self, n: int) -> Optional[bytes]:
        if self.sock is None:
            raise TransportIOError("read while transport not open")

        try:
            return self.sock.recv(n)
        except OSError as e:
            raise TransportIOError(str(e), details=_os_details(e, self)) from None

    def write(self, data: bytes) -> int:
        if self.sock is None:
            raise TransportIOError("write while transport not open")

        try:
            self.sock.sendall(data)
        except OSError as e:
            raise TransportIOError(str(e), details=_os_details(e, self)) from None
        return len(data)

    def flush(self) -> None:
        if self.sock is None:
            raise TransportIOError("flush while transport not open")
        # sendall() leaves nothing buffered on our side


def _os_details(e: OSError, t: TCPTransport) -> dict:
    return {"errno": e.errno, "host": t.host, "port": t.port}
